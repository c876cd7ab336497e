"""
Tests for the preview engine and fixture geometry

Run with: pytest tests/test_engine.py -v
"""

import base64
import logging
from io import BytesIO

import numpy as np
import pytest
from PIL import Image

from backend.engine import PatternEngine
from backend.geometry import cube_points, plane_points
from backend.params import ParameterError

from patterns import swatch


@pytest.fixture
def engine(testing_config):
    return PatternEngine(testing_config)


def decode(image_data):
    header, encoded = image_data.split(',', 1)
    assert header == "data:image/jpeg;base64"
    return Image.open(BytesIO(base64.b64decode(encoded)))


# ============================================================
# GEOMETRY
# ============================================================

class TestGeometry:
    def test_plane_grid(self):
        points, pixels = plane_points(4, 3)
        assert len(points) == len(pixels) == 12
        assert (points[0].xn, points[0].yn) == (0.0, 1.0)
        assert (points[-1].xn, points[-1].yn) == (1.0, 0.0)
        assert pixels[-1] == (3, 2)
        assert [p.index for p in points] == list(range(12))

    def test_single_column_is_centered(self):
        points, _ = plane_points(1, 1)
        assert (points[0].xn, points[0].yn) == (0.5, 0.5)

    def test_cube_faces_side_by_side(self):
        points, pixels = cube_points(4, 2)
        assert len(points) == 32
        cols = sorted({c for c, _ in pixels})
        assert cols == list(range(16))

    def test_cube_points_on_lateral_faces(self):
        points, _ = cube_points(5, 2)
        for p in points:
            assert p.xn in (0.0, 1.0) or p.zn in (0.0, 1.0)


# ============================================================
# ENGINE
# ============================================================

class TestPatternEngine:
    def test_load_pattern(self, engine):
        ok, message = engine.load_pattern("moire")
        assert ok, message
        assert engine.size == (8, 6)
        assert len(engine.points) == 48

    def test_load_cube_pattern(self, engine):
        ok, _ = engine.load_pattern("quasicrystal-cube")
        assert ok
        assert engine.size == (16, 6)

    def test_load_unknown_pattern(self, engine):
        ok, message = engine.load_pattern("plasma")
        assert not ok
        assert "Error loading pattern" in message
        assert engine.pattern is None

    def test_render_without_pattern(self, engine):
        assert engine.render_frame(16) == (None, "No pattern loaded")

    def test_render_frame_is_jpeg(self, engine):
        engine.load_pattern("quasicrystal")
        image_data, error = engine.render_frame(33.3)
        assert error is None
        img = decode(image_data)
        assert img.size == (8, 6)
        assert engine.frame_count == 1

    def test_render_pixels_match_render_point(self, engine):
        engine.load_pattern("glowing-seed")
        frame = engine.render_pixels(0)
        point, (col, row) = engine.points[10], engine.pixels[10]
        expected = engine.pattern.render_point(point, 0, engine.params).rgb()
        assert tuple(int(v) for v in frame[row, col]) == expected

    def test_swatch_fills_frame(self, engine):
        engine.load_pattern("swatch")
        engine.set_knob_value("index", 3)
        frame = engine.render_pixels(0)
        assert np.all(frame == np.array(swatch.SWATCH[3].rgb(), dtype=np.uint8))

    def test_knob_clamped_to_declared_range(self, engine):
        engine.load_pattern("moire")
        engine.set_knob_value("brt", 4.0)
        assert engine.params.brt == 1.0
        engine.set_knob_value("brt", -1)
        assert engine.params.brt == 0.0

    def test_integer_knob_rounded(self, engine):
        engine.load_pattern("swatch")
        engine.set_knob_value("index", 2.5)
        assert engine.params.index == 3

    def test_set_toggle(self, engine):
        engine.load_pattern("quasicrystal")
        engine.set_toggle("fade", False)
        assert engine.params.fade is False

    def test_wrong_parameter_kind(self, engine):
        engine.load_pattern("quasicrystal")
        with pytest.raises(TypeError):
            engine.set_toggle("brt", True)
        with pytest.raises(TypeError):
            engine.set_knob_value("fade", 1.0)
        with pytest.raises(ParameterError):
            engine.set_knob_value("missing", 0.1)

    def test_set_before_load(self, engine):
        with pytest.raises(RuntimeError):
            engine.set_knob_value("brt", 0.1)

    def test_animation_advances_angle(self, engine, testing_config):
        engine.load_pattern("moire")
        start = engine.params.angle
        engine.render_frame(1000.0)
        assert engine.params.angle == pytest.approx(start + 1000.0 * testing_config.ANIMATION_RATE)

    def test_animation_wraps(self, engine):
        engine.load_pattern("moire")
        engine.set_knob_value("angle", 1.0)
        engine.advance_animation(1000.0)
        assert 0.0 <= engine.params.angle < 1.0

    def test_animation_off(self, engine):
        engine.load_pattern("moire")
        engine.set_toggle("animate", False)
        engine.render_frame(1000.0)
        assert engine.params.angle == 0.5

    def test_patterns_without_animation_untouched(self, engine):
        engine.load_pattern("glowing-seed")
        before = engine.params
        engine.render_frame(1000.0)
        assert engine.params == before

    def test_frame_count_logged(self, engine, testing_config, caplog):
        engine.load_pattern("swatch")
        with caplog.at_level(logging.INFO, logger="backend.engine"):
            for _ in range(testing_config.TARGET_FPS):
                engine.render_frame(1.0)
        assert f"Rendered {testing_config.TARGET_FPS} frames" in caplog.text

    def test_status(self, engine):
        assert engine.get_status()['pattern_loaded'] is False
        engine.load_pattern("quasicrystal-cube")
        status = engine.get_status()
        assert status['current_pattern'] == "quasicrystal-cube"
        assert status['params']['brt'] == 1.25
        assert {s['key'] for s in status['schema']} >= {"mirrorNSFaces", "use3D"}
        assert status['resolution'] == (16, 6)
