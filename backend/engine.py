"""
Pattern preview engine - evaluates a pattern over a fixture layout
and renders the result to an image.

This plays the host's part for development: it owns the knob and toggle
values, drives animated knobs between frames, and runs the per-point
render function over every point of the fixture.
"""

import base64
import logging
import traceback
from io import BytesIO

import numpy as np
from PIL import Image

from backend.geometry import cube_points, plane_points
from backend.params import Knob, Toggle
from backend.lx import clamp, round_half_up
from config import get_config
from patterns import CUBE, get_pattern

logger = logging.getLogger(__name__)


class PatternEngine:
    def __init__(self, config=None):
        self.config = config or get_config()
        self.pattern = None
        self.params = None
        self.points = []
        self.pixels = []
        self.size = (0, 0)
        self.frame_count = 0

    def load_pattern(self, name):
        """Load a registered pattern with its declared defaults"""
        try:
            info = get_pattern(name)
            if info.geometry == CUBE:
                face = self.config.CUBE_FACE_WIDTH
                self.points, self.pixels = cube_points(face, self.config.PREVIEW_HEIGHT)
                self.size = (face * 4, self.config.PREVIEW_HEIGHT)
            else:
                self.points, self.pixels = plane_points(self.config.PREVIEW_WIDTH,
                                                        self.config.PREVIEW_HEIGHT)
                self.size = (self.config.PREVIEW_WIDTH, self.config.PREVIEW_HEIGHT)

            self.pattern = info
            self.params = info.params()
            self.frame_count = 0
            logger.info("Loaded pattern '%s' (%d points)", info.name, len(self.points))
            return True, f"Pattern '{info.title}' loaded successfully"

        except Exception as e:
            logger.error("Error loading pattern %r: %s", name, e)
            error_msg = f"Error loading pattern: {str(e)}\n{traceback.format_exc()}"
            return False, error_msg

    def _declaration(self, key):
        if not self.pattern:
            raise RuntimeError("No pattern loaded")
        return self.params.declaration(key)

    def set_knob_value(self, key, value):
        """Set a knob by host key, clamped to its declared range"""
        name, decl = self._declaration(key)
        if not isinstance(decl, Knob):
            raise TypeError(f"'{key}' is not a knob")
        value = clamp(float(value), decl.min, decl.max)
        if decl.integer:
            value = round_half_up(value)
        self.params = self.params.with_values(**{name: value})
        logger.debug("Knob %s set to %s", key, value)

    def set_toggle(self, key, value):
        name, decl = self._declaration(key)
        if not isinstance(decl, Toggle):
            raise TypeError(f"'{key}' is not a toggle")
        self.params = self.params.with_values(**{name: bool(value)})
        logger.debug("Toggle %s set to %s", key, bool(value))

    def advance_animation(self, delta_ms):
        """Sweep the pattern's animated knob while its animate toggle is on"""
        key = self.pattern.animated_knob
        if not key or not self.params.values().get('animate', False):
            return
        name, _ = self.params.declaration(key)
        phase = (getattr(self.params, name) + delta_ms * self.config.ANIMATION_RATE) % 1.0
        self.params = self.params.with_values(**{name: phase})

    def render_pixels(self, delta_ms):
        """Evaluate the pattern at every point into an (h, w, 3) uint8 array"""
        width, height = self.size
        frame = np.zeros((height, width, 3), dtype=np.uint8)
        render_point = self.pattern.render_point
        params = self.params
        for point, (col, row) in zip(self.points, self.pixels):
            frame[row, col] = render_point(point, delta_ms, params).rgb()
        return frame

    def render_frame(self, delta_ms=0.0):
        """Render one frame and return as base64 image"""
        try:
            if not self.pattern:
                return None, "No pattern loaded"

            self.advance_animation(delta_ms)
            frame = self.render_pixels(delta_ms)

            img = Image.fromarray(frame, 'RGB')
            buffer = BytesIO()
            img.save(buffer, format='JPEG', quality=self.config.JPEG_QUALITY)
            img_base64 = base64.b64encode(buffer.getvalue()).decode('utf-8')

            self.frame_count += 1
            if self.frame_count % self.config.TARGET_FPS == 0:
                logger.info("Rendered %d frames", self.frame_count)

            return f"data:image/jpeg;base64,{img_base64}", None

        except Exception as e:
            logger.error("Error rendering frame: %s", e)
            error_msg = f"Error rendering frame: {str(e)}\n{traceback.format_exc()}"
            return None, error_msg

    def get_status(self):
        """Get current engine status"""
        return {
            'pattern_loaded': self.pattern is not None,
            'current_pattern': self.pattern.name if self.pattern else None,
            'params': self.params.values() if self.params else {},
            'schema': self.params.schema() if self.params else [],
            'resolution': self.size,
            'frame_count': self.frame_count,
        }
