"""
Tests for coordinate mapping: rotation, polar form, cube faces, cylinder

Run with: pytest tests/test_mapping.py -v
"""

import math

import pytest

from backend.lx import LXPoint
from patterns.mapping import (
    Face,
    centered,
    classify_face,
    cube_face_uv,
    cylinder_uv,
    effective_scale,
    polar,
    rotate,
)

EPS = 1e-6


class TestPlanar:
    """Planar helpers"""

    def test_centered(self):
        assert centered(LXPoint(0.5, 0.5)) == (0.0, 0.0)
        assert centered(LXPoint(1.0, 0.0)) == (0.5, -0.5)

    def test_effective_scale_range(self):
        assert effective_scale(0.0) == pytest.approx(0.2)
        assert effective_scale(1.0) == pytest.approx(1.7)

    def test_rotate_quarter_turn(self):
        x, y = rotate(1.0, 0.0, 0.25)
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(1.0)

    def test_rotate_zero_is_identity(self):
        assert rotate(0.3, -0.2, 0.0) == (0.3, -0.2)

    def test_polar_origin_is_zero_angle(self):
        assert polar(0.0, 0.0) == (0.0, 0.0)

    def test_polar(self):
        angle, radius = polar(0.0, 2.0)
        assert angle == pytest.approx(math.pi / 2)
        assert radius == pytest.approx(2.0)


class TestFaceClassification:
    """Dominant axis picks the face"""

    @pytest.mark.parametrize("xn,zn,face", [
        (1.0, 0.5, Face.EAST),
        (0.0, 0.5, Face.WEST),
        (0.5, 1.0, Face.NORTH),
        (0.5, 0.0, Face.SOUTH),
        (0.9, 0.3, Face.EAST),
        (0.2, 0.6, Face.WEST),
    ])
    def test_faces(self, xn, zn, face):
        assert classify_face(xn, zn) is face

    @pytest.mark.parametrize("xn,zn,face", [
        (1.0, 1.0, Face.NORTH),
        (0.0, 1.0, Face.NORTH),
        (1.0, 0.0, Face.SOUTH),
        (0.0, 0.0, Face.SOUTH),
        (0.75, 0.25, Face.SOUTH),
    ])
    def test_diagonal_ties_go_to_z_branch(self, xn, zn, face):
        assert classify_face(xn, zn) is face


class TestCubeFaceUV:
    """Perimeter coordinate continuity around the lateral faces"""

    def test_v_is_height(self):
        _, _, v = cube_face_uv(0.3, 0.7, 0.0)
        assert v == 0.7

    def test_continuous_across_face_center(self):
        """xn = 0.5 +/- eps on the South side lands on neighboring u"""
        _, u1, _ = cube_face_uv(0.5 - EPS, 0.4, 0.1)
        _, u2, _ = cube_face_uv(0.5 + EPS, 0.4, 0.1)
        assert abs(u2 - u1) == pytest.approx(2 * EPS)

    @pytest.mark.parametrize("before,after", [
        ((1.0 - EPS, 0.0), (1.0, EPS)),          # South -> East
        ((1.0, 1.0 - EPS), (1.0 - EPS, 1.0)),    # East -> North
        ((EPS, 1.0), (0.0, 1.0 - EPS)),          # North -> West
    ])
    def test_continuous_at_corners(self, before, after):
        f1, u1, _ = cube_face_uv(before[0], 0.5, before[1])
        f2, u2, _ = cube_face_uv(after[0], 0.5, after[1])
        assert abs(u2 - u1) < 4 * EPS

    def test_walk_around_is_monotonic(self):
        """Walking the perimeter in order never steps u backwards"""
        n = 50
        t = [i / n for i in range(n + 1)]
        walk = ([(x, 0.0) for x in t] + [(1.0, z) for z in t]
                + [(1.0 - x, 1.0) for x in t] + [(0.0, 1.0 - z) for z in t[:-1]])
        us = [cube_face_uv(x, 0.5, z)[1] for x, z in walk]
        assert all(b >= a - 1e-12 for a, b in zip(us, us[1:]))
        assert us[0] == 0.0
        assert us[-1] == pytest.approx(4.0 - 1.0 / n)

    def test_face_offsets(self):
        assert cube_face_uv(0.25, 0.5, 0.0)[:2] == (Face.SOUTH, 0.25)
        assert cube_face_uv(1.0, 0.5, 0.25)[:2] == (Face.EAST, 1.25)
        assert cube_face_uv(0.25, 0.5, 1.0)[:2] == (Face.NORTH, 2.75)
        assert cube_face_uv(0.0, 0.5, 0.25)[:2] == (Face.WEST, 3.75)

    def test_mirror_flips_north_only(self):
        assert cube_face_uv(0.25, 0.5, 1.0, mirror_ns=True)[1] == 2.25
        assert cube_face_uv(0.25, 0.5, 0.0, mirror_ns=True)[1] == 0.25
        assert cube_face_uv(1.0, 0.5, 0.25, mirror_ns=True)[1] == 1.25


class TestCylinder:
    """Helical wrap"""

    def test_height_shifts_u(self):
        u1, v1 = cylinder_uv(1.0, 0.0, 0.5)
        u2, v2 = cylinder_uv(1.0, 0.5, 0.5)
        assert u2 - u1 == pytest.approx(0.5)
        assert (v1, v2) == (0.0, 0.5)

    def test_angle_spans_one_turn(self):
        u_east, _ = cylinder_uv(1.0, 0.0, 0.5)
        u_north, _ = cylinder_uv(0.5, 0.0, 1.0)
        assert u_east == pytest.approx(0.5)
        assert u_north == pytest.approx(0.75)

    def test_axis_point_defined(self):
        u, v = cylinder_uv(0.5, 0.2, 0.5)
        assert u == pytest.approx(0.7)
