"""
Tests for the angle and coordinate helpers.
"""

import math

import pytest

from pointshape.core import angles
from pointshape.core.angles import (
    classify_angle,
    compose_angle,
    keep_fraction,
    normalize_radian,
    rotate_coordinates,
    truncate_to_int,
)


class TestTruncateToInt:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value, expected",
        [(2.7, 2), (-2.7, -2), (0.999, 0), (-0.999, 0), (5.0, 5)],
    )
    def test_rounds_toward_zero(self, value, expected):
        assert truncate_to_int(value) == expected


class TestNormalizeRadian:

    @pytest.mark.unit
    def test_negative_quarter_wraps_to_three_quarters(self):
        assert normalize_radian(-math.pi / 2) == pytest.approx(3 * math.pi / 2)

    @pytest.mark.unit
    def test_value_in_range_is_kept(self):
        assert normalize_radian(math.pi / 2) == math.pi / 2

    @pytest.mark.unit
    def test_full_turn_is_zero(self):
        assert normalize_radian(2 * math.pi) == 0.0

    @pytest.mark.unit
    def test_multiple_turns_are_removed(self):
        assert normalize_radian(5 * math.pi / 2) == pytest.approx(math.pi / 2)
        assert normalize_radian(-7 * math.pi / 2) == pytest.approx(math.pi / 2)

    @pytest.mark.unit
    def test_tiny_negative_does_not_reach_full_turn(self):
        assert normalize_radian(-1e-20) == 0.0

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "radians",
        [-1000.0, -2 * math.pi, -math.pi, -0.1, 0.0, 0.1, math.pi, 2 * math.pi, 7.0, 1e6],
    )
    def test_result_in_half_open_range(self, radians):
        result = normalize_radian(radians)
        assert 0.0 <= result < angles.PI2

    @pytest.mark.unit
    @pytest.mark.parametrize("radians", [1.0, 2.5, 4.0, -1.0])
    @pytest.mark.parametrize("turns", [-3, -1, 1, 4])
    def test_whole_turns_do_not_change_result(self, radians, turns):
        shifted = radians + turns * 2 * math.pi
        assert normalize_radian(shifted) == pytest.approx(normalize_radian(radians), abs=1e-9)


class TestRotateCoordinates:

    @pytest.mark.unit
    def test_reuses_rotated_x_by_default(self):
        assert rotate_coordinates(2, 1, 1, 1, math.pi / 2) == (1, 1)

    @pytest.mark.unit
    def test_true_rotation_uses_original_x(self):
        assert rotate_coordinates(2, 1, 1, 1, math.pi / 2, reuse_rotated_x=False) == (1, 2)

    @pytest.mark.unit
    def test_half_turn(self):
        assert rotate_coordinates(2, 1, 3, 2, math.pi) == (4, 3)

    @pytest.mark.unit
    def test_truncates_offset_not_origin(self):
        assert rotate_coordinates(3.5, 0, 0.5, 0, 0.0) == (3.5, 0)

    @pytest.mark.unit
    def test_keep_fraction_rounding(self):
        x, y = rotate_coordinates(
            2, 1, 1, 1, math.pi / 2, reuse_rotated_x=False, rounding=keep_fraction
        )
        assert x == pytest.approx(1)
        assert y == pytest.approx(2)


class TestComposeAngle:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "atan, expected",
        [
            (math.pi / 2, 0.0),                    # straight ahead
            (0.0, math.pi / 2),                    # lower half boundary
            (-math.pi / 2, math.pi),               # lower half
            (math.pi / 4, math.pi / 4),            # upper right quadrant
            (math.pi, 3 * math.pi / 2),            # upper left quadrant
            (3 * math.pi / 4, 7 * math.pi / 4),    # upper left quadrant
        ],
    )
    def test_quadrants(self, atan, expected):
        assert compose_angle(atan, 0.0) == pytest.approx(expected)

    @pytest.mark.unit
    def test_heading_is_added_without_wrapping(self):
        assert compose_angle(math.pi, math.pi) == pytest.approx(5 * math.pi / 2)


class TestClassifyAngle:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0.0, "front"),
            (angles.PIP4, "front"),
            (angles.PIP4 + 1e-9, "right"),
            (math.pi / 2, "right"),
            (angles.PI - angles.PIP4, "right"),
            (math.pi, "back"),
            (angles.PI + angles.PIP4, "back"),
            (3 * math.pi / 2, "left"),
            (-angles.PIP4, "left"),
        ],
    )
    def test_sectors(self, angle, expected):
        assert classify_angle(angle) == expected

    @pytest.mark.unit
    def test_raw_angle_past_full_turn_is_left(self):
        # 2*pi + a little would be "front" after normalizing
        assert classify_angle(2 * math.pi + 0.1) == "left"
