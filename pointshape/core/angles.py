"""Angle and coordinate arithmetic behind the point operations.

Everything here is a pure function of its arguments. Angles are radians,
measured clockwise from the positive y axis (a heading of 0 faces +y,
a heading of pi/2 faces +x).
"""

from __future__ import annotations
import math
from typing import Callable

PI = math.pi
PI2 = 2 * math.pi    # full turn
PIP2 = math.pi / 2   # quarter turn
PIP4 = math.pi / 4   # half-width of a direction sector


def truncate_to_int(value: float) -> int:
    """Drop the fractional part, rounding toward zero (-2.7 -> -2)."""
    return math.trunc(value)


def keep_fraction(value: float) -> float:
    """Position policy that applies movement unchanged."""
    return value


def normalize_radian(radians: float) -> float:
    """
    Map an angle into [0, 2*pi).

    Negative angles wrap backwards from a full turn, so -pi/2 becomes 3*pi/2.
    """
    turns = radians / PI2
    fraction = turns - math.trunc(turns)
    result = PI2 + fraction * PI2 if fraction < 0 else fraction * PI2
    # A tiny negative fraction rounds up to exactly one full turn.
    if result >= PI2:
        return 0.0
    return result


def rotate_coordinates(
    x: float,
    y: float,
    origin_x: float,
    origin_y: float,
    angle: float,
    reuse_rotated_x: bool = True,
    rounding: Callable[[float], float] = truncate_to_int,
) -> tuple[float, float]:
    """
    Rotate (x, y) about (origin_x, origin_y) and return the new pair.

    `rounding` is applied to each rotated offset before the origin is added
    back. With `reuse_rotated_x` the y component is computed from the
    already rotated x, which is how points have always rotated; pass False
    for a true rotation.
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    new_x = origin_x + rounding(cos_a * (x - origin_x) - sin_a * (y - origin_y))
    source_x = new_x if reuse_rotated_x else x
    new_y = origin_y + rounding(sin_a * (source_x - origin_x) + cos_a * (y - origin_y))
    return new_x, new_y


def compose_angle(atan: float, heading: float) -> float:
    """
    Turn a raw atan2 bearing into an angle relative to `heading`.

    The result is not normalized and can exceed 2*pi.
    """
    if atan <= 0:  # lower half
        return abs(atan) + PIP2 + heading
    elif atan <= PIP2:  # upper right quadrant
        return abs(atan - PIP2) + heading
    else:  # upper left quadrant
        return PI2 - atan + PIP2 + heading


def classify_angle(angle: float) -> str:
    """Label an angle as front, right, back or left using 90 degree sectors."""
    if -PIP4 < angle <= PIP4:
        return "front"
    if PIP4 < angle <= PI - PIP4:
        return "right"
    if PI - PIP4 < angle <= PI + PIP4:
        return "back"
    return "left"
