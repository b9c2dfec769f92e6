"""A 2D point with a facing direction, and its relative-geometry queries."""

from __future__ import annotations
import math
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, ValidationError

from pointshape.core import angles
from pointshape.core.errors import InvalidArgumentError, SameLocationError
from pointshape.core.logging_config import get_logger
from pointshape.core.validation import FiniteFloat, finite_real, positive_real

from .parameters import MotionConfig

logger = get_logger(__name__)


class RelativeDirection(str, Enum):
    FRONT = "front"
    RIGHT = "right"
    BACK = "back"
    LEFT = "left"


class Point(BaseModel):
    """
    Point in cartesian space facing a direction in radians.

    A heading of 0 faces +y and headings grow clockwise, so pi/2 faces +x.
    The direction given at construction is stored as is; set_direction()
    normalizes into [0, 2*pi), rotate() adds a normalized delta on top of
    whatever is stored.
    """
    x: FiniteFloat
    y: FiniteFloat
    r: FiniteFloat
    config: MotionConfig = Field(default_factory=MotionConfig, repr=False)

    def __init__(
        self,
        x: float,
        y: float,
        r: float,
        config: Optional[MotionConfig] = None,
        **data: Any,
    ) -> None:
        if config is not None:
            data["config"] = config
        try:
            super().__init__(x=x, y=y, r=r, **data)
        except ValidationError as exc:
            error = exc.errors()[0]
            name = str(error["loc"][0]) if error["loc"] else "point"
            raise InvalidArgumentError(name, error["input"], error["msg"]) from exc

    def get_location(self) -> tuple[float, float]:
        return (self.x, self.y)

    def set_location(self, x: float, y: float) -> None:
        x = finite_real("x", x)
        y = finite_real("y", y)
        self.x = x
        self.y = y

    def get_direction(self) -> float:
        return self.r

    def set_direction(self, r: float) -> None:
        """Face `r` radians, normalized into [0, 2*pi)."""
        self.r = angles.normalize_radian(finite_real("r", r))

    @staticmethod
    def normalize_radian(radians: float) -> float:
        return angles.normalize_radian(finite_real("radians", radians))

    def _rounding(self, argument: str, value: float) -> Callable[[float], float]:
        rounding = angles.truncate_to_int if self.config.truncate_positions else angles.keep_fraction

        def checked(offset: float) -> float:
            if not math.isfinite(offset):
                raise _out_of_range(argument, value)
            return rounding(offset)

        return checked

    def advance(self, distance: float) -> None:
        """
        Move `distance` forward along the facing direction.

        Each axis moves by a truncated amount under the default config, so a
        step shorter than one unit along an axis leaves that axis unchanged.
        """
        distance = positive_real("distance", distance)
        rounding = self._rounding("distance", distance)
        x = self.x + rounding(math.sin(self.r) * distance)
        y = self.y + rounding(math.cos(self.r) * distance)
        self.x, self.y = _finite_position("distance", distance, x, y)
        logger.debug("Advanced %s to (%s, %s)", distance, self.x, self.y)

    def rotate(self, r: float) -> None:
        """Turn by `r` radians. The sum is not wrapped back into [0, 2*pi)."""
        self.r = self.r + angles.normalize_radian(finite_real("r", r))

    def rotate_about_point(self, origin: Point, r: float) -> None:
        """
        Rotate around `origin` by `r` radians, turning the facing direction too.
        """
        _require_point("origin", origin)
        r = angles.normalize_radian(finite_real("r", r))
        x, y = angles.rotate_coordinates(
            self.x,
            self.y,
            origin.x,
            origin.y,
            r,
            reuse_rotated_x=self.config.reuse_rotated_x,
            rounding=self._rounding("r", r),
        )
        self.x, self.y = _finite_position("r", r, x, y)
        self.rotate(r)
        logger.debug(
            "Rotated %s about (%s, %s) to (%s, %s)", r, origin.x, origin.y, self.x, self.y
        )

    def get_distance_to_point(self, other: Point) -> float:
        _require_point("other", other)
        return math.hypot(self.x - other.x, self.y - other.y)

    def get_angle_to_point(self, other: Point) -> float:
        """
        Angle from this point's facing direction to `other`.

        Not normalized: the result can exceed 2*pi once the point is facing
        anything other than 0.
        """
        _require_point("other", other)
        if self.x == other.x and self.y == other.y:
            raise SameLocationError()
        atan = math.atan2(other.y - self.y, other.x - self.x)
        return angles.compose_angle(atan, self.get_direction())

    def get_direction_to_point(self, other: Point) -> RelativeDirection:
        return RelativeDirection(angles.classify_angle(self.get_angle_to_point(other)))

    def copy_point(self) -> Point:
        """Independent copy, including the motion config."""
        return self.model_copy(deep=True)


def _require_point(name: str, value: Any) -> None:
    if not isinstance(value, Point):
        raise InvalidArgumentError(name, value, "expected a Point")


def _out_of_range(argument: str, value: float) -> InvalidArgumentError:
    return InvalidArgumentError(argument, value, "moves the point outside the finite float range")


def _finite_position(argument: str, value: float, x: float, y: float) -> tuple[float, float]:
    if not (math.isfinite(x) and math.isfinite(y)):
        raise _out_of_range(argument, value)
    return x, y
