from .geometry import Point, RelativeDirection
from .parameters import MotionConfig

__all__ = [
    "Point", "RelativeDirection",
    "MotionConfig",
]
