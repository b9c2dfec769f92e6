"""Motion policy configuration."""

from __future__ import annotations
from pydantic import BaseModel


class MotionConfig(BaseModel):
    """Controls how a point applies position updates."""
    truncate_positions: bool = True  # Drop fractional movement (toward zero)
    reuse_rotated_x: bool = True     # rotate_about_point derives y from the rotated x
