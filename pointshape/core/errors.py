"""Error types raised by point operations."""

from __future__ import annotations
from typing import Any


class InvalidArgumentError(ValueError):
    """
    Raised when an argument fails its precondition.

    Raised before any state is changed, so the point is left as it was.
    """

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        self.argument = argument
        self.value = value
        self.message = f"Invalid {argument} {value!r}: {reason}"
        super().__init__(self.message)


class DomainError(ArithmeticError):
    """A query whose result is mathematically undefined for its inputs."""


class SameLocationError(DomainError):
    """Two points share the same (x, y), so no angle exists between them."""

    def __init__(self, message: str = "points are at the same location") -> None:
        super().__init__(message)
