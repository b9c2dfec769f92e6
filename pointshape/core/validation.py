"""Numeric argument checks shared by the point mutators."""

from __future__ import annotations
from typing import Annotated, Any

from pydantic import Field, TypeAdapter, ValidationError

from pointshape.core.errors import InvalidArgumentError
from pointshape.core.logging_config import get_logger

logger = get_logger(__name__)


# int or float, never bool or str, never NaN/inf
FiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]
PositiveFloat = Annotated[float, Field(strict=True, allow_inf_nan=False, gt=0)]

_finite = TypeAdapter(FiniteFloat)
_positive = TypeAdapter(PositiveFloat)


def _check(adapter: TypeAdapter, name: str, value: Any, reason: str) -> float:
    try:
        return adapter.validate_python(value)
    except ValidationError as exc:
        logger.debug("Rejected %s=%r: %s", name, value, exc.errors()[0]["msg"])
        raise InvalidArgumentError(name, value, reason) from exc


def finite_real(name: str, value: Any) -> float:
    """Return value as a float, or raise InvalidArgumentError if it is not a finite real."""
    return _check(_finite, name, value, "expected a finite real number")


def positive_real(name: str, value: Any) -> float:
    """Return value as a float, or raise InvalidArgumentError unless it is finite and > 0."""
    return _check(_positive, name, value, "expected a finite real number greater than 0")
