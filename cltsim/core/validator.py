"""Input validation utilities."""

from __future__ import annotations

import math
from numbers import Integral, Real


class ParameterError(ValueError):
    """Raised when simulation or test parameters are invalid."""


def validate_rate(rate: float) -> float:
    """Ensure the exponential rate is a finite, strictly positive number."""
    if isinstance(rate, bool) or not isinstance(rate, Real):
        raise ParameterError(f"rate must be a number, got {type(rate).__name__}")
    rate = float(rate)
    if not math.isfinite(rate) or rate <= 0:
        raise ParameterError(f"rate must be a positive finite number, got {rate!r}")
    return rate


def validate_count(value: int, name: str) -> int:
    """Ensure a sample or simulation count is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ParameterError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ParameterError(f"{name} must be positive, got {value}")
    return int(value)
