"""
validators.py

Shared codes for input validation in huffcodec.
"""


import math
from numbers import Real
from typing import Any

from .errors import InvalidInput


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_symbol(symbol: Any) -> None:
    """Validate that symbol is a single character."""
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise InvalidInput(f"Symbol must be a single character, got {symbol!r}")


def validate_weight(weight: Any) -> None:
    """Validate that weight is a finite, non-negative number."""
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidInput(f"Weight must be a number, got {weight!r}")
    try:
        as_float = float(weight)
    except OverflowError:
        raise InvalidInput(f"Weight is too large to be represented as a float: {weight!r}")
    if not math.isfinite(as_float):
        raise InvalidInput(f"Weight must be finite, got {weight!r}")
    if weight < 0:
        raise InvalidInput(f"Weight must be non-negative, got {weight!r}")
