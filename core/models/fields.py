# =============================================================================
# core/models/fields.py - Shared Field Coercion
# =============================================================================
# Helpers used by model validators to coerce untrusted upstream values.
# =============================================================================

import math
from typing import Any


def coerce_number(value: Any, field_name: str) -> float:
    """
    Coerce a numeric-like value to a finite float.

    Accepts ints, floats and numeric strings. Booleans are rejected even
    though Python treats them as ints.

    Raises:
        ValueError: If the value is not numeric or not finite
    """
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number, got a boolean")

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise ValueError(f"{field_name} must be finite, got {value!r}") from None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ValueError(f"{field_name} must be a number, got {value!r}") from None
    else:
        raise ValueError(f"{field_name} must be a number, got {type(value).__name__}")

    if not math.isfinite(number):
        raise ValueError(f"{field_name} must be finite, got {value!r}")
    return number
