"""Validation utilities for civiltime.

Civil-time fields are never range-checked: any integer is a valid
(possibly unnormalized) field value. What is checked is that each
argument really is an integer.

This module is not part of the public API.
"""

from __future__ import annotations

import operator

from civiltime.errors import ValidationError


def validate_integer(name: str, value: object) -> int:
    """Coerce a field or count argument to a plain int.

    Accepts anything implementing ``__index__`` (int, numpy integers)
    except bool, which is almost always a caller mistake.

    Args:
        name: The parameter name, used in the error message.
        value: The value to coerce.

    Returns:
        The value as a Python int.

    Raises:
        ValidationError: If the value is a bool or not integral.

    Examples:
        >>> validate_integer("month", 14)
        14

        >>> validate_integer("month", 1.5)
        Traceback (most recent call last):
        ...
        ValidationError: month must be an integer, got float
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got bool")
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None


__all__ = [
    "validate_integer",
]
