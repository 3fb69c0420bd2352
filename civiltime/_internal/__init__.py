"""Internal machinery for civiltime.

This module contains private implementation details:
    - Constants and magic numbers
    - The normalized Fields tuple
    - Calendar rules and the day-ordinal engine
    - The field normalization cascade
    - Argument validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.fields import Fields
from civiltime._internal.normalize import normalize_fields
from civiltime._internal.validation import validate_integer

__all__: list[str] = [
    "Fields",
    "normalize_fields",
    "validate_integer",
]
