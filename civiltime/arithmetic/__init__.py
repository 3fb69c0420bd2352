"""Civil-time arithmetic operations.

This module provides functions for civil-time arithmetic:
    - Stepping civil times by units of their precision
    - Differences between civil times in any unit
    - Comparison operations across precisions
    - Calendar queries (weekdays, day of year)

The functions in this module serve as the canonical implementations.
They provide explicit function-based APIs that complement the
operator-based APIs on the civil time classes.

Arithmetic Operations (from civiltime.arithmetic.ops):
    - add: Step a civil time forward
    - subtract: Step backward, or count units between civil times
    - difference: Count units of any precision between civil times
    - step_fields, difference_fields, align_fields: The same on Fields

Comparison Operations (from civiltime.arithmetic.comparisons):
    - equal, not_equal: Test equality/inequality
    - less_than, less_equal: Test ordering
    - greater_than, greater_equal: Test ordering
    - compare: Return -1, 0, or 1 for comparison

Calendar Operations (from civiltime.arithmetic.calendar_ops):
    - get_weekday, next_weekday, prev_weekday, get_yearday
"""

from __future__ import annotations

from civiltime.arithmetic.ops import (
    add,
    subtract,
    difference,
    step_fields,
    difference_fields,
    align_fields,
)
from civiltime.arithmetic.comparisons import (
    equal,
    not_equal,
    less_than,
    less_equal,
    greater_than,
    greater_equal,
    compare,
)
from civiltime.arithmetic.calendar_ops import (
    get_weekday,
    next_weekday,
    prev_weekday,
    get_yearday,
)

__all__ = [
    # Arithmetic operations
    "add",
    "subtract",
    "difference",
    "step_fields",
    "difference_fields",
    "align_fields",
    # Comparison operations
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "compare",
    # Calendar operations
    "get_weekday",
    "next_weekday",
    "prev_weekday",
    "get_yearday",
]
