"""ComparisonResult dataclass for HTML comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of a compare() call.

    Attributes:
        equal: True iff ``differences`` is empty.
        differences: Human-readable difference records in traversal order.
            Each one names where it was found and both observed values.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds, including normalization of any markup inputs.
    """

    equal: bool
    differences: list[str]
    computation_time_ms: float

    def __bool__(self) -> bool:
        return self.equal
