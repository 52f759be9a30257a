"""Type guard for parse results.

parse() signals invalid input with nan instead of raising. Hosts check the
result with is_valid_number() before committing it to the field value.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from spinfield.parsing import NumberParser, is_valid_number
    >>> result = NumberParser("en-US").parse("12x")
    >>> is_valid_number(result)
    False
"""

import math
from typing import TypeIs

__all__ = ["is_valid_number"]


def is_valid_number(value: float | None) -> TypeIs[float]:
    """Type guard: Check if a parsed number may be committed.

    Returns False for None, NaN, and Infinity values.

    Args:
        value: Result of parse() (or None where a host tracks "no value")

    Returns:
        True if value is a finite number, False otherwise
    """
    return value is not None and math.isfinite(value)
