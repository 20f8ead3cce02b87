"""
Argument validation helpers shared by queries and mutations.
"""

import re

from hackernews.graphql.errors import ValidationError

_DIGITS = re.compile(r"[0-9]+")

# Largest value of the 32-bit Integer primary key columns
MAX_ID = 2**31 - 1


def parse_int_safe(value: str) -> int | None:
    """
    Parse an ID argument as a non-negative integer.

    Only plain ASCII digit strings are accepted; anything else (signs,
    whitespace, decimals, empty string) returns None instead of raising.
    Values above MAX_ID cannot name a stored row and also return None.
    """
    if not _DIGITS.fullmatch(value):
        return None
    parsed = int(value)
    if parsed > MAX_ID:
        return None
    return parsed


def apply_take_constraints(value: int, min: int, max: int) -> int:
    """
    Check that a 'take' argument lies within [min, max].

    Raises:
        ValidationError: Naming the value and the valid bounds
    """
    if value < min or value > max:
        raise ValidationError(
            f"'take' argument value '{value}' is outside the valid range "
            f"of '{min}' to '{max}'"
        )
    return value
