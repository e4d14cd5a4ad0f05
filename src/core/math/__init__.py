"""
Core math modules для Bruchrechner

Целочисленные примитивы с гарантией 64-битной семантики.
"""

# Int64 Safeguards
from src.core.math.int64_safeguards import (
    # Range constants
    INT64_MAX,
    INT64_MIN,
    # Exceptions
    Int64OverflowError,
    # Checked arithmetic
    checked_abs,
    checked_add,
    checked_mul,
    checked_neg,
    # Validation
    is_int64,
    validate_int64,
    # GCD / parsing
    gcd,
    parse_int64,
)

__all__ = [
    # Int64 Safeguards — Range constants
    "INT64_MAX",
    "INT64_MIN",
    # Int64 Safeguards — Exceptions
    "Int64OverflowError",
    # Int64 Safeguards — Checked arithmetic
    "checked_abs",
    "checked_add",
    "checked_mul",
    "checked_neg",
    # Int64 Safeguards — Validation
    "is_int64",
    "validate_int64",
    # Int64 Safeguards — GCD / parsing
    "gcd",
    "parse_int64",
]
