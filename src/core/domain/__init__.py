"""
Domain models and value objects.

Contains the Fraction value type, its parser and the error taxonomy.
"""

from src.core.domain.batch_case import BatchCase, ExpectedError
from src.core.domain.errors import (
    FractionError,
    FractionFormatError,
    FractionOverflowError,
    InvalidFractionArgument,
)
from src.core.domain.fraction import (
    Fraction,
    add,
    from_mixed,
    make,
    to_string,
)
from src.core.domain.parsing import parse

__all__ = [
    # Errors
    "FractionError",
    "FractionFormatError",
    "FractionOverflowError",
    "InvalidFractionArgument",
    # Fraction value type
    "Fraction",
    "make",
    "from_mixed",
    "add",
    "to_string",
    # Parser
    "parse",
    # Batch case model
    "BatchCase",
    "ExpectedError",
]
