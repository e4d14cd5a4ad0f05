"""
BatchCase — Модель регрессионного кейса сложения

Immutable Pydantic модель одного кейса пакетного режима:
два операнда в текстовом виде и ожидаемый результат: либо каноническая
запись суммы, либо вид ошибки.
Соответствует элементу cases[] схемы batch_cases.json.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.domain.errors import (
    FractionError,
    FractionFormatError,
    FractionOverflowError,
    InvalidFractionArgument,
)


# =============================================================================
# ENUMS
# =============================================================================


class ExpectedError(str, Enum):
    """Вид ожидаемой ошибки ядра"""

    FORMAT = "format"
    INVALID_ARGUMENT = "invalid_argument"
    OVERFLOW = "overflow"

    @classmethod
    def of(cls, error: FractionError) -> "ExpectedError":
        """Классификация пойманной ошибки ядра."""
        if isinstance(error, FractionFormatError):
            return cls.FORMAT
        if isinstance(error, InvalidFractionArgument):
            return cls.INVALID_ARGUMENT
        if isinstance(error, FractionOverflowError):
            return cls.OVERFLOW
        raise TypeError(f"Unclassified fraction error: {type(error).__name__}")


# =============================================================================
# BATCH CASE MODEL
# =============================================================================


class BatchCase(BaseModel):
    """
    Кейс пакетного режима: left + right == expected.

    Immutable модель (frozen=True). Ровно одно из полей expected /
    expected_error должно быть задано.
    """

    left: str = Field(..., description="Первый операнд, например '1 1/2'")
    right: str = Field(..., description="Второй операнд, например '2 1/2'")
    expected: Optional[str] = Field(
        None, description="Ожидаемая каноническая запись суммы"
    )
    expected_error: Optional[ExpectedError] = Field(
        None, description="Ожидаемый вид ошибки вместо суммы"
    )
    description: Optional[str] = Field(None, description="Описание кейса")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_single_expectation(self) -> "BatchCase":
        """Проверка: задано ровно одно ожидание."""
        if (self.expected is None) == (self.expected_error is None):
            raise ValueError("exactly one of expected / expected_error must be set")
        return self

    @property
    def label(self) -> str:
        """Человекочитаемая запись кейса для отчёта."""
        if self.description:
            return self.description
        outcome = self.expected if self.expected is not None else self.expected_error.value
        return f"{self.left} + {self.right} == {outcome}"
