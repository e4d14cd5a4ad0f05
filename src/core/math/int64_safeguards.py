"""
Int64 Safeguards — Checked Integer Primitives

Модуль обеспечивает семантику 64-битных знаковых целых поверх
неограниченных int в Python:
- Границы диапазона INT64_MIN / INT64_MAX
- Checked сложение, умножение и смена знака (переполнение → exception)
- Валидация диапазона и checked разбор десятичной записи
- НОД (алгоритм Евклида) с политикой gcd(0, 0) = 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат, вышедший за [INT64_MIN, INT64_MAX], никогда не возвращается
   (поднимается Int64OverflowError, без clamp и без усечения)
2. gcd() всегда возвращает значение >= 1, поэтому деление на НОД безопасно
3. Все операции детерминированы и не имеют побочных эффектов
"""

import re
from typing import Final

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================

# Минимальное значение 64-битного знакового целого
INT64_MIN: Final[int] = -(2**63)

# Максимальное значение 64-битного знакового целого
INT64_MAX: Final[int] = 2**63 - 1

# Десятичная запись целого: необязательный знак и ASCII-цифры
_DECIMAL_PATTERN: Final = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Int64OverflowError(OverflowError):
    """
    Результат операции не помещается в 64-битное знаковое целое.

    Attributes:
        operation: Имя операции, на которой произошло переполнение
        value: Точный математический результат (для диагностики)
    """

    def __init__(self, operation: str, value: int):
        self.operation = operation
        self.value = value
        super().__init__(
            f"Int64 overflow in {operation}: {value} is outside "
            f"[{INT64_MIN}, {INT64_MAX}]"
        )


# =============================================================================
# ВАЛИДАЦИЯ ДИАПАЗОНА
# =============================================================================


def is_int64(value: int) -> bool:
    """
    Проверка, помещается ли значение в 64-битное знаковое целое.

    Examples:
        >>> is_int64(2**63 - 1)
        True
        >>> is_int64(2**63)
        False
    """
    return INT64_MIN <= value <= INT64_MAX


def validate_int64(value: int, operation: str = "value") -> int:
    """
    Проверка диапазона с exception.

    Args:
        value: Проверяемое значение
        operation: Имя операции для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (bool тоже отвергается)
        Int64OverflowError: Если value вне [INT64_MIN, INT64_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{operation} must be int, got {type(value).__name__}")

    if not is_int64(value):
        raise Int64OverflowError(operation, value)

    return value


# =============================================================================
# CHECKED АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """
    Сложение с контролем переполнения.

    Raises:
        Int64OverflowError: Если a + b вне диапазона int64
    """
    return validate_int64(a + b, "addition")


def checked_mul(a: int, b: int) -> int:
    """
    Умножение с контролем переполнения.

    Raises:
        Int64OverflowError: Если a * b вне диапазона int64
    """
    return validate_int64(a * b, "multiplication")


def checked_neg(a: int) -> int:
    """
    Смена знака с контролем переполнения.

    Единственное значение без пары: -INT64_MIN == INT64_MAX + 1.

    Raises:
        Int64OverflowError: Если a == INT64_MIN
    """
    return validate_int64(-a, "negation")


def checked_abs(a: int) -> int:
    """Модуль с контролем переполнения (abs(INT64_MIN) не помещается)."""
    return validate_int64(abs(a), "absolute value")


# =============================================================================
# НОД
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по алгоритму Евклида.

    Работает по модулям аргументов: (a, b) → (b, a mod b) пока b != 0.
    Терминальный случай «оба обнулились» отображается в 1, а не в 0:
    gcd(0, 0) = 1. Благодаря этому ноль всегда нормализуется в 0/1
    и деление на НОД никогда не делит на ноль.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(0, 5)
        5
        >>> gcd(0, 0)
        1
    """
    a = abs(a)
    b = abs(b)

    while b != 0:
        a, b = b, a % b

    return a or 1


# =============================================================================
# РАЗБОР ДЕСЯТИЧНОЙ ЗАПИСИ
# =============================================================================


def parse_int64(text: str) -> int:
    """
    Checked разбор десятичного целого.

    Принимает только необязательный знак и ASCII-цифры (без пробелов,
    подчёркиваний и Unicode-цифр, которые допускает int()).

    Args:
        text: Десятичная запись, например "-42"

    Returns:
        Целое в диапазоне int64

    Raises:
        ValueError: Если запись не является десятичным целым
        Int64OverflowError: Если значение вне диапазона int64
    """
    if _DECIMAL_PATTERN.fullmatch(text) is None:
        raise ValueError(f"Not a decimal integer: {text!r}")

    return validate_int64(int(text), "integer parsing")
