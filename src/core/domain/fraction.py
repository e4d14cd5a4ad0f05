"""
Fraction — Точная рациональная дробь над int64

Immutable value type: числитель и знаменатель в каноническом виде.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (выполняются для каждого экземпляра):
1. denominator > 0 (знак хранится только в числителе)
2. gcd(|numerator|, denominator) == 1; ноль хранится как 0/1
3. denominator != 0 (нулевой знаменатель отвергается при создании)
4. numerator и denominator лежат в [INT64_MIN, INT64_MAX]

ОПЕРАЦИИ:
    make(n, d)                 нормализующий конструктор (== Fraction(n, d))
    from_mixed(whole, n, d)    смешанное число → дробь
    add(a, b)                  сложение (== a + b) с частичным сокращением
    to_string(f)               каноническая запись (== str(f))

Переполнение на любом шаге → FractionOverflowError, без clamp и без
перехода на неограниченные целые.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from src.core.domain.errors import FractionOverflowError, InvalidFractionArgument
from src.core.math.int64_safeguards import (
    Int64OverflowError,
    checked_abs,
    checked_add,
    checked_mul,
    checked_neg,
    gcd,
    validate_int64,
)


@contextmanager
def _int64_guard(operation: str) -> Iterator[None]:
    """Перевод Int64OverflowError в доменную FractionOverflowError."""
    try:
        yield
    except Int64OverflowError as e:
        raise FractionOverflowError(
            f"Arithmetic overflow in {operation}: {e}", operation=operation
        ) from e


# =============================================================================
# FRACTION
# =============================================================================


@dataclass(frozen=True)
class Fraction:
    """
    Рациональное число в несократимом виде.

    Конструктор нормализует аргументы: переносит знак в числитель и
    сокращает на НОД. Поэтому Fraction(2, -4) == Fraction(-1, 2).

    Raises:
        InvalidFractionArgument: Если denominator == 0
        FractionOverflowError: Если компонент вне диапазона int64
    """

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        with _int64_guard("construction"):
            numerator = validate_int64(self.numerator, "numerator")
            denominator = validate_int64(self.denominator, "denominator")

            if denominator == 0:
                raise InvalidFractionArgument("Denominator must not be 0.")

            if denominator < 0:
                numerator = checked_neg(numerator)
                denominator = checked_neg(denominator)

        g = gcd(abs(numerator), denominator)

        # frozen dataclass: нормализованные значения пишутся в обход __setattr__
        object.__setattr__(self, "numerator", numerator // g)
        object.__setattr__(self, "denominator", denominator // g)

    @classmethod
    def from_mixed(cls, whole: int, num: int, den: int) -> "Fraction":
        """
        Создание дроби из смешанного числа whole num/den.

        Знак несёт только целая часть (неотрицательная → положительный),
        дробная часть обязана быть неотрицательной.

        Args:
            whole: Целая часть (со знаком)
            num: Числитель дробной части (>= 0)
            den: Знаменатель дробной части (> 0)

        Returns:
            Нормализованная дробь sign(whole) * (|whole| * den + num) / den

        Raises:
            InvalidFractionArgument: Если den <= 0 или num < 0
            FractionOverflowError: Если |whole| * den + num вне int64

        Examples:
            >>> Fraction.from_mixed(2, 3, 8)
            Fraction(numerator=19, denominator=8)
            >>> Fraction.from_mixed(-2, 3, 8)
            Fraction(numerator=-19, denominator=8)
        """
        with _int64_guard("mixed-number expansion"):
            validate_int64(whole, "whole")
            validate_int64(num, "numerator")
            validate_int64(den, "denominator")

            if den <= 0:
                raise InvalidFractionArgument("Denominator must be > 0.")
            if num < 0:
                raise InvalidFractionArgument(
                    "Numerator of a mixed number must not be negative."
                )

            sign = -1 if whole < 0 else 1
            improper = checked_add(checked_mul(checked_abs(whole), den), num)

        return cls(sign * improper, den)

    def __add__(self, other: object) -> "Fraction":
        """
        Сложение с частичным сокращением по НОД знаменателей.

        Вместо прямого a.n * b.d + b.n * a.d над a.d * b.d:
            g = gcd(a.d, b.d)
            t = a.n * (b.d / g) + b.n * (a.d / g)
            g2 = gcd(t, g)
            (t / g2) / ((a.d / g) * (b.d / g2))
        Промежуточные значения меньше, чем при прямом умножении, а результат
        уже несократим; он всё равно проходит через нормализующий конструктор.

        Raises:
            FractionOverflowError: Если произведение или сумма вне int64
        """
        if not isinstance(other, Fraction):
            return NotImplemented

        g = gcd(self.denominator, other.denominator)
        d1 = self.denominator // g
        d2 = other.denominator // g

        with _int64_guard("addition"):
            t = checked_add(
                checked_mul(self.numerator, d2), checked_mul(other.numerator, d1)
            )
            g2 = gcd(t, g)
            numerator = t // g2
            denominator = checked_mul(d1, other.denominator // g2)

        return Fraction(numerator, denominator)

    def __str__(self) -> str:
        """
        Каноническая запись: "0", "7", "-3/8", "2 3/8", "-2 3/8".

        Знак берётся из числителя и ставится один раз перед всей записью.
        """
        if self.numerator == 0:
            return "0"

        sign = "-" if self.numerator < 0 else ""
        abs_num = abs(self.numerator)
        whole = abs_num // self.denominator
        rem = abs_num % self.denominator

        if rem == 0:
            return f"{sign}{whole}"

        # Повторное сокращение остатка: при выполненном инварианте g == 1
        g = gcd(rem, self.denominator)
        rem //= g
        den = self.denominator // g

        if whole == 0:
            return f"{sign}{rem}/{den}"

        return f"{sign}{whole} {rem}/{den}"

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0


# =============================================================================
# FUNCTIONAL API
# =============================================================================


def make(numerator: int, denominator: int) -> Fraction:
    """
    Нормализующий конструктор.

    Raises:
        InvalidFractionArgument: Если denominator == 0
        FractionOverflowError: Если аргументы вне int64

    Examples:
        >>> make(6, -8)
        Fraction(numerator=-3, denominator=4)
        >>> make(0, 5)
        Fraction(numerator=0, denominator=1)
    """
    return Fraction(numerator, denominator)


def from_mixed(whole: int, num: int, den: int) -> Fraction:
    """Смешанное число → дробь (см. Fraction.from_mixed)."""
    return Fraction.from_mixed(whole, num, den)


def add(a: Fraction, b: Fraction) -> Fraction:
    """Сумма двух дробей в несократимом виде (см. Fraction.__add__)."""
    return a + b


def to_string(fraction: Fraction) -> str:
    """Каноническая текстовая запись дроби; никогда не падает."""
    return str(fraction)
