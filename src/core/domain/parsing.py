"""
Fraction Parser — разбор текстовой записи дроби

Грамматика (после обрезки пробелов по краям), проверяется по порядку,
побеждает первое полное совпадение:
1. Смешанное число:  [+-]цифры  пробелы  цифры [пробелы] / [пробелы] цифры
   Пример: "-2 3/8", "1 1/2"                 → from_mixed(whole, num, den)
2. Простая дробь:    [+-]цифры [пробелы] / [пробелы] цифры
   Пример: "5/7", "-1/2"                     → make(num, den)
3. Целое число:      [+-]цифры
   Пример: "3", "-42"                        → make(whole, 1)

Всё остальное → FractionFormatError с исходным текстом.
Компонент вне диапазона int64 → FractionOverflowError.
"""

import re
from typing import Final, Optional

from src.core.domain.errors import FractionFormatError, FractionOverflowError
from src.core.domain.fraction import Fraction
from src.core.math.int64_safeguards import Int64OverflowError, parse_int64

# =============================================================================
# ГРАММАТИКА
# =============================================================================

# Только ASCII-цифры: \d в Python совпадает и с Unicode-цифрами
MIXED_PATTERN: Final = re.compile(
    r"(?P<whole>[+-]?[0-9]+)\s+(?P<num>[0-9]+)\s*/\s*(?P<den>[0-9]+)"
)
SIMPLE_PATTERN: Final = re.compile(r"(?P<num>[+-]?[0-9]+)\s*/\s*(?P<den>[0-9]+)")
WHOLE_PATTERN: Final = re.compile(r"(?P<whole>[+-]?[0-9]+)")


def _component(text: str) -> int:
    """Checked разбор одного числового компонента."""
    try:
        return parse_int64(text)
    except Int64OverflowError as e:
        raise FractionOverflowError(
            f"Number out of range: {text}", operation="parsing"
        ) from e


# =============================================================================
# PARSE
# =============================================================================


def parse(text: Optional[str]) -> Fraction:
    """
    Разбор целого числа, дроби или смешанного числа.

    Args:
        text: Исходный текст, например "2 3/8"

    Returns:
        Нормализованная дробь

    Raises:
        FractionFormatError: Если текст пуст или не соответствует грамматике
        FractionOverflowError: Если компонент не помещается в int64
        InvalidFractionArgument: Если знаменатель равен 0

    Examples:
        >>> parse("2 3/8")
        Fraction(numerator=19, denominator=8)
        >>> parse(" -1/2 ")
        Fraction(numerator=-1, denominator=2)
    """
    if text is None or not text.strip():
        raise FractionFormatError("Empty expression.", text=text)

    text = text.strip()

    mixed = MIXED_PATTERN.fullmatch(text)
    if mixed:
        return Fraction.from_mixed(
            _component(mixed["whole"]),
            _component(mixed["num"]),
            _component(mixed["den"]),
        )

    simple = SIMPLE_PATTERN.fullmatch(text)
    if simple:
        return Fraction(_component(simple["num"]), _component(simple["den"]))

    whole = WHOLE_PATTERN.fullmatch(text)
    if whole:
        return Fraction(_component(whole["whole"]), 1)

    raise FractionFormatError(f'Invalid format: "{text}"', text=text)
