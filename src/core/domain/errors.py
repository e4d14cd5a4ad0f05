"""
Fraction Errors — таксономия ошибок ядра

Три вида ошибок, каждая обнаруживается и поднимается, никогда не
исправляется молча:
- InvalidFractionArgument: нулевой/отрицательный знаменатель,
  отрицательный числитель дробной части смешанного числа
- FractionFormatError: текст не соответствует ни одной грамматике
- FractionOverflowError: шаг арифметики вышел за диапазон int64

Ядро не восстанавливается после ошибок: решение (повторный ввод,
завершение, запись проваленного кейса) принимает вызывающий слой.
"""

from typing import Optional


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionError(Exception):
    """Базовый класс всех ошибок ядра дробей."""

    pass


class InvalidFractionArgument(FractionError, ValueError):
    """Недопустимый аргумент конструктора (знаменатель, числитель)."""

    pass


class FractionFormatError(FractionError, ValueError):
    """
    Текст не распознан как целое, дробь или смешанное число.

    Attributes:
        text: Исходный (обрезанный) текст, вызвавший ошибку
    """

    def __init__(self, message: str, text: Optional[str] = None):
        self.text = text
        super().__init__(message)


class FractionOverflowError(FractionError, OverflowError):
    """
    Арифметический шаг вышел за диапазон 64-битного знакового целого.

    Attributes:
        operation: Имя шага, на котором произошло переполнение
    """

    def __init__(self, message: str, operation: str = "arithmetic"):
        self.operation = operation
        super().__init__(message)
