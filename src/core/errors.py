"""
Errors — Типы ошибок WideInteger

Модуль определяет все ошибки, которые могут возникнуть при работе с WideInteger:
- ConversionError: fallible конструктор не смог построить значение
- DecodeError: невалидный wire-текст (hex) или бинарный payload (strict режим)
- RevisionIOError: отказ байтового источника/приёмника в binary codec

ВАЖНО: Narrowing-конверсии (to_i8, to_u64, ...) никогда не бросают ошибок —
отсутствие значения сообщается через None.
"""


class WideIntegerError(Exception):
    """Базовый класс всех ошибок WideInteger."""

    pass


class ConversionError(WideIntegerError, ValueError):
    """
    Невозможно построить WideInteger из исходного значения.

    Возникает при:
    1. Конверсии из float (всегда)
    2. Decimal вне диапазона i128 (или NaN/Infinity)
    3. Невалидном десятичном тексте
    4. Нативном значении вне объявленной ширины

    Attributes:
        value: Строковое представление отвергнутого значения
        target: Имя целевого типа
    """

    def __init__(self, value: str, target: str = "WideInteger"):
        self.value = value
        self.target = target
        super().__init__(f"Cannot convert from '{value}' to '{target}'")


class DecodeError(WideIntegerError, ValueError):
    """
    Невалидное wire-представление WideInteger.

    Наследуется от ValueError, поэтому внутри pydantic-валидации
    превращается в ValidationError.
    """

    pass


class RevisionIOError(WideIntegerError):
    """
    Ошибка ввода-вывода binary codec.

    Attributes:
        code: Код ошибки ОС (0 если недоступен, например при EOF)
    """

    def __init__(self, code: int, operation: str = "read"):
        self.code = code
        self.operation = operation
        super().__init__(f"Failed to {operation} WideInteger payload (os error {code})")
