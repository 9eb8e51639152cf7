"""
WideInteger — Знаковое целое фиксированной ширины 512 бит

Скалярный тип внешней системы значений (generic value representation),
используемый, когда значение не помещается в нативное целое.

Модуль обеспечивает:
- Конструкторы: из нативных целых (infallible), из float (всегда ошибка),
  из Decimal (в пределах i128), из десятичного текста и байтов
- Narrowing-конверсии в каждый нативный тип с контрактом Optional
- Wrapping арифметику (операторы) и checked арифметику (None при переполнении)
- Wire форму (hex строка) через pydantic serializer/validator
- Binary форму (64 байта little-endian, ревизия 1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value всегда лежит в [I512_MIN, I512_MAX]
2. Экземпляр immutable (frozen=True): каждая операция создаёт новый экземпляр
3. Равенство и порядок — численные
4. Деление усекающее (к нулю), остаток имеет знак делимого
5. Human display (str) десятичный; wire форма шестнадцатеричная
"""

import functools
import logging
import operator
from decimal import Decimal
from typing import Any, BinaryIO, Iterable, Optional, Sequence

from pydantic import BaseModel, Field, field_validator, model_serializer, model_validator

from src.core.codec.binary import (
    REVISION,
    decode_payload,
    encode_payload,
    read_payload,
    write_payload,
)
from src.core.codec.text import decode_wire, encode_wire, parse_decimal
from src.core.config import DEFAULT_CONFIG, WideIntConfig
from src.core.errors import ConversionError
from src.core.math import i512
from src.core.math.i512 import I512_MAX, I512_MIN
from src.core.math.native import NativeKind, fits_native, narrow_float, narrow_int

logger = logging.getLogger(__name__)


class WideInteger(BaseModel):
    """
    512-битное знаковое целое в дополнительном коде.

    Immutable модель (frozen=True). Сериализуется pydantic в wire форму
    ("0x..." / "-0x..."), валидируется из wire строки, int или WideInteger.

    Examples:
        >>> WideInteger.from_int(255).to_wire()
        '0xff'
        >>> str(WideInteger.from_wire("-0xff"))
        '-255'
    """

    value: int = Field(
        default=0,
        strict=True,
        description="Значение в диапазоне 512-битного дополнительного кода",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("value")
    @classmethod
    def validate_range(cls, v: int) -> int:
        """Проверка диапазона 512-битного дополнительного кода."""
        if not i512.fits(v):
            raise ValueError(f"value {v} outside 512-bit signed range")
        return v

    # =========================================================================
    # PYDANTIC (WIRE ФОРМА)
    # =========================================================================

    @model_validator(mode="before")
    @classmethod
    def parse_wire_form(cls, data: Any) -> Any:
        """
        Приём wire строки и int наравне с dict.

        Raises:
            DecodeError: Если строка не является валидной wire формой
                         (pydantic оборачивает в ValidationError)
        """
        if isinstance(data, str):
            return {"value": decode_wire(data)}
        if isinstance(data, int) and not isinstance(data, bool):
            return {"value": data}
        return data

    @model_serializer
    def serialize_wire_form(self) -> str:
        return encode_wire(self.value)

    @classmethod
    def _new(cls, value: int) -> "WideInteger":
        # Значение уже в диапазоне: без повторной валидации
        return cls.model_construct(value=value)

    # =========================================================================
    # КОНСТАНТЫ
    # =========================================================================

    @classmethod
    def zero(cls) -> "WideInteger":
        return cls._new(0)

    @classmethod
    def one(cls) -> "WideInteger":
        return cls._new(1)

    @classmethod
    def min_value(cls) -> "WideInteger":
        return cls._new(I512_MIN)

    @classmethod
    def max_value(cls) -> "WideInteger":
        return cls._new(I512_MAX)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_int(cls, value: int) -> "WideInteger":
        """
        Конструктор из Python int в диапазоне I512.

        Raises:
            ConversionError: Если значение не int или вне диапазона I512
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConversionError(str(value))
        if not i512.fits(value):
            raise ConversionError(str(value))
        return cls._new(value)

    @classmethod
    def from_native(cls, value: int, kind: NativeKind) -> "WideInteger":
        """
        Расширение нативного целого (i8..i128, u8..u128, isize, usize).

        Любое нативное целое помещается в 512 бит, поэтому потеря невозможна.
        Значение вне объявленной ширины — ошибка вызывающего.

        Raises:
            ConversionError: Если kind — float тип или value вне ширины kind
        """
        if kind.is_float:
            return cls.from_float(value)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConversionError(str(value), kind.value)
        if not fits_native(value, kind):
            raise ConversionError(str(value), kind.value)
        return cls._new(value)

    @classmethod
    def from_float(cls, value: float) -> "WideInteger":
        """
        Конверсия из float не поддерживается.

        Raises:
            ConversionError: Всегда, для любого значения (включая 0.0)
        """
        raise ConversionError(str(value))

    @classmethod
    def from_decimal(cls, value: Decimal) -> "WideInteger":
        """
        Конструктор из Decimal.

        Целая часть (усечение к нулю) должна помещаться в i128.

        Raises:
            ConversionError: Если Decimal не конечен или целая часть вне i128

        Examples:
            >>> WideInteger.from_decimal(Decimal("-12.9")).value
            -12
        """
        if not value.is_finite():
            raise ConversionError(str(value))
        # |i128| < 10**39: отсекаем по порядку до построения int
        if not value.is_zero() and value.adjusted() >= 39:
            raise ConversionError(str(value), NativeKind.I128.value)

        integral = int(value)
        if not fits_native(integral, NativeKind.I128):
            raise ConversionError(str(value), NativeKind.I128.value)
        return cls._new(integral)

    @classmethod
    def from_str(cls, text: str) -> "WideInteger":
        """
        Конструктор из десятичного текста ["-"] digit+.

        ВАЖНО: это не wire форма (см. from_wire).

        Raises:
            ConversionError: Если текст невалиден
        """
        logger.debug("WideInteger.from_str: %s", text)
        return cls._new(parse_decimal(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> "WideInteger":
        """
        Конструктор из байтов: lossy UTF-8 декодирование, затем from_str.

        Raises:
            ConversionError: Если текст невалиден
        """
        text = bytes(data).decode("utf-8", errors="replace")
        logger.debug("WideInteger.from_bytes: %s", text)
        return cls._new(parse_decimal(text))

    @classmethod
    def from_limbs(cls, limbs: Sequence[int]) -> "WideInteger":
        """Сборка из 8 беззнаковых 64-битных limbs (младший первым)."""
        return cls._new(i512.from_limbs(limbs))

    def to_limbs(self) -> tuple[int, ...]:
        return i512.to_limbs(self.value)

    # =========================================================================
    # WIRE ФОРМА
    # =========================================================================

    @classmethod
    def from_wire(cls, text: str) -> "WideInteger":
        """
        Декодирование wire формы ("0x..." / "-0x...").

        Raises:
            DecodeError: Если строка невалидна
        """
        return cls._new(decode_wire(text))

    def to_wire(self) -> str:
        return encode_wire(self.value)

    # =========================================================================
    # BINARY ФОРМА
    # =========================================================================

    @classmethod
    def revision(cls) -> int:
        return REVISION

    def to_payload(self) -> bytes:
        """64 байта little-endian."""
        return encode_payload(self.value)

    @classmethod
    def from_payload(cls, data: bytes, config: WideIntConfig = DEFAULT_CONFIG) -> "WideInteger":
        """
        Восстановление из payload.

        ВНИМАНИЕ: в режиме по умолчанию невалидный payload молча даёт zero().

        Raises:
            DecodeError: Если payload невалиден и strict_binary_decode=True
        """
        return cls._new(decode_payload(data, config))

    def serialize_revisioned(self, writer: BinaryIO) -> None:
        """
        Raises:
            RevisionIOError: Если поток отказал
        """
        write_payload(writer, self.value)

    @classmethod
    def deserialize_revisioned(
        cls, reader: BinaryIO, config: WideIntConfig = DEFAULT_CONFIG
    ) -> "WideInteger":
        """
        Raises:
            RevisionIOError: Если поток отказал или закончился раньше 64 байт
        """
        return cls._new(read_payload(reader, config))

    # =========================================================================
    # NARROWING
    # =========================================================================

    def to_native(
        self, kind: NativeKind, config: WideIntConfig = DEFAULT_CONFIG
    ) -> Optional[int | float]:
        """
        Narrowing в нативный тип.

        Returns:
            Значение целевого типа, либо None если не помещается
        """
        if kind.is_float:
            return narrow_float(self.value, kind, strict=config.strict_float_narrowing)
        return narrow_int(self.value, kind)

    def to_i8(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.I8)

    def to_i16(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.I16)

    def to_i32(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.I32)

    def to_i64(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.I64)

    def to_i128(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.I128)

    def to_isize(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.ISIZE)

    def to_u8(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.U8)

    def to_u16(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.U16)

    def to_u32(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.U32)

    def to_u64(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.U64)

    def to_u128(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.U128)

    def to_usize(self) -> Optional[int]:
        return narrow_int(self.value, NativeKind.USIZE)

    def to_f32(self, config: WideIntConfig = DEFAULT_CONFIG) -> Optional[float]:
        """
        Конверсия в f32.

        ВНИМАНИЕ: по умолчанию без bounds check — младшие 4 байта
        переинтерпретируются как IEEE-754 single (legacy формат).
        """
        return narrow_float(self.value, NativeKind.F32, strict=config.strict_float_narrowing)

    def to_f64(self, config: WideIntConfig = DEFAULT_CONFIG) -> Optional[float]:
        """
        Конверсия в f64.

        ВНИМАНИЕ: по умолчанию без bounds check — младшие 8 байт
        переинтерпретируются как IEEE-754 double (legacy формат).
        """
        return narrow_float(self.value, NativeKind.F64, strict=config.strict_float_narrowing)

    # =========================================================================
    # ПРЕДИКАТЫ И СРАВНЕНИЯ
    # =========================================================================

    def is_zero(self) -> bool:
        return self.value == 0

    def is_negative(self) -> bool:
        return self.value < 0

    def is_positive(self) -> bool:
        return self.value > 0

    def is_zero_or_positive(self) -> bool:
        return self.value >= 0

    def is_zero_or_negative(self) -> bool:
        return self.value <= 0

    def cmp(self, other: "WideInteger") -> int:
        """
        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        if self.value < other.value:
            return -1
        if self.value > other.value:
            return 1
        return 0

    def eq(self, other: "WideInteger") -> bool:
        return self.value == other.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WideInteger):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: "WideInteger") -> bool:
        if not isinstance(other, WideInteger):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: "WideInteger") -> bool:
        if not isinstance(other, WideInteger):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: "WideInteger") -> bool:
        if not isinstance(other, WideInteger):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: "WideInteger") -> bool:
        if not isinstance(other, WideInteger):
            return NotImplemented
        return self.value >= other.value

    # =========================================================================
    # WRAPPING АРИФМЕТИКА
    # =========================================================================

    def __neg__(self) -> "WideInteger":
        return self._new(i512.wrapping_neg(self.value))

    def __abs__(self) -> "WideInteger":
        return self._new(i512.wrapping_abs(self.value))

    def __add__(self, other: "WideInteger") -> "WideInteger":
        if not isinstance(other, WideInteger):
            return NotImplemented
        return self._new(i512.wrapping_add(self.value, other.value))

    def __sub__(self, other: "WideInteger") -> "WideInteger":
        if not isinstance(other, WideInteger):
            return NotImplemented
        return self._new(i512.wrapping_sub(self.value, other.value))

    def __mul__(self, other: "WideInteger") -> "WideInteger":
        if not isinstance(other, WideInteger):
            return NotImplemented
        return self._new(i512.wrapping_mul(self.value, other.value))

    def __floordiv__(self, other: "WideInteger") -> "WideInteger":
        """
        Усекающее деление (к нулю), а не floor как у int.

        Raises:
            ZeroDivisionError: Если other == 0
        """
        if not isinstance(other, WideInteger):
            return NotImplemented
        return self._new(i512.wrapping_div(self.value, other.value))

    def __mod__(self, other: "WideInteger") -> "WideInteger":
        """
        Остаток со знаком делимого, а не делителя как у int.

        Raises:
            ZeroDivisionError: Если other == 0
        """
        if not isinstance(other, WideInteger):
            return NotImplemented
        return self._new(i512.wrapping_rem(self.value, other.value))

    def __pow__(self, exp: int) -> "WideInteger":
        if not isinstance(exp, int) or isinstance(exp, bool):
            return NotImplemented
        return self.pow(exp)

    def abs(self) -> "WideInteger":
        """abs в дополнительном коде: abs(min_value()) == min_value()."""
        return self._new(i512.wrapping_abs(self.value))

    def pow(self, exp: int) -> "WideInteger":
        """
        Wrapping степень.

        Raises:
            ValueError: Если exp вне диапазона u32
        """
        return self._new(i512.wrapping_pow(self.value, exp))

    @classmethod
    def sum(cls, values: Iterable["WideInteger"]) -> "WideInteger":
        """Wrapping сумма; пустая последовательность даёт zero()."""
        return functools.reduce(operator.add, values, cls.zero())

    @classmethod
    def product(cls, values: Iterable["WideInteger"]) -> "WideInteger":
        """Wrapping произведение; пустая последовательность даёт one()."""
        return functools.reduce(operator.mul, values, cls.one())

    # =========================================================================
    # CHECKED АРИФМЕТИКА
    # =========================================================================

    def _checked(self, result: Optional[int]) -> Optional["WideInteger"]:
        if result is None:
            return None
        return self._new(result)

    def checked_add(self, other: "WideInteger") -> Optional["WideInteger"]:
        return self._checked(i512.checked_add(self.value, other.value))

    def checked_sub(self, other: "WideInteger") -> Optional["WideInteger"]:
        return self._checked(i512.checked_sub(self.value, other.value))

    def checked_mul(self, other: "WideInteger") -> Optional["WideInteger"]:
        return self._checked(i512.checked_mul(self.value, other.value))

    def checked_div(self, other: "WideInteger") -> Optional["WideInteger"]:
        """None при делении на ноль и для min_value() / -1."""
        return self._checked(i512.checked_div(self.value, other.value))

    def checked_rem(self, other: "WideInteger") -> Optional["WideInteger"]:
        """None при делении на ноль и для min_value() % -1."""
        return self._checked(i512.checked_rem(self.value, other.value))

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        # Human display: десятичный, не wire форма
        return i512.format_radix(self.value, 10)
