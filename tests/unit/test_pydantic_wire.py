"""
Tests for Pydantic Wire Integration

Тестирование WideInteger как поля Pydantic V2 моделей:
- JSON сериализация в wire форму (hex строка)
- Десериализация из wire строки, int и экземпляра
- Ошибки валидации (ValidationError)
- Immutability (frozen=True)
- Соответствие wire контракту (JSON Schema)
"""

import json

import pytest
from pydantic import BaseModel, ValidationError

from src.core.contracts import validate_wide_integer_wire
from src.core.domain import WideInteger
from src.core.math.i512 import I512_MAX, I512_MIN


class Row(BaseModel):
    """Запись внешней системы значений с wide-полем."""

    key: str
    amount: WideInteger

    model_config = {"frozen": True}


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def row() -> Row:
    return Row(key="balance", amount=WideInteger.from_int(-255))


# =============================================================================
# ТЕСТЫ СЕРИАЛИЗАЦИИ
# =============================================================================


class TestSerialization:
    """Сериализация — всегда wire форма"""

    def test_model_dump(self, row: Row) -> None:
        assert row.model_dump() == {"key": "balance", "amount": "-0xff"}

    def test_model_dump_json(self, row: Row) -> None:
        assert json.loads(row.model_dump_json()) == {"key": "balance", "amount": "-0xff"}

    def test_standalone_dump(self) -> None:
        assert WideInteger.from_int(16).model_dump() == "0x10"
        assert WideInteger.from_int(16).model_dump_json() == '"0x10"'

    def test_wire_output_satisfies_contract(self) -> None:
        for value in (0, 1, -1, I512_MAX, I512_MIN):
            validate_wide_integer_wire(WideInteger.from_int(value).model_dump())


# =============================================================================
# ТЕСТЫ ДЕСЕРИАЛИЗАЦИИ
# =============================================================================


class TestDeserialization:
    """Валидация принимает wire строку, int и WideInteger"""

    def test_from_wire_string(self) -> None:
        assert Row(key="k", amount="0xff").amount == WideInteger.from_int(255)

    def test_from_int(self) -> None:
        assert Row(key="k", amount=-7).amount == WideInteger.from_int(-7)

    def test_from_instance(self) -> None:
        value = WideInteger.from_int(3)
        assert Row(key="k", amount=value).amount == value

    def test_json_roundtrip(self, row: Row) -> None:
        restored = Row.model_validate_json(row.model_dump_json())
        assert restored == row
        assert restored.amount == WideInteger.from_int(-255)

    def test_default_value_roundtrip(self) -> None:
        """Значение по умолчанию проходит через serializer без изменений"""
        number = WideInteger()
        serialized = WideInteger.model_validate(number.model_dump())
        assert serialized == number

    def test_extremes_roundtrip(self) -> None:
        for value in (WideInteger.max_value(), WideInteger.min_value()):
            assert WideInteger.model_validate_json(value.model_dump_json()) == value


class TestValidationErrors:
    """Невалидный ввод → ValidationError"""

    @pytest.mark.parametrize("amount", ["ff", "0xzz", "255", "", "-0x"])
    def test_invalid_wire_string(self, amount: str) -> None:
        with pytest.raises(ValidationError):
            Row(key="k", amount=amount)

    def test_out_of_range_int(self) -> None:
        with pytest.raises(ValidationError):
            Row(key="k", amount=I512_MAX + 1)
        with pytest.raises(ValidationError):
            WideInteger(value=I512_MIN - 1)

    @pytest.mark.parametrize("amount", [1.5, True, None, [1]])
    def test_wrong_types(self, amount: object) -> None:
        with pytest.raises(ValidationError):
            Row(key="k", amount=amount)

    def test_frozen(self) -> None:
        value = WideInteger.from_int(1)
        with pytest.raises(ValidationError):
            value.value = 2
