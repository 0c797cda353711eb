from __future__ import annotations

from decimal import Decimal

import pytest

from employee_reporting.registry.fields import (
    coerce_field,
    parse_decimal_abs_field,
    parse_int_abs_field,
    parse_string_field,
)
from employee_reporting.registry.schema import EMPLOYEE_SCHEMA, FieldSchema
from employee_reporting.utils.types import FieldType, ValidationErrorType

ID_FIELD = EMPLOYEE_SCHEMA.get_by_name("id")
FIRST_NAME_FIELD = EMPLOYEE_SCHEMA.get_by_name("firstName")
SALARY_FIELD = EMPLOYEE_SCHEMA.get_by_name("salary")
MANAGER_FIELD = EMPLOYEE_SCHEMA.get_by_name("managerId")
OPTIONAL_NOTE = FieldSchema("note", 5, FieldType.STRING, False, "note")
OPTIONAL_AMOUNT = FieldSchema("bonus", 5, FieldType.DECIMAL_ABS, False, "bonus")


class TestStringField:
    def test_required_value(self):
        result = parse_string_field("John", FIRST_NAME_FIELD, 1)
        assert result.is_valid
        assert result.value == "John"

    def test_blank_optional_value(self):
        result = parse_string_field("", OPTIONAL_NOTE, 1)
        assert result.is_valid
        assert result.value == ""

    def test_blank_required_value(self):
        result = parse_string_field("", FIRST_NAME_FIELD, 1)
        assert not result.is_valid
        assert result.value is None
        assert result.error.type == ValidationErrorType.INVALID_FIELD
        assert result.error.message == "Invalid value [] for field [firstName] on line 1"


class TestIntAbsField:
    @pytest.mark.parametrize("raw, expected", [("100", 100), ("0", 0), ("+7", 7)])
    def test_valid_values(self, raw, expected):
        result = parse_int_abs_field(raw, ID_FIELD, 1)
        assert result.is_valid
        assert result.value == expected

    def test_blank_optional_is_absent(self):
        result = parse_int_abs_field("", MANAGER_FIELD, 1)
        assert result.is_valid
        assert result.value is None

    def test_blank_required(self):
        result = parse_int_abs_field("", ID_FIELD, 1)
        assert result.error.message == "Invalid value [] for field [id] on line 1"

    def test_largest_32_bit_value(self):
        assert parse_int_abs_field("2147483647", ID_FIELD, 1).value == 2147483647

    @pytest.mark.parametrize("raw", ["2147483648", "99999999999999999999"])
    def test_values_beyond_32_bits_are_invalid(self, raw):
        result = parse_int_abs_field(raw, ID_FIELD, 2)
        assert result.value is None
        assert result.error.message == f"Invalid value [{raw}] for field [id] on line 2"

    @pytest.mark.parametrize("raw", ["abc", "-100", "1.5", "1_000", "12a"])
    def test_invalid_values_fail_even_when_optional(self, raw):
        result = parse_int_abs_field(raw, MANAGER_FIELD, 3)
        assert not result.is_valid
        assert result.value is None
        assert result.error.message == f"Invalid value [{raw}] for field [managerId] on line 3"


class TestDecimalAbsField:
    @pytest.mark.parametrize("raw, expected", [
        ("123.456", Decimal("123.456")),
        ("60000", Decimal("60000")),
        ("1e3", Decimal("1000")),
        (".5", Decimal("0.5")),
    ])
    def test_valid_values(self, raw, expected):
        result = parse_decimal_abs_field(raw, SALARY_FIELD, 1)
        assert result.is_valid
        assert result.value == expected

    def test_blank_optional_is_absent(self):
        result = parse_decimal_abs_field("", OPTIONAL_AMOUNT, 1)
        assert result.is_valid
        assert result.value is None

    def test_blank_required(self):
        result = parse_decimal_abs_field("", SALARY_FIELD, 2)
        assert result.error.message == "Invalid value [] for field [salary] on line 2"

    @pytest.mark.parametrize("raw", ["abc", "-0.01", "NaN", "Infinity", "1_000", "1,5"])
    def test_invalid_values(self, raw):
        result = parse_decimal_abs_field(raw, OPTIONAL_AMOUNT, 4)
        assert not result.is_valid
        assert result.error.type == ValidationErrorType.INVALID_FIELD


class TestCoerceField:
    def test_dispatches_on_field_type(self):
        assert coerce_field("42", ID_FIELD, 1).value == 42
        assert coerce_field("Ann", FIRST_NAME_FIELD, 1).value == "Ann"
        assert coerce_field("10.50", SALARY_FIELD, 1).value == Decimal("10.50")

    def test_never_returns_value_and_error(self):
        for raw in ["", "x", "-1", "5"]:
            result = coerce_field(raw, ID_FIELD, 1)
            assert (result.value is None) or (result.error is None)


def test_schema_lookup_by_unknown_name():
    with pytest.raises(KeyError, match="Unknown field: email"):
        EMPLOYEE_SCHEMA.get_by_name("email")
