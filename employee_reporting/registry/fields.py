"""Field coercion: raw column text to typed values or validation errors."""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from employee_reporting.registry.models import ValidationError
from employee_reporting.registry.schema import FieldSchema
from employee_reporting.utils.types import FieldType, FieldValue, ValidationErrorType

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

# Integer fields must fit a signed 32-bit integer.
MAX_INTEGER_VALUE = 2**31 - 1


@dataclass(frozen=True)
class FieldResult:
    """Outcome of coercing one field: a value or an error, never both."""

    value: FieldValue = None
    error: ValidationError | None = None

    @classmethod
    def success(cls, value: FieldValue) -> "FieldResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ValidationError) -> "FieldResult":
        return cls(error=error)

    @property
    def is_valid(self) -> bool:
        return self.error is None


def _invalid(raw: str, field_schema: FieldSchema, line_number: int) -> FieldResult:
    return FieldResult.failure(ValidationError(
        ValidationErrorType.INVALID_FIELD,
        f"Invalid value [{raw}] for field [{field_schema.name}] on line {line_number}",
    ))


def parse_string_field(raw: str, field_schema: FieldSchema, line_number: int) -> FieldResult:
    if field_schema.required and not raw.strip():
        return _invalid(raw, field_schema, line_number)
    return FieldResult.success(raw)


def parse_int_abs_field(raw: str, field_schema: FieldSchema, line_number: int) -> FieldResult:
    """Parse a non-negative 32-bit integer; blank is only acceptable when optional."""
    if _INTEGER_PATTERN.fullmatch(raw):
        value = int(raw)
        if 0 <= value <= MAX_INTEGER_VALUE:
            return FieldResult.success(value)
    if raw.strip() or field_schema.required:
        return _invalid(raw, field_schema, line_number)
    return FieldResult.success(None)


def parse_decimal_abs_field(raw: str, field_schema: FieldSchema, line_number: int) -> FieldResult:
    """Parse a non-negative decimal; same blank rules as integers."""
    if _DECIMAL_PATTERN.fullmatch(raw):
        try:
            value = Decimal(raw)
        except InvalidOperation:
            value = None
        if value is not None and value >= 0:
            return FieldResult.success(value)
    if raw.strip() or field_schema.required:
        return _invalid(raw, field_schema, line_number)
    return FieldResult.success(None)


def coerce_field(raw: str, field_schema: FieldSchema, line_number: int) -> FieldResult:
    match field_schema.field_type:
        case FieldType.STRING:
            return parse_string_field(raw, field_schema, line_number)
        case FieldType.INTEGER_ABS:
            return parse_int_abs_field(raw, field_schema, line_number)
        case FieldType.DECIMAL_ABS:
            return parse_decimal_abs_field(raw, field_schema, line_number)
        case other:
            raise ValueError(f"Unsupported field type: {other}")
