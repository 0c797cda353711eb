"""Shared type definitions for employee reporting."""

from typing import TypeAlias
from decimal import Decimal
from enum import StrEnum
from pathlib import Path


FilePath: TypeAlias = str | Path
EmployeeID: TypeAlias = int
SalaryAmount: TypeAlias = Decimal
MarginFraction: TypeAlias = Decimal
FieldValue: TypeAlias = str | int | Decimal | None


class FieldType(StrEnum):
    STRING = "string"
    INTEGER_ABS = "integer_abs"
    DECIMAL_ABS = "decimal_abs"


class ValidationErrorType(StrEnum):
    INVALID_FIELD = "invalid_field"
    INCOMPLETE_DATA_ROW = "incomplete_data_row"
    MAXIMUM_EMPLOYEES_EXCEEDED = "maximum_employees_exceeded"
    DUPLICATE_EMPLOYEE_ID = "duplicate_employee_id"
    UNKNOWN_MANAGER_ID = "unknown_manager_id"
    MULTIPLE_TOP_LEVEL_MANAGERS = "multiple_top_level_managers"
    REPORTING_CYCLE = "reporting_cycle"


class SalaryMarginStatus(StrEnum):
    UNDERPAID = "underpaid"
    FAIRLY_PAID = "fairly_paid"
    OVERPAID = "overpaid"

    @property
    def display_value(self) -> str:
        match self:
            case SalaryMarginStatus.UNDERPAID:
                return "Underpaid"
            case SalaryMarginStatus.FAIRLY_PAID:
                return "Fair"
            case SalaryMarginStatus.OVERPAID:
                return "Overpaid"
