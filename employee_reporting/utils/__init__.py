"""Shared utilities for employee reporting."""

from employee_reporting.utils.io import read_text_lines, save_report
from employee_reporting.utils.types import FieldType, SalaryMarginStatus, ValidationErrorType
