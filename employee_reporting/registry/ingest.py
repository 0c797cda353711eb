"""Ingest employee registries from delimited text files."""

import logging
from collections.abc import Iterable

from employee_reporting.registry.fields import coerce_field
from employee_reporting.registry.models import (
    Employee,
    EmployeeDraft,
    ParsedEmployeesResult,
    ValidationError,
)
from employee_reporting.registry.schema import EMPLOYEE_SCHEMA, RegistrySchema
from employee_reporting.utils.io import read_text_lines
from employee_reporting.utils.types import FilePath, ValidationErrorType

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","


def parse_registry_lines(
    lines: Iterable[str],
    header_present: bool,
    schema: RegistrySchema = EMPLOYEE_SCHEMA,
    delimiter: str = DEFAULT_DELIMITER,
) -> ParsedEmployeesResult:
    """Parse registry rows into employees plus every defect found along the way.

    Rows with the wrong number of columns are reported and dropped. Rows with
    bad field values are reported and still kept, with the bad fields unset.
    Line numbers start at 1 and include the header line.
    """
    employees: list[Employee] = []
    errors: list[ValidationError] = []

    for line_number, line in enumerate(lines, start=1):
        if header_present and line_number == 1:
            continue

        values = line.split(delimiter)
        if len(values) != schema.field_count:
            errors.append(ValidationError(
                ValidationErrorType.INCOMPLETE_DATA_ROW,
                f"Incomplete employee data row on line {line_number}",
            ))
            continue

        draft = EmployeeDraft()
        for field_schema in schema.fields:
            result = coerce_field(values[field_schema.position].strip(), field_schema, line_number)
            if result.is_valid:
                draft.bind(field_schema.target, result.value)
            else:
                errors.append(result.error)
        employees.append(draft.build())

    return ParsedEmployeesResult(employees=employees, errors=errors)


def parse_registry(
    path: FilePath,
    header_present: bool,
    schema: RegistrySchema = EMPLOYEE_SCHEMA,
    delimiter: str = DEFAULT_DELIMITER,
) -> ParsedEmployeesResult:
    """Read and parse a registry file. I/O failures propagate to the caller."""
    logger.info("Parsing employee registry: %s", path)
    lines = read_text_lines(path)
    result = parse_registry_lines(lines, header_present, schema=schema, delimiter=delimiter)
    logger.info(
        "Parsed %d employee rows with %d errors",
        len(result.employees),
        len(result.errors),
    )
    return result
