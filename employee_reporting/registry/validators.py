"""Whole-registry integrity rules.

Every rule runs on every call and reports what it finds as ValidationError
values; nothing here raises on bad data. Results are concatenated in a fixed
order so that callers can show every defect of a registry at once.
"""

import logging
from collections.abc import Sequence

import pandas as pd

from employee_reporting.registry.frame import registry_frame
from employee_reporting.registry.models import Employee, ValidationError
from employee_reporting.utils.types import EmployeeID, ValidationErrorType

logger = logging.getLogger(__name__)


def _format_id(value) -> str:
    return "N/A" if value is None or pd.isna(value) else str(int(value))


def validate_max_employees(employees: Sequence[Employee], max_permitted: int) -> list[ValidationError]:
    logger.info("Validating maximum employee count (%d permitted)", max_permitted)
    if len(employees) > max_permitted:
        return [ValidationError(
            ValidationErrorType.MAXIMUM_EMPLOYEES_EXCEEDED,
            f"Number of employees [{len(employees)}] exceeds the maximum permitted [{max_permitted}]",
        )]
    return []


def validate_employee_ids(frame: pd.DataFrame) -> list[ValidationError]:
    """One error per duplicated id, ordered by id; missing ids group together last."""
    logger.info("Validating employee id uniqueness")
    ids = frame["employee_id"]
    duplicated = ids[ids.duplicated(keep=False)].unique()

    ordered = sorted(
        duplicated,
        key=lambda value: (True, 0) if pd.isna(value) else (False, int(value)),
    )
    return [
        ValidationError(
            ValidationErrorType.DUPLICATE_EMPLOYEE_ID,
            f"Duplicate Employee Id [{_format_id(value)}] found",
        )
        for value in ordered
    ]


def validate_manager_ids(frame: pd.DataFrame) -> list[ValidationError]:
    """Flag every present manager id that matches no employee id, in input order."""
    logger.info("Validating manager id references")
    known_ids = [int(value) for value in frame["employee_id"].dropna()]
    managers = frame["manager_id"]
    unresolved = (managers.notna() & ~managers.isin(known_ids)).fillna(False).astype(bool)

    errors = []
    for row in frame.loc[unresolved].itertuples():
        errors.append(ValidationError(
            ValidationErrorType.UNKNOWN_MANAGER_ID,
            f"Manager Id [{_format_id(row.manager_id)}] for Employee Id "
            f"[{_format_id(row.employee_id)}] could not be identified",
        ))
    return errors


def validate_single_top_level_manager(frame: pd.DataFrame) -> list[ValidationError]:
    """More than one employee without a manager is an error; none at all is accepted."""
    logger.info("Validating single top-level manager")
    top_level_count = int(frame["manager_id"].isna().sum())
    if top_level_count > 1:
        return [ValidationError(
            ValidationErrorType.MULTIPLE_TOP_LEVEL_MANAGERS,
            f"Only one top-level manager (null managerId) is allowed, but found [{top_level_count}]",
        )]
    return []


def find_reporting_cycles(employees: Sequence[Employee]) -> list[list[EmployeeID]]:
    """Return each distinct cycle in the manager graph as the ids in walk order.

    Walks start from employees in input order. The first employee holding a
    given id stands for that id.
    """
    by_id: dict[EmployeeID, Employee] = {}
    for employee in employees:
        if employee.id is not None:
            by_id.setdefault(employee.id, employee)

    cycles: list[list[EmployeeID]] = []
    finished: set[EmployeeID] = set()
    for employee in employees:
        if employee.id is None or employee.id in finished:
            continue

        path: list[EmployeeID] = []
        on_path: dict[EmployeeID, int] = {}
        current = by_id[employee.id]
        while current is not None and current.id not in finished:
            if current.id in on_path:
                cycles.append(path[on_path[current.id]:])
                break
            on_path[current.id] = len(path)
            path.append(current.id)
            current = by_id.get(current.manager_id) if current.manager_id is not None else None
        finished.update(path)

    return cycles


def validate_reporting_cycles(employees: Sequence[Employee]) -> list[ValidationError]:
    logger.info("Validating reporting lines for cycles")
    return [
        ValidationError(
            ValidationErrorType.REPORTING_CYCLE,
            f"Reporting cycle detected for Employee Ids [{', '.join(str(i) for i in cycle)}]",
        )
        for cycle in find_reporting_cycles(employees)
    ]


def validate_registry(employees: Sequence[Employee], max_permitted: int) -> list[ValidationError]:
    """Run all registry rules and return their errors in rule order."""
    frame = registry_frame(employees)

    errors: list[ValidationError] = []
    errors.extend(validate_max_employees(employees, max_permitted))
    errors.extend(validate_employee_ids(frame))
    errors.extend(validate_manager_ids(frame))
    errors.extend(validate_single_top_level_manager(frame))
    errors.extend(validate_reporting_cycles(employees))

    logger.info("Registry validation found %d errors", len(errors))
    return errors
