"""Reporting-line depth analysis over the manager graph."""

from typing import TypeAlias
import logging
from collections.abc import Mapping, Sequence

from employee_reporting.analysis.models import ReportingLineDepthBreach
from employee_reporting.registry.models import Employee
from employee_reporting.utils.types import EmployeeID

logger = logging.getLogger(__name__)

EmployeeLookup: TypeAlias = Mapping[EmployeeID, Employee]


class ReportingCycleError(ValueError):
    """Raised when a reporting line loops back on itself."""

    def __init__(self, employee_ids: list[EmployeeID]):
        self.employee_ids = employee_ids
        super().__init__(
            f"Reporting cycle detected for Employee Ids [{', '.join(str(i) for i in employee_ids)}]"
        )


def build_employee_lookup(employees: Sequence[Employee]) -> dict[EmployeeID, Employee]:
    """Map id -> employee. The first employee holding an id wins; missing ids are skipped."""
    lookup: dict[EmployeeID, Employee] = {}
    for employee in employees:
        if employee.id is not None:
            lookup.setdefault(employee.id, employee)
    return lookup


def reporting_depth(employee: Employee, by_id: EmployeeLookup) -> int:
    """Count manager hops above an employee.

    The walk stops at an absent manager id or at an id that does not resolve.
    A top-level employee has depth 0.
    """
    depth = 0
    visited: list[EmployeeID] = []
    manager_id = employee.manager_id
    while manager_id is not None and manager_id in by_id:
        if manager_id in visited:
            raise ReportingCycleError(visited[visited.index(manager_id):])
        visited.append(manager_id)
        depth += 1
        manager_id = by_id[manager_id].manager_id
    return depth


def find_depth_breaches(employees: Sequence[Employee], threshold_depth: int) -> list[ReportingLineDepthBreach]:
    """Find employees whose reporting line is deeper than threshold_depth, in input order."""
    logger.info("Finding employees breaching reporting line depth %d", threshold_depth)
    by_id = build_employee_lookup(employees)

    breaches = []
    for employee in employees:
        depth = reporting_depth(employee, by_id)
        if depth > threshold_depth:
            breaches.append(ReportingLineDepthBreach(
                employee=employee,
                depth_compared_to=threshold_depth,
                breached_amount=depth - threshold_depth,
            ))

    logger.info("Found %d reporting line depth breaches", len(breaches))
    return breaches
