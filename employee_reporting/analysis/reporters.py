"""Fixed-width text reports for analysis results.

Column widths, titles and the separator line are part of the output format
consumed downstream and must not change.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from rich.console import Console
from rich.table import Table

from employee_reporting.analysis.compensation import filter_by_status, round_money
from employee_reporting.analysis.models import ManagerRelativeSalaryAssessment, ReportingLineDepthBreach
from employee_reporting.registry.models import Employee, ValidationError
from employee_reporting.utils.types import SalaryMarginStatus

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 70
NOT_AVAILABLE = "N/A"


def _id_or_na(value: int | None) -> str:
    return NOT_AVAILABLE if value is None else str(value)


def _money_or_na(value: Decimal | None) -> str:
    return NOT_AVAILABLE if value is None else f"{round_money(value):.2f}"


def _employee_columns(employee: Employee) -> str:
    return f"{employee.full_name:<20} {_id_or_na(employee.id):<10} {_id_or_na(employee.manager_id):<10}"


def render_depth_breach_report(breaches: Sequence[ReportingLineDepthBreach] | None) -> str:
    logger.info("Rendering reporting line depth breach report")
    if breaches is None:
        return "No breach data found to report"

    lines = [
        "Following managers are breaching the prescribed reporting line depth:",
        f"{'Name':<20} {'ID':<10} {'ManagerID':<10} {'Depth':<10} {'Breached Amount':<10}",
        SEPARATOR,
    ]
    for breach in breaches:
        lines.append(
            f"{_employee_columns(breach.employee)} "
            f"{breach.depth_compared_to:<10} {breach.breached_amount:<10}"
        )
    return "\n".join(lines) + "\n"


def render_salary_status_report(
    assessments: Sequence[ManagerRelativeSalaryAssessment] | None,
    status: SalaryMarginStatus,
) -> str:
    """Render the managers whose assessment has the given status."""
    logger.info("Rendering salary status report for %s", status.display_value)
    if assessments is None:
        return "No assessment data found to report"

    lines = [
        f"Following managers have a current salary status of : {status.display_value}",
        f"{'Name':<20} {'ID':<10} {'ManagerID':<10} {'Salary':<15} {'Breach':<10}",
        SEPARATOR,
    ]
    for assessment in filter_by_status(assessments, status):
        lines.append(
            f"{_employee_columns(assessment.manager)} "
            f"{_money_or_na(assessment.manager.salary):<15} "
            f"{_money_or_na(assessment.assessment.breach_amount):<10}"
        )
    return "\n".join(lines) + "\n"


def render_validation_errors(errors: Sequence[ValidationError]) -> str:
    """Render registry errors as a plain-text table."""
    table = Table(title="Registry Errors")
    table.add_column("Type", style="cyan")
    table.add_column("Message")

    for error in errors:
        table.add_row(error.type.name, error.message)

    buf = Console(width=120, force_terminal=False, color_system=None)
    with buf.capture() as capture:
        buf.print(table)
    return capture.get()
