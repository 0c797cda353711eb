"""Result types produced by the hierarchy and compensation analyses."""

from dataclasses import dataclass
from decimal import Decimal

from employee_reporting.registry.models import Employee
from employee_reporting.utils.types import MarginFraction, SalaryMarginStatus


@dataclass(frozen=True)
class ReportingLineDepthBreach:
    employee: Employee
    depth_compared_to: int
    breached_amount: int


@dataclass(frozen=True)
class SalaryAssessment:
    status: SalaryMarginStatus
    breach_amount: Decimal


@dataclass(frozen=True)
class ManagerRelativeSalaryAssessment:
    """How a manager's salary sits against their direct reports' average."""

    manager: Employee
    direct_subordinates_avg_salary: Decimal
    min_relative_salary_percentage: MarginFraction | None
    max_relative_salary_percentage: MarginFraction | None
    assessment: SalaryAssessment
