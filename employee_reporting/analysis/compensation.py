"""Manager salary assessment relative to direct reports' average pay."""

import logging
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext

import pandas as pd

from employee_reporting.analysis.models import ManagerRelativeSalaryAssessment, SalaryAssessment
from employee_reporting.analysis.org_structure import build_employee_lookup
from employee_reporting.registry.frame import registry_frame
from employee_reporting.registry.models import Employee
from employee_reporting.utils.types import MarginFraction, SalaryAmount, SalaryMarginStatus

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def round_money(amount: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def _working_precision(amounts: Iterable[Decimal], base: int) -> int:
    """Context precision wide enough that ``amounts`` keep their cents through the arithmetic."""
    largest = max((amount.adjusted() for amount in amounts), default=0)
    return base + max(largest, 0)


def _as_margin(margin) -> MarginFraction | None:
    if margin is None or isinstance(margin, Decimal):
        return margin
    return Decimal(str(margin))


def _check_margins(min_margin: MarginFraction | None, max_margin: MarginFraction | None) -> None:
    if min_margin is not None and min_margin < 0:
        logger.error("Minimum relative salary percentage must be >= 0, got %s", min_margin)
        raise ValueError("Minimum Relative Salary Percentage must be >= 0.0")
    if max_margin is not None and max_margin < 0:
        logger.error("Maximum relative salary percentage must be >= 0, got %s", max_margin)
        raise ValueError("Maximum Relative Salary Percentage must be >= 0.0")
    if min_margin is not None and max_margin is not None and max_margin < min_margin:
        logger.error("Maximum relative salary percentage %s is below minimum %s", max_margin, min_margin)
        raise ValueError(
            "Maximum Relative Salary Percentage must be greater than or equal to "
            "Minimum Relative Salary Percentage"
        )


def assess_salary(
    actual: SalaryAmount,
    expected_min: SalaryAmount | None,
    expected_max: SalaryAmount | None,
) -> SalaryAssessment:
    """Compare a salary with its band. A missing bound is never breached."""
    if expected_min is not None and actual < expected_min:
        return SalaryAssessment(SalaryMarginStatus.UNDERPAID, expected_min - actual)
    if expected_max is not None and actual > expected_max:
        return SalaryAssessment(SalaryMarginStatus.OVERPAID, actual - expected_max)
    return SalaryAssessment(SalaryMarginStatus.FAIRLY_PAID, ZERO)


def assess_manager_salaries(
    employees: Sequence[Employee],
    min_margin: MarginFraction | None = None,
    max_margin: MarginFraction | None = None,
) -> list[ManagerRelativeSalaryAssessment]:
    """Assess every manager against the average salary of their direct reports.

    The band is avg * (1 + min_margin) .. avg * (1 + max_margin), each bound
    rounded half-up to cents. Managers appear in the order their first direct
    report appears in ``employees``.
    """
    logger.info("Assessing manager salaries (min margin %s, max margin %s)", min_margin, max_margin)
    min_margin, max_margin = _as_margin(min_margin), _as_margin(max_margin)
    _check_margins(min_margin, max_margin)

    frame = registry_frame(employees)
    by_id = build_employee_lookup(employees)
    amounts = [e.salary for e in employees if e.salary is not None]
    amounts += [m for m in (min_margin, max_margin) if m is not None]

    assessments = []
    for manager_id, reports in frame.groupby("manager_id", sort=False):
        manager = by_id.get(int(manager_id))
        if manager is None:
            continue
        if manager.salary is None:
            logger.warning("Skipping manager %s without a salary", manager.id)
            continue

        salaries = [salary for salary in reports["salary"] if pd.notna(salary)]
        if len(salaries) < len(reports):
            logger.warning(
                "Ignoring %d direct reports of manager %s without a salary",
                len(reports) - len(salaries),
                manager.id,
            )
        if not salaries:
            continue

        with localcontext() as ctx:
            ctx.prec = _working_precision(amounts, ctx.prec)
            average = round_money(sum(salaries, Decimal(0)) / len(salaries))
            expected_min = round_money(average * (1 + min_margin)) if min_margin is not None else None
            expected_max = round_money(average * (1 + max_margin)) if max_margin is not None else None
            assessment = assess_salary(manager.salary, expected_min, expected_max)

        assessments.append(ManagerRelativeSalaryAssessment(
            manager=manager,
            direct_subordinates_avg_salary=average,
            min_relative_salary_percentage=min_margin,
            max_relative_salary_percentage=max_margin,
            assessment=assessment,
        ))

    logger.info("Assessed %d managers", len(assessments))
    return assessments


def filter_by_status(
    assessments: Sequence[ManagerRelativeSalaryAssessment],
    status: SalaryMarginStatus,
) -> list[ManagerRelativeSalaryAssessment]:
    return [a for a in assessments if a.assessment.status == status]
