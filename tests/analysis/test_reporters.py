from __future__ import annotations

from decimal import Decimal

from employee_reporting.analysis.models import (
    ManagerRelativeSalaryAssessment,
    ReportingLineDepthBreach,
    SalaryAssessment,
)
from employee_reporting.analysis.reporters import (
    SEPARATOR,
    render_depth_breach_report,
    render_salary_status_report,
    render_validation_errors,
)
from employee_reporting.registry.models import Employee, ValidationError
from employee_reporting.utils.types import SalaryMarginStatus, ValidationErrorType

DEPTH_TITLE = "Following managers are breaching the prescribed reporting line depth:\n"
DEPTH_HEADER = "Name                 ID         ManagerID  Depth      Breached Amount\n"
SALARY_HEADER = "Name                 ID         ManagerID  Salary          Breach    \n"


def _assessment(employee: Employee, status: SalaryMarginStatus, breach: str) -> ManagerRelativeSalaryAssessment:
    return ManagerRelativeSalaryAssessment(
        manager=employee,
        direct_subordinates_avg_salary=Decimal("100.00"),
        min_relative_salary_percentage=Decimal("0.1"),
        max_relative_salary_percentage=Decimal("0.15"),
        assessment=SalaryAssessment(status, Decimal(breach)),
    )


class TestDepthBreachReport:
    def test_separator_is_seventy_dashes(self):
        assert SEPARATOR == "-" * 70

    def test_renders_rows(self):
        breach = ReportingLineDepthBreach(
            employee=Employee(305, "Brett", "Hardleaf", Decimal("34000"), 300),
            depth_compared_to=2,
            breached_amount=1,
        )
        assert render_depth_breach_report([breach]) == (
            DEPTH_TITLE
            + DEPTH_HEADER
            + SEPARATOR + "\n"
            + "Brett Hardleaf       305        300        2          1         \n"
        )

    def test_empty_list_renders_header_only(self):
        assert render_depth_breach_report([]) == DEPTH_TITLE + DEPTH_HEADER + SEPARATOR + "\n"

    def test_none_renders_placeholder(self):
        assert render_depth_breach_report(None) == "No breach data found to report"


class TestSalaryStatusReport:
    def test_filters_on_status_and_formats_money(self):
        root = Employee(123, "Joe", "Doe", Decimal("109.99"), None)
        other = Employee(124, "Martin", "Chekov", Decimal("200"), 123)
        report = render_salary_status_report(
            [
                _assessment(root, SalaryMarginStatus.UNDERPAID, "0.01"),
                _assessment(other, SalaryMarginStatus.OVERPAID, "85.00"),
            ],
            SalaryMarginStatus.UNDERPAID,
        )

        assert report == (
            "Following managers have a current salary status of : Underpaid\n"
            + SALARY_HEADER
            + SEPARATOR + "\n"
            + "Joe Doe              123        N/A        109.99          0.01      \n"
        )

    def test_money_rounds_half_up(self):
        manager = Employee(1, "Ann", "Lee", Decimal("10.005"), None)
        report = render_salary_status_report(
            [_assessment(manager, SalaryMarginStatus.FAIRLY_PAID, "0.125")],
            SalaryMarginStatus.FAIRLY_PAID,
        )
        assert "10.01" in report
        assert "0.13" in report
        assert report.startswith("Following managers have a current salary status of : Fair\n")

    def test_no_matches_renders_header_only(self):
        report = render_salary_status_report([], SalaryMarginStatus.OVERPAID)
        assert report.splitlines() == [
            "Following managers have a current salary status of : Overpaid",
            SALARY_HEADER.rstrip("\n"),
            SEPARATOR,
        ]

    def test_none_renders_placeholder(self):
        assert render_salary_status_report(None, SalaryMarginStatus.OVERPAID) == "No assessment data found to report"


def test_validation_errors_table_lists_every_message():
    errors = [
        ValidationError(ValidationErrorType.DUPLICATE_EMPLOYEE_ID, "Duplicate Employee Id [1] found"),
        ValidationError(ValidationErrorType.INCOMPLETE_DATA_ROW, "Incomplete employee data row on line 4"),
    ]
    text = render_validation_errors(errors)

    assert "Registry Errors" in text
    assert "Duplicate Employee Id [1] found" in text
    assert "INCOMPLETE_DATA_ROW" in text
