"""Read-only analyses over a validated employee registry."""

from employee_reporting.analysis.compensation import assess_manager_salaries
from employee_reporting.analysis.org_structure import ReportingCycleError, find_depth_breaches
from employee_reporting.analysis.reporters import render_depth_breach_report, render_salary_status_report
