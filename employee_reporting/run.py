"""Command-line runner that parses, validates and reports on an employee registry."""

from typing import TypeAlias
import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from employee_reporting.analysis.compensation import assess_manager_salaries
from employee_reporting.analysis.org_structure import find_depth_breaches
from employee_reporting.analysis.reporters import (
    render_depth_breach_report,
    render_salary_status_report,
    render_validation_errors,
)
from employee_reporting.config import ReportingConfig, load_reporting_config
from employee_reporting.registry.ingest import parse_registry
from employee_reporting.registry.models import Employee, ValidationError
from employee_reporting.registry.validators import validate_registry
from employee_reporting.utils.io import save_report
from employee_reporting.utils.types import SalaryMarginStatus

ReportSet: TypeAlias = dict[str, str]

logger = logging.getLogger(__name__)

console = Console()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def collect_errors(csv_path: Path, config: ReportingConfig) -> tuple[list[Employee], list[ValidationError]]:
    """Parse and validate a registry, returning employees and every defect found."""
    parsed = parse_registry(csv_path, config.header_included)
    validation_errors = validate_registry(parsed.employees, config.max_permitted_employees)
    return parsed.employees, [*parsed.errors, *validation_errors]


def build_reports(employees: list[Employee], config: ReportingConfig) -> ReportSet:
    assessments = assess_manager_salaries(
        employees,
        config.min_relative_salary_percentage,
        config.max_relative_salary_percentage,
    )
    breaches = find_depth_breaches(employees, config.max_reporting_line_depth)
    return {
        "underpaid_managers": render_salary_status_report(assessments, SalaryMarginStatus.UNDERPAID),
        "overpaid_managers": render_salary_status_report(assessments, SalaryMarginStatus.OVERPAID),
        "reporting_line_depth_breaches": render_depth_breach_report(breaches),
    }


def run(csv_path: Path, config: ReportingConfig, output_dir: Path | None = None) -> int:
    """Run the full report flow and return the process exit code."""
    employees, errors = collect_errors(csv_path, config)

    if errors:
        logger.warning("Reports could not be generated due to %d registry errors", len(errors))
        console.print("Following errors were detected in the parsing and validation of the file:\n")
        console.print(render_validation_errors(errors), markup=False, highlight=False)
        return 1

    reports = build_reports(employees, config)
    for name, report in reports.items():
        console.print(report, markup=False, highlight=False)
        if output_dir is not None:
            save_report(report, output_dir, name)
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Report on an employee registry CSV file")
    parser.add_argument("csv_file", type=Path, help="Path to the employee registry CSV file")
    parser.add_argument("--config", type=Path, help="Reporting config file (.toml or .yaml)")
    parser.add_argument("--output-dir", type=Path, help="Also write each report to this directory")
    parser.add_argument("--no-header", action="store_true", help="The CSV file has no header row")
    parser.add_argument("--verbose", action="store_true", help="Log progress at INFO level")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if not args.csv_file.is_file():
        console.print(f"[red]File not found or is not a regular file: {escape(str(args.csv_file))}[/red]")
        sys.exit(2)

    try:
        config = load_reporting_config(args.config)
        if args.no_header:
            config = replace(config, header_included=False)
        exit_code = run(args.csv_file, config, args.output_dir)
    except (OSError, ValueError) as exc:
        logger.error("Exiting execution due to the following error: %s", exc)
        console.print(f"[red]{escape(str(exc))}[/red]")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
