"""Reporting configuration and loading."""

from typing import TypeAlias
import logging
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from employee_reporting.utils.io import load_toml_config, load_yaml_config
from employee_reporting.utils.types import FilePath, MarginFraction

logger = logging.getLogger(__name__)

ConfigDict: TypeAlias = dict[str, str | int | float | bool]

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "reporting.toml"


@dataclass(frozen=True)
class ReportingConfig:
    min_relative_salary_percentage: MarginFraction | None
    max_relative_salary_percentage: MarginFraction | None
    max_reporting_line_depth: int
    max_permitted_employees: int
    header_included: bool


def default_reporting_config() -> ReportingConfig:
    return ReportingConfig(
        min_relative_salary_percentage=Decimal("0.2"),
        max_relative_salary_percentage=Decimal("0.5"),
        max_reporting_line_depth=4,
        max_permitted_employees=1000,
        header_included=True,
    )


def _to_margin(value: str | int | float | None) -> MarginFraction | None:
    # Go through str so that TOML floats such as 0.2 stay exactly 0.2.
    # An empty string switches the bound off.
    if value is None or value == "":
        return None
    return Decimal(str(value))


def reporting_config_from_dict(section: ConfigDict) -> ReportingConfig:
    """Build a config from a ``[reporting]`` table, falling back to defaults per key."""
    defaults = default_reporting_config()
    return ReportingConfig(
        min_relative_salary_percentage=_to_margin(
            section.get("min_relative_salary_percentage", defaults.min_relative_salary_percentage)
        ),
        max_relative_salary_percentage=_to_margin(
            section.get("max_relative_salary_percentage", defaults.max_relative_salary_percentage)
        ),
        max_reporting_line_depth=int(
            section.get("max_reporting_line_depth", defaults.max_reporting_line_depth)
        ),
        max_permitted_employees=int(
            section.get("max_permitted_employees", defaults.max_permitted_employees)
        ),
        header_included=bool(section.get("header_included", defaults.header_included)),
    )


def load_reporting_config(path: FilePath | None = None) -> ReportingConfig:
    """Read reporting settings from a TOML or YAML file."""
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if path is DEFAULT_CONFIG_PATH and not path.exists():
        logger.info("No reporting config at %s, using defaults", path)
        return default_reporting_config()

    match path.suffix:
        case ".toml":
            data = load_toml_config(path)
        case ".yaml" | ".yml":
            data = load_yaml_config(path)
        case ext:
            raise ValueError(f"Unsupported config format: {ext}")

    logger.info("Loaded reporting config from %s", path)
    return reporting_config_from_dict(data.get("reporting", {}))
