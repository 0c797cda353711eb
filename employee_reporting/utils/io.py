"""File I/O utilities for reading registries and writing reports."""

import logging
import tomllib
from pathlib import Path

from employee_reporting.utils.types import FilePath

logger = logging.getLogger(__name__)

REGISTRY_ENCODINGS = ("utf-8-sig", "cp1252")


def read_text_lines(path: FilePath) -> list[str]:
    """Read a whole text file eagerly, trying each supported encoding in turn.

    Line terminators are stripped; a trailing newline does not produce an
    extra empty line.
    """
    path = Path(path)
    for encoding in REGISTRY_ENCODINGS:
        try:
            with open(path, encoding=encoding) as handle:
                return [line.removesuffix("\n") for line in handle]
        except UnicodeDecodeError:
            logger.debug("Could not decode %s as %s", path.name, encoding)
            continue
    raise ValueError(f"Could not decode {path}")


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file using Python 3.11+ stdlib."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_yaml_config(path: FilePath) -> dict:
    """Load a YAML configuration file."""
    import yaml

    with open(path) as f:
        return yaml.safe_load(f) or {}


def save_report(report: str, output_dir: FilePath, name: str) -> Path:
    """Persist a rendered text report as ``<name>.txt`` under output_dir."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / f"{name}.txt"
    path.write_text(report)
    logger.info("Report saved: %s", path)
    return path
