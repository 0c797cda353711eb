from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from employee_reporting.registry.models import Employee

REGISTRY_HEADER = "Id,firstName,lastName,salary,managerId"

SAMPLE_ROWS = [
    "123,Joe,Doe,60000,",
    "124,Martin,Chekov,45000,123",
    "125,Bob,Ronstad,47000,123",
    "300,Alice,Hasacat,60000,124",
    "305,Brett,Hardleaf,34000,300",
]


def _make_employee(
    id: int | None,
    salary: str | None = "1000",
    manager_id: int | None = None,
    first_name: str = "First",
    last_name: str | None = None,
) -> Employee:
    return Employee(
        id=id,
        first_name=first_name,
        last_name=last_name if last_name is not None else f"Last{id}",
        salary=Decimal(salary) if salary is not None else None,
        manager_id=manager_id,
    )


@pytest.fixture
def make_employee():
    return _make_employee


@pytest.fixture
def write_registry(tmp_path: Path):
    """Write registry rows to a CSV file and return its path."""

    def _write(rows: list[str], header: bool = True, name: str = "employees.csv") -> Path:
        lines = [REGISTRY_HEADER, *rows] if header else list(rows)
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_registry(write_registry) -> Path:
    return write_registry(SAMPLE_ROWS)


@pytest.fixture
def small_org() -> list[Employee]:
    return [
        Employee(123, "Joe", "Doe", Decimal("60000"), None),
        Employee(124, "Martin", "Chekov", Decimal("45000"), 123),
        Employee(125, "Bob", "Ronstad", Decimal("47000"), 123),
    ]
