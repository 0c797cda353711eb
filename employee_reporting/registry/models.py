"""Value objects produced by registry ingestion and validation."""

from dataclasses import dataclass, field, fields
from decimal import Decimal

from employee_reporting.utils.types import EmployeeID, FieldValue, ValidationErrorType


@dataclass(frozen=True)
class Employee:
    """An employee record as read from the registry.

    Any attribute may be None when its field failed validation; broken rows
    are kept so that validation and reporting can see them.
    """

    id: EmployeeID | None = None
    first_name: str | None = None
    last_name: str | None = None
    salary: Decimal | None = None
    manager_id: EmployeeID | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_top_level(self) -> bool:
        return self.manager_id is None


@dataclass
class EmployeeDraft:
    """Mutable builder for an Employee, bound one field at a time."""

    values: dict[str, FieldValue] = field(default_factory=dict)

    def bind(self, target: str, value: FieldValue) -> None:
        if target not in _EMPLOYEE_ATTRIBUTES:
            raise KeyError(f"Unknown employee attribute: {target}")
        self.values[target] = value

    def is_set(self, target: str) -> bool:
        return target in self.values

    def build(self) -> Employee:
        return Employee(**self.values)


_EMPLOYEE_ATTRIBUTES = frozenset(f.name for f in fields(Employee))


@dataclass(frozen=True)
class ValidationError:
    type: ValidationErrorType
    message: str


@dataclass(frozen=True)
class ParsedEmployeesResult:
    employees: list[Employee]
    errors: list[ValidationError]

    @property
    def is_valid(self) -> bool:
        return not self.errors
