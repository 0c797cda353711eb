"""Column schema for delimited employee registries."""

from dataclasses import dataclass

from employee_reporting.utils.types import FieldType


@dataclass(frozen=True)
class FieldSchema:
    """Describes one column: where it sits, how to coerce it, where to bind it."""

    name: str
    position: int
    field_type: FieldType
    required: bool
    target: str


@dataclass(frozen=True)
class RegistrySchema:
    fields: tuple[FieldSchema, ...]

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def get_by_name(self, name: str) -> FieldSchema:
        for field_schema in self.fields:
            if field_schema.name == name:
                return field_schema
        raise KeyError(f"Unknown field: {name}")


EMPLOYEE_SCHEMA = RegistrySchema(
    fields=(
        FieldSchema("id", 0, FieldType.INTEGER_ABS, True, "id"),
        FieldSchema("firstName", 1, FieldType.STRING, True, "first_name"),
        FieldSchema("lastName", 2, FieldType.STRING, True, "last_name"),
        FieldSchema("salary", 3, FieldType.DECIMAL_ABS, True, "salary"),
        FieldSchema("managerId", 4, FieldType.INTEGER_ABS, False, "manager_id"),
    )
)
