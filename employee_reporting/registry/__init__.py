"""Employee registry ingestion and integrity validation.

Reads delimited registry files against a column schema, keeps partially
valid rows, and checks whole-registry rules such as unique ids and resolvable
manager links.
"""

from employee_reporting.registry.ingest import parse_registry, parse_registry_lines
from employee_reporting.registry.models import Employee, ParsedEmployeesResult, ValidationError
from employee_reporting.registry.schema import EMPLOYEE_SCHEMA
from employee_reporting.registry.validators import validate_registry
