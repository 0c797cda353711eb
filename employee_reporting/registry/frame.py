"""Tabular view of a registry for whole-collection checks and grouping.

The frame keeps one row per employee, in input order, so that a row's index
label is the employee's position in the original list. Identifier columns use
the nullable ``Int64`` dtype so that missing ids stay missing instead of
turning into floats; salaries stay as ``Decimal`` objects.
"""

from collections.abc import Sequence

import pandas as pd
import pandera.pandas as pa
from pandera.pandas import Check, Column

from employee_reporting.registry.models import Employee

registry_frame_schema = pa.DataFrameSchema(
    {
        "employee_id": Column("Int64", Check.greater_than_or_equal_to(0), nullable=True),
        "first_name": Column(object, nullable=True),
        "last_name": Column(object, nullable=True),
        "salary": Column(object, nullable=True),
        "manager_id": Column("Int64", Check.greater_than_or_equal_to(0), nullable=True),
    },
    strict=True,
)


def registry_frame(employees: Sequence[Employee]) -> pd.DataFrame:
    """Build and validate the DataFrame view of a list of employees."""
    frame = pd.DataFrame(
        {
            "employee_id": pd.array([e.id for e in employees], dtype="Int64"),
            "first_name": pd.Series([e.first_name for e in employees], dtype=object),
            "last_name": pd.Series([e.last_name for e in employees], dtype=object),
            "salary": pd.Series([e.salary for e in employees], dtype=object),
            "manager_id": pd.array([e.manager_id for e in employees], dtype="Int64"),
        },
        index=pd.RangeIndex(len(employees)),
    )
    return registry_frame_schema.validate(frame)
