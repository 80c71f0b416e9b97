"""
repositories/queries.py
-----------------------
Table definitions and the base "list" SELECT for each entity.
"""

from dataclasses import dataclass, field
from typing import Optional

RACES = "races"
EVENTS = "events"

DEFAULT_ORDER_COLUMN = "advertised_start_time"


@dataclass(frozen=True)
class EntityTable:
    """
    Describes how one entity is stored and listed.

    Attributes:
        name: Table name, also used as the registry key.
        columns: Persisted columns in SELECT order.
        computed: Computed columns, name -> SQL expression, appended after `columns`.
        grouping_column: Column used by the IN-list filter.
        visibility_column: Column used by the "visible only" filter, if the entity has one.
    """
    name: str
    columns: tuple
    grouping_column: str
    computed: dict = field(default_factory=dict)
    visibility_column: Optional[str] = None

    @property
    def selectable_columns(self) -> tuple:
        """Every column a caller may order by."""
        return self.columns + tuple(self.computed)

    def list_query(self) -> str:
        select_list = list(self.columns)
        select_list += [f"{expr} AS {name}" for name, expr in self.computed.items()]
        return f"SELECT {', '.join(select_list)} FROM {self.name}"


# status: 0 (OPEN) if the advertised start is at or after the current local
# time, 1 (CLOSED) otherwise. Text without an offset is read in the session zone.
RACE_STATUS_SQL = (
    "CASE WHEN CAST(advertised_start_time AS TIMESTAMPTZ) >= NOW() "
    "THEN 0 ELSE 1 END"
)

RACES_TABLE = EntityTable(
    name=RACES,
    columns=("id", "meeting_id", "name", "number", "visible", "advertised_start_time"),
    computed={"status": RACE_STATUS_SQL},
    grouping_column="meeting_id",
    visibility_column="visible",
)

EVENTS_TABLE = EntityTable(
    name=EVENTS,
    columns=("id", "sport_id", "name", "advertised_start_time", "status"),
    grouping_column="sport_id",
)

_TABLES = {table.name: table for table in (RACES_TABLE, EVENTS_TABLE)}
_LIST_QUERIES = {name: table.list_query() for name, table in _TABLES.items()}


def table_for(entity: str) -> EntityTable:
    try:
        return _TABLES[entity]
    except KeyError:
        raise ValueError(f"Unknown entity: {entity!r}") from None


def template_for(entity: str) -> str:
    """
    Return the base "list" SELECT for an entity.

    Raises:
        ValueError: If the entity is not registered.
    """
    table_for(entity)
    return _LIST_QUERIES[entity]
