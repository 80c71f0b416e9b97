"""
repositories/query_builder.py
-----------------------------
Structured construction of parameterized SELECT queries.

Predicates are collected as an ordered list of fragments with a parallel
parameter list, and ORDER BY terms as an ordered list. Nothing is joined
until `build()`, so the placeholder count and the parameter order always
match the fragments that produced them.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from repositories.exceptions import QueryBuilderError

PLACEHOLDER = "%s"


@dataclass(frozen=True)
class QueryResult:
    """Final SQL text and the parameters that must be bound with it."""

    sql: str
    parameters: tuple

    def execute_with_cursor(self, cursor) -> None:
        cursor.execute(self.sql, self.parameters)


class QueryBuilder:
    """
    Accumulates WHERE and ORDER BY clauses on top of a base SELECT.

    Usage:
        result = (QueryBuilder("SELECT id, name FROM races")
            .where_in("meeting_id", [1, 5])
            .where("visible = 1")
            .order_by("advertised_start_time")
            .build())
    """

    def __init__(self, base_sql: str):
        self._base_sql = base_sql
        self._where_clauses: list[str] = []
        self._parameters: list[Any] = []
        self._order_by_terms: list[str] = []

    def where(self, condition: str, parameters: Iterable[Any] = ()) -> "QueryBuilder":
        """
        Add a predicate. Predicates are joined with AND in the order added.

        Raises:
            QueryBuilderError: If the placeholder count does not match the parameters.
        """
        parameters = list(parameters)
        if not condition.strip():
            raise QueryBuilderError("WHERE condition cannot be empty")
        if condition.count(PLACEHOLDER) != len(parameters):
            raise QueryBuilderError(
                f"Condition {condition!r} has {condition.count(PLACEHOLDER)} "
                f"placeholders but {len(parameters)} parameters"
            )
        self._where_clauses.append(condition)
        self._parameters.extend(parameters)
        return self

    def where_in(self, column: str, values: Iterable[Any]) -> "QueryBuilder":
        """Add `column IN (...)` with one placeholder per value. No-op when empty."""
        values = list(values)
        if not values:
            return self
        placeholders = ", ".join([PLACEHOLDER] * len(values))
        return self.where(f"{column} IN ({placeholders})", values)

    def order_by(self, column: str, direction: Optional[str] = None) -> "QueryBuilder":
        self._order_by_terms.append(f"{column} {direction}" if direction else column)
        return self

    def build(self) -> QueryResult:
        sql = self._base_sql
        if self._where_clauses:
            sql += " WHERE " + " AND ".join(self._where_clauses)
        if self._order_by_terms:
            sql += " ORDER BY " + ", ".join(self._order_by_terms)
        return QueryResult(sql=sql, parameters=tuple(self._parameters))
