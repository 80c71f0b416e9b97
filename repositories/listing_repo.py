"""
repositories/listing_repo.py
----------------------------
Generic read-only repository shared by races and events.

A list query runs through four steps:
    base SELECT -> filter predicates -> ORDER BY -> execute and map rows.
A get query reuses the base SELECT with a fixed `id = %s` predicate.
Subclasses supply the table definition, how to read their filter type,
and how to turn a row into a domain record.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from psycopg2 import errors as pg_errors

from config import SEED_RECORD_COUNT
from db.init_db import create_table
from db.seed import seed_table
from repositories.exceptions import NotFoundError, TimestampConversionError
from repositories.order_by import parse_order_by
from repositories.queries import DEFAULT_ORDER_COLUMN, EntityTable, template_for
from repositories.query_builder import QueryBuilder, QueryResult
from utils.logger import get_logger
from utils.once import RunOnce

logger = get_logger(__name__)

T = TypeVar("T")


class ListingRepository(Generic[T]):
    """
    Read-only access to one entity table.

    The connection pool is shared and owned by the caller; each list/get
    borrows one connection for a single query and hands it back.
    """

    table: EntityTable
    entity_name: str

    def __init__(self, pool, seed_count: int = SEED_RECORD_COUNT):
        self.pool = pool
        self._seed_count = seed_count
        self._init_once = RunOnce()

    # ── INIT ──────────────────────────────────────────────

    def init(self) -> None:
        """
        Create the table and seed demonstration data.
        Runs once per repository; later and concurrent calls see the first result.
        """
        self._init_once(self._seed)

    def _seed(self) -> None:
        conn = self.pool.getconn()
        try:
            create_table(conn, self.table.name)
            seed_table(conn, self.table.name, self._seed_count)
            conn.commit()
            logger.info(f"Seeded {self.table.name} with up to {self._seed_count} rows")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to seed {self.table.name}: {e}")
            raise
        finally:
            self.pool.putconn(conn)

    # ── READ ──────────────────────────────────────────────

    def list(self, list_filter: Optional[Any] = None, order_by: str = "") -> list[T]:
        """
        Return the records matching the filter, or all records when no filter is given.

        Args:
            list_filter: Entity filter, or None.
            order_by: Comma-separated columns with optional asc/desc.
                Defaults to advertised start time.

        Raises:
            InvalidOrderByError: If order_by names an unknown column or direction.
            TimestampConversionError: If a stored start time is malformed.
        """
        query = template_for(self.table.name)
        query, args = self.apply_filter(query, list_filter)
        query = self.apply_order(query, order_by)
        return self._fetch(QueryResult(sql=query, parameters=tuple(args)))

    def get(self, record_id: int) -> T:
        """
        Return a single record by primary key.

        Raises:
            NotFoundError: If no record has this id.
        """
        query = QueryBuilder(template_for(self.table.name)).where("id = %s", [record_id]).build()
        records = self._fetch(query)
        if not records:
            raise NotFoundError(self.entity_name, record_id)
        return records[0]

    # ── QUERY COMPOSITION ─────────────────────────────────

    def apply_filter(self, query: str, list_filter: Optional[Any]) -> tuple[str, list]:
        """
        Append the filter's predicates to the query.

        Returns:
            The query text and the parameter values, in placeholder order.
        """
        if list_filter is None:
            return query, []

        grouping_ids, visible_only = self._filter_criteria(list_filter)
        builder = QueryBuilder(query).where_in(self.table.grouping_column, grouping_ids)
        if visible_only and self.table.visibility_column:
            builder.where(f"{self.table.visibility_column} = 1")

        result = builder.build()
        return result.sql, list(result.parameters)

    def apply_order(self, query: str, order_by: str) -> str:
        """Append an ORDER BY clause, defaulting to advertised start time."""
        builder = QueryBuilder(query)
        terms = parse_order_by(order_by, self.table.selectable_columns)
        if not terms:
            builder.order_by(DEFAULT_ORDER_COLUMN)
        for term in terms:
            builder.order_by(term.column, term.direction.value if term.direction else None)
        return builder.build().sql

    # ── EXECUTION ─────────────────────────────────────────

    def _fetch(self, query: QueryResult) -> list[T]:
        logger.debug(f"Executing SQL: {query.sql} with parameters {query.parameters}")
        conn = self.pool.getconn()
        try:
            with conn.cursor() as cur:
                query.execute_with_cursor(cur)
                return self.scan(cur)
        except (pg_errors.InvalidDatetimeFormat, pg_errors.DatetimeFieldOverflow) as e:
            # the status expression casts the stored start time server-side
            logger.error(f"Malformed start time in {self.table.name}: {e}")
            raise TimestampConversionError(None, str(e).strip()) from e
        except Exception as e:
            logger.error(f"Failed to query {self.table.name}: {e}")
            raise
        finally:
            self.pool.putconn(conn)

    def scan(self, cursor) -> list[T]:
        """Read every row from the cursor into domain records, in order."""
        # A statement without a result set has no rows to map
        if cursor.description is None:
            return []
        return [self._row_to_record(row) for row in cursor]

    # ── ENTITY HOOKS ──────────────────────────────────────

    def _filter_criteria(self, list_filter: Any) -> tuple[tuple, bool]:
        """Return (grouping ids, visible only) for this entity's filter type."""
        raise NotImplementedError

    def _row_to_record(self, row: tuple) -> T:
        raise NotImplementedError
