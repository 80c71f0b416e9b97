"""
repositories/exceptions.py
--------------------------
Errors raised by the listing repositories.

Store errors (psycopg2.Error) propagate to the caller as-is, except PostgreSQL
rejecting a stored start time, which surfaces as TimestampConversionError.
"""

from typing import Any


class RepositoryError(Exception):
    """Base class for repository errors."""


class NotFoundError(RepositoryError):
    """Raised by `get` when no row matches the requested identifier."""

    def __init__(self, entity: str, record_id: int):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity.capitalize()} was not found")


class TimestampConversionError(RepositoryError):
    """Raised when a stored start time cannot be read as a timestamp."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        if value is None:
            super().__init__(f"Invalid stored timestamp: {reason}")
        else:
            super().__init__(f"Invalid stored timestamp {value!r}: {reason}")


class InvalidOrderByError(ValueError):
    """Raised when an order-by token names an unknown column or direction."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid order by field {token!r}: {reason}")


class QueryBuilderError(Exception):
    """Raised when a query fragment and its parameters do not line up."""
