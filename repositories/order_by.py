"""
repositories/order_by.py
------------------------
Parser for the free-text order-by string.

The input is a comma-separated list of tokens such as
"meeting_id desc, advertised_start_time". Each token is parsed into a
column and an optional direction; only known columns and the asc/desc
keywords are accepted, so nothing from the caller reaches the SQL verbatim.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from repositories.exceptions import InvalidOrderByError


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class OrderTerm:
    column: str
    direction: Optional[SortDirection] = None

    def __str__(self) -> str:
        if self.direction is None:
            return self.column
        return f"{self.column} {self.direction.value}"


def split_tokens(order_by: str) -> list[str]:
    """
    Split an order-by string into trimmed, non-empty tokens.

    Empty segments (trailing or repeated commas, whitespace-only) are dropped.
    """
    if not order_by or not order_by.strip():
        return []
    tokens = []
    for value in order_by.split(","):
        value = value.replace("  ", " ").strip()
        if value:
            tokens.append(value)
    return tokens


def parse_token(token: str, allowed_columns: Iterable[str]) -> OrderTerm:
    """
    Parse one token into an OrderTerm.

    Raises:
        InvalidOrderByError: For an unknown column, an unknown direction or extra words.
    """
    parts = token.split()
    if len(parts) > 2:
        raise InvalidOrderByError(token, "expected '<column>' or '<column> asc|desc'")

    column = parts[0]
    if column not in set(allowed_columns):
        raise InvalidOrderByError(token, f"unknown column {column!r}")

    if len(parts) == 1:
        return OrderTerm(column)

    try:
        direction = SortDirection(parts[1].lower())
    except ValueError:
        raise InvalidOrderByError(token, f"unknown direction {parts[1]!r}") from None
    return OrderTerm(column, direction)


def parse_order_by(order_by: str, allowed_columns: Iterable[str]) -> list[OrderTerm]:
    """Parse a whole order-by string. Returns an empty list when no tokens survive."""
    allowed = tuple(allowed_columns)
    return [parse_token(token, allowed) for token in split_tokens(order_by)]
