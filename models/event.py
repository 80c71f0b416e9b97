"""
models/event.py
---------------
Domain model for sports events, the event list filter and the sports request/response types.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from utils.timestamps import format_wire_timestamp


@dataclass(frozen=True)
class Event:
    """
    A single sports event.

    Attributes:
        id: Database primary key.
        sport_id: The sport the event belongs to.
        name: Display name.
        advertised_start_time: Advertised start, UTC.
        status: Stored status code, returned as-is.
    """
    id: int
    sport_id: int
    name: str
    advertised_start_time: datetime
    status: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sport_id": self.sport_id,
            "name": self.name,
            "advertised_start_time": format_wire_timestamp(self.advertised_start_time),
            "status": self.status,
        }

    def __str__(self) -> str:
        return f"#{self.id} {self.name} (sport {self.sport_id}) | status {self.status}"


@dataclass(frozen=True)
class EventFilter:
    """Optional criteria for listing events. An empty filter applies no predicate."""
    sport_ids: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "sport_ids", tuple(self.sport_ids))


@dataclass(frozen=True)
class ListEventsRequest:
    filter: Optional[EventFilter] = None
    order_by: str = ""


@dataclass(frozen=True)
class ListEventsResponse:
    events: list = field(default_factory=list)


@dataclass(frozen=True)
class GetEventRequest:
    id: int
