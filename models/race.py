"""
models/race.py
--------------
Domain model for races, the race list filter and the racing request/response types.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Optional

from utils.timestamps import format_wire_timestamp


class RaceStatus(IntEnum):
    """Race status as computed by the list query."""
    OPEN = 0
    CLOSED = 1


@dataclass(frozen=True)
class Race:
    """
    A single race, as returned by a list or get query.

    Attributes:
        id: Database primary key.
        meeting_id: The meeting the race belongs to.
        name: Display name.
        number: Race number within the meeting.
        visible: Whether the race is visible.
        advertised_start_time: Advertised start, UTC.
        status: OPEN if the start is now or later, CLOSED otherwise.
    """
    id: int
    meeting_id: int
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime
    status: RaceStatus

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "meeting_id": self.meeting_id,
            "name": self.name,
            "number": self.number,
            "visible": self.visible,
            "advertised_start_time": format_wire_timestamp(self.advertised_start_time),
            "status": self.status.name,
        }

    def __str__(self) -> str:
        return f"#{self.id} {self.name} (meeting {self.meeting_id}, race {self.number}) | {self.status.name}"


@dataclass(frozen=True)
class RaceFilter:
    """
    Optional criteria for listing races.

    An all-default filter applies no predicate, the same as no filter at all.
    """
    meeting_ids: tuple = ()
    show_visible_only: bool = False

    def __post_init__(self):
        object.__setattr__(self, "meeting_ids", tuple(self.meeting_ids))


@dataclass(frozen=True)
class ListRacesRequest:
    filter: Optional[RaceFilter] = None
    order_by: str = ""


@dataclass(frozen=True)
class ListRacesResponse:
    races: list = field(default_factory=list)


@dataclass(frozen=True)
class GetRaceRequest:
    id: int
