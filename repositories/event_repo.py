"""
repositories/event_repo.py
--------------------------
Data access layer for sports events.
"""

from models.event import Event, EventFilter
from repositories.listing_repo import ListingRepository
from repositories.queries import EVENTS_TABLE
from utils.timestamps import to_wire_timestamp


class EventRepository(ListingRepository[Event]):
    """Read-only repository for the events table."""

    table = EVENTS_TABLE
    entity_name = "event"

    def _filter_criteria(self, list_filter: EventFilter) -> tuple[tuple, bool]:
        return tuple(list_filter.sport_ids), False

    def _row_to_record(self, row: tuple) -> Event:
        """Convert a database row tuple to an Event domain object."""
        return Event(
            id=row[0],
            sport_id=row[1],
            name=row[2],
            advertised_start_time=to_wire_timestamp(row[3]),
            status=row[4],
        )
