"""
repositories/race_repo.py
-------------------------
Data access layer for races.
"""

from models.race import Race, RaceFilter, RaceStatus
from repositories.listing_repo import ListingRepository
from repositories.queries import RACES_TABLE
from utils.timestamps import to_wire_timestamp


class RaceRepository(ListingRepository[Race]):
    """Read-only repository for the races table."""

    table = RACES_TABLE
    entity_name = "race"

    def _filter_criteria(self, list_filter: RaceFilter) -> tuple[tuple, bool]:
        return tuple(list_filter.meeting_ids), bool(list_filter.show_visible_only)

    def _row_to_record(self, row: tuple) -> Race:
        """Convert a database row tuple to a Race domain object."""
        return Race(
            id=row[0],
            meeting_id=row[1],
            name=row[2],
            number=row[3],
            visible=bool(row[4]),
            advertised_start_time=to_wire_timestamp(row[5]),
            status=RaceStatus(row[6]),
        )
