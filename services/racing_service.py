"""
services/racing_service.py
--------------------------
Racing service: forwards list/get requests to the RaceRepository
and wraps the results in response types. No business logic lives here.
"""

from models.race import GetRaceRequest, ListRacesRequest, ListRacesResponse, Race
from repositories.race_repo import RaceRepository


class RacingService:
    """Entry points used by the transport layer for races."""

    def __init__(self, repo: RaceRepository):
        self.repo = repo

    def list_races(self, request: ListRacesRequest) -> ListRacesResponse:
        """Return races matching the request's filter, in the requested order."""
        races = self.repo.list(request.filter, request.order_by)
        return ListRacesResponse(races=races)

    def get_race(self, request: GetRaceRequest) -> Race:
        """Return a single race; NotFoundError propagates unchanged."""
        return self.repo.get(request.id)
