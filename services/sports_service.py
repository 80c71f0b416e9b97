"""
services/sports_service.py
--------------------------
Sports service: forwards list/get requests to the EventRepository.
"""

from models.event import Event, GetEventRequest, ListEventsRequest, ListEventsResponse
from repositories.event_repo import EventRepository


class SportsService:
    """Entry points used by the transport layer for sports events."""

    def __init__(self, repo: EventRepository):
        self.repo = repo

    def list_events(self, request: ListEventsRequest) -> ListEventsResponse:
        events = self.repo.list(request.filter, request.order_by)
        return ListEventsResponse(events=events)

    def get_event(self, request: GetEventRequest) -> Event:
        return self.repo.get(request.id)
