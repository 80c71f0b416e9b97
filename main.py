"""
main.py
-------
Entry point for RaceBook.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Seed demonstration races and events (once per process).
    - Print a JSON listing of races or events, or a single record.

Examples:
    python main.py races --meeting-id 1 --meeting-id 5 --visible-only --order-by "status, meeting_id desc"
    python main.py event 42
"""

import argparse
import json
import sys

from db.connection import close_pool, init_pool
from db.init_db import create_tables
from models.event import EventFilter, GetEventRequest, ListEventsRequest
from models.race import GetRaceRequest, ListRacesRequest, RaceFilter
from repositories.event_repo import EventRepository
from repositories.exceptions import InvalidOrderByError, NotFoundError
from repositories.race_repo import RaceRepository
from services.racing_service import RacingService
from services.sports_service import SportsService
from utils.logger import LOG_LEVELS, get_logger, set_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="racebook", description="List races and sports events.")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, default=None)
    commands = parser.add_subparsers(dest="command", required=True)

    races = commands.add_parser("races", help="list races")
    races.add_argument("--meeting-id", type=int, action="append", default=[], dest="meeting_ids")
    races.add_argument("--visible-only", action="store_true")
    races.add_argument("--order-by", default="")

    events = commands.add_parser("events", help="list sports events")
    events.add_argument("--sport-id", type=int, action="append", default=[], dest="sport_ids")
    events.add_argument("--order-by", default="")

    race = commands.add_parser("race", help="show one race")
    race.add_argument("id", type=int)

    event = commands.add_parser("event", help="show one sports event")
    event.add_argument("id", type=int)

    return parser


def run(args: argparse.Namespace, racing: RacingService, sports: SportsService):
    """Dispatch a parsed command and return a JSON-serializable result."""
    if args.command == "races":
        request = ListRacesRequest(
            filter=RaceFilter(meeting_ids=args.meeting_ids, show_visible_only=args.visible_only),
            order_by=args.order_by,
        )
        return [race.to_dict() for race in racing.list_races(request).races]
    if args.command == "events":
        request = ListEventsRequest(filter=EventFilter(sport_ids=args.sport_ids), order_by=args.order_by)
        return [event.to_dict() for event in sports.list_events(request).events]
    if args.command == "race":
        return racing.get_race(GetRaceRequest(id=args.id)).to_dict()
    return sports.get_event(GetEventRequest(id=args.id)).to_dict()


def main(argv=None) -> int:
    """Initialize the store and run one command."""
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_level(args.log_level)

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    pool = init_pool()
    try:
        create_tables(pool)

        # ── 2. Repositories and services ──────────────────
        race_repo = RaceRepository(pool)
        event_repo = EventRepository(pool)
        race_repo.init()
        event_repo.init()

        # ── 3. Run the command ────────────────────────────
        try:
            result = run(args, RacingService(race_repo), SportsService(event_repo))
        except NotFoundError as e:
            print(str(e), file=sys.stderr)
            return 1
        except InvalidOrderByError as e:
            print(str(e), file=sys.stderr)
            return 2

        print(json.dumps(result, indent=2, ensure_ascii=False))
        return 0
    finally:
        # ── 4. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
