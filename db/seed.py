"""
db/seed.py
----------
Demonstration data for a fresh database.
Rows are keyed 1..count and inserted with ON CONFLICT DO NOTHING,
so reseeding never duplicates or overwrites existing rows.
"""

import random
from datetime import datetime, timedelta, timezone

from utils.timestamps import format_wire_timestamp

_PLACES = [
    "Ascot", "Flemington", "Randwick", "Sha Tin", "Longchamp", "Churchill",
    "Cheltenham", "Meydan", "Eagle Farm", "Caulfield", "Belmont", "Goodwood",
]
_RACE_KINDS = ["Cup", "Stakes", "Handicap", "Plate", "Classic", "Sprint", "Derby", "Mile"]
_TEAMS = [
    "Rovers", "United", "Wanderers", "Tigers", "Eagles", "Sharks",
    "Storm", "Bulls", "Hawks", "Giants", "Rangers", "Lions",
]

RACE_INSERT_SQL = """
    INSERT INTO races (id, meeting_id, name, number, visible, advertised_start_time)
    VALUES (%s, %s, %s, %s, %s, %s)
    ON CONFLICT (id) DO NOTHING;
"""

EVENT_INSERT_SQL = """
    INSERT INTO events (id, sport_id, name, advertised_start_time, status)
    VALUES (%s, %s, %s, %s, %s)
    ON CONFLICT (id) DO NOTHING;
"""


def _random_start(rng: random.Random) -> str:
    """A start time between one day ago and two days from now, as RFC 3339 text."""
    now = datetime.now(timezone.utc)
    earliest = now - timedelta(days=1)
    offset = rng.uniform(0, timedelta(days=3).total_seconds())
    return format_wire_timestamp((earliest + timedelta(seconds=offset)).replace(microsecond=0))


def race_rows(count: int, rng: random.Random | None = None) -> list[tuple]:
    rng = rng or random.Random()
    return [
        (
            i,
            rng.randint(1, 10),
            f"{rng.choice(_PLACES)} {rng.choice(_RACE_KINDS)}",
            rng.randint(1, 12),
            rng.randint(0, 1),
            _random_start(rng),
        )
        for i in range(1, count + 1)
    ]


def event_rows(count: int, rng: random.Random | None = None) -> list[tuple]:
    rng = rng or random.Random()
    rows = []
    for i in range(1, count + 1):
        home, away = rng.sample(_TEAMS, 2)
        rows.append((
            i,
            rng.randint(1, 10),
            f"{rng.choice(_PLACES)} {home} v {away}",
            _random_start(rng),
            rng.randint(0, 3),
        ))
    return rows


_SEEDERS = {
    "races": (RACE_INSERT_SQL, race_rows),
    "events": (EVENT_INSERT_SQL, event_rows),
}


def seed_table(conn, table: str, count: int) -> None:
    """
    Insert `count` demonstration rows into a table on an open connection.
    The caller commits.

    Raises:
        ValueError: If the table has no seeder.
    """
    try:
        sql, make_rows = _SEEDERS[table]
    except KeyError:
        raise ValueError(f"No seed data for table {table!r}") from None
    with conn.cursor() as cur:
        cur.executemany(sql, make_rows(count))
