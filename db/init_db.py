"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from utils.logger import get_logger

logger = get_logger(__name__)

# advertised_start_time holds RFC 3339 text, e.g. 2026-10-19T14:30:00Z
SCHEMA_SQL = {
    "races": """
        CREATE TABLE IF NOT EXISTS races (
            id                      INTEGER PRIMARY KEY,
            meeting_id              INTEGER,
            name                    TEXT,
            number                  INTEGER,
            visible                 INTEGER,
            advertised_start_time   TEXT
        );
        CREATE INDEX IF NOT EXISTS idx_races_meeting ON races(meeting_id);
    """,
    "events": """
        CREATE TABLE IF NOT EXISTS events (
            id                      INTEGER PRIMARY KEY,
            sport_id                INTEGER,
            name                    TEXT,
            advertised_start_time   TEXT,
            status                  INTEGER
        );
        CREATE INDEX IF NOT EXISTS idx_events_sport ON events(sport_id);
    """,
}


def create_table(conn, table: str) -> None:
    """
    Create one table on an open connection. The caller commits.
    Safe to call multiple times (uses IF NOT EXISTS).

    Raises:
        ValueError: If the table has no schema.
    """
    try:
        sql = SCHEMA_SQL[table]
    except KeyError:
        raise ValueError(f"No schema for table {table!r}") from None
    with conn.cursor() as cur:
        cur.execute(sql)


def create_tables(conn_pool) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = conn_pool.getconn()
    try:
        for table in SCHEMA_SQL:
            create_table(conn, table)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        conn_pool.putconn(conn)


if __name__ == "__main__":
    from db.connection import close_pool, init_pool
    create_tables(init_pool())
    close_pool()
    print("Database schema created successfully.")
