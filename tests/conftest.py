import os

import pytest

from db.init_db import SCHEMA_SQL
from tests.fakes import FakePool


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


def _plain_postgres_url(url: str) -> str:
    # postgresql+psycopg2://... -> postgresql://...
    if "+" in url.split("://", 1)[0]:
        scheme, rest = url.split("://", 1)
        return scheme.split("+", 1)[0] + "://" + rest
    return url


@pytest.fixture(scope="session")
def postgres_url():
    """TEST_DATABASE_URL if set, otherwise a throwaway PostgreSQL container."""
    url = os.getenv("TEST_DATABASE_URL")
    if url:
        yield url
        return

    from testcontainers.postgres import PostgresContainer

    image = os.getenv("TEST_POSTGRES_IMAGE", "postgres:16-alpine")
    container = PostgresContainer(image)
    try:
        container.start()
    except Exception as e:  # no Docker daemon available
        pytest.skip(f"PostgreSQL container could not be started: {e}")

    try:
        yield _plain_postgres_url(container.get_connection_url())
    finally:
        container.stop()


@pytest.fixture
def pg_pool(postgres_url):
    """A pool on a database with freshly created, empty races and events tables."""
    from psycopg2 import pool

    conn_pool = pool.ThreadedConnectionPool(1, 4, postgres_url)
    conn = conn_pool.getconn()
    try:
        with conn.cursor() as cur:
            for table, schema in SCHEMA_SQL.items():
                cur.execute(f"DROP TABLE IF EXISTS {table}")
                cur.execute(schema)
        conn.commit()
    finally:
        conn_pool.putconn(conn)

    yield conn_pool

    conn_pool.closeall()
