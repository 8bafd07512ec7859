import os
from collections.abc import Generator

import psycopg
import pytest

from holdings.config.settings import Settings
from holdings.database.connection import build_conninfo, close_pool, init_pool
from holdings.database.repositories.postgres_store import PostgresStore


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "holdings_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        with psycopg.connect(build_conninfo(test_settings), connect_timeout=3):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a disposable database"
        )
    init_pool(test_settings)
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def postgres_store(integration_pool: None) -> Generator[PostgresStore, None, None]:
    store = PostgresStore()
    store.migrate()
    store.reset()
    yield store
    store.reset()
