from unittest.mock import MagicMock

import pytest

from holdings.database.factory import StoreFactory
from holdings.database.repositories.memory_store import MemoryStore
from holdings.database.repositories.postgres_store import PostgresStore


def _make_settings(store_backend: str) -> MagicMock:
    settings = MagicMock()
    settings.store_backend = store_backend
    return settings


class TestStoreFactory:
    def test_creates_memory_store(self) -> None:
        assert isinstance(StoreFactory.create(_make_settings("memory")), MemoryStore)

    def test_creates_postgres_store(self) -> None:
        assert isinstance(StoreFactory.create(_make_settings("Postgres")), PostgresStore)

    def test_raises_for_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown store backend"):
            StoreFactory.create(_make_settings("sqlite"))
