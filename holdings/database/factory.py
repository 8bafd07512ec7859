from holdings.config.settings import Settings
from holdings.database.repositories.base import BaseStore
from holdings.database.repositories.memory_store import MemoryStore
from holdings.database.repositories.postgres_store import PostgresStore


class StoreFactory:
    """Creates the configured storage backend."""

    BACKENDS: dict[str, type[BaseStore]] = {
        "memory": MemoryStore,
        "postgres": PostgresStore,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseStore:
        backend = settings.store_backend.lower()
        store_cls = cls.BACKENDS.get(backend)
        if store_cls is None:
            raise ValueError(
                f"Unknown store backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
            )
        return store_cls()
