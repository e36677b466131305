"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.repositories.common.kv import KeyValueRepository
from app.repositories.registry.photo import PhotoRepository
from app.services.registry.service import RegistryService
from app.services.registry.store import MemberStore


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, conn: duckdb.DuckDBPyConnection | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self._kv_repo = KeyValueRepository(conn)
        self._photo_repo = PhotoRepository(conn)

        # Store is loaded once; every mutation writes through
        self.store = MemberStore(kv=self._kv_repo)
        self.store.load()

        # Services (with injected repos)
        self.registry = RegistryService(
            store=self.store,
            photos=self._photo_repo,
        )

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() starts over."""
        self._initialized = False


# Global container instance
container = Container()
