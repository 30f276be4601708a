"""Customer stores and session-time backend selection."""

from ro_track.config import RoTrackConfig
from ro_track.exceptions import ConfigurationError
from ro_track.store.base import CustomerStore
from ro_track.store.local import LocalJsonStore


def open_store(config: RoTrackConfig) -> CustomerStore:
    """Open the store selected by ``config.storage.backend``."""
    backend = config.storage.backend
    if backend == "local":
        return LocalJsonStore(config.storage.data_file)
    if backend == "postgres":
        from ro_track.store.postgres import PostgresStore

        store = PostgresStore(config.postgres)
        store.create_schema()
        return store
    raise ConfigurationError(f"Unknown storage backend {backend!r}")


__all__ = ["CustomerStore", "LocalJsonStore", "open_store"]
