# appseed/storage/__init__.py

from .models import AppRecord, Permission
from .provider import StorageProvider, StorageError, RecordValidationError
from .providers.memory_provider import InMemoryStorage
from .providers.sqlite_provider import SQLiteStorage
from appseed.constants import DEFAULT_PROVIDER, DEFAULT_DB_PATH
import os


def load_storage_provider(config: dict | None = None) -> StorageProvider:
    """
    Factory resolver for selecting the backing store.

    Supported:
        - sqlite (default)
        - memory
    """
    config = config or {}
    provider = config.get("provider") or os.getenv("APPSEED_STORAGE_PROVIDER", DEFAULT_PROVIDER)

    if provider == "memory":
        return InMemoryStorage()

    if provider == "sqlite":
        db_path = config.get("sqlite_path") or os.getenv("APPSEED_DB_PATH", DEFAULT_DB_PATH)
        return SQLiteStorage(db_path)

    raise ValueError(f"Unknown storage provider: {provider}")


__all__ = [
    "AppRecord",
    "Permission",
    "StorageProvider",
    "StorageError",
    "RecordValidationError",
    "InMemoryStorage",
    "SQLiteStorage",
    "load_storage_provider",
]
