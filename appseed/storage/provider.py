# appseed/storage/provider.py
from __future__ import annotations
from typing import List, Optional
from appseed.errors import StorageError, RecordValidationError
from appseed.storage.models import AppRecord


class StorageProvider:
    """
    Interface for application record stores.

    Writes are insert-or-replace keyed by `AppRecord.id`: a stored document is
    never merged with the incoming one.
    """

    def upsert_app(self, rec: AppRecord) -> bool:
        """Store `rec`, replacing any record with the same id. Returns True if created."""
        raise NotImplementedError

    def get_app(self, app_id: str) -> Optional[AppRecord]:
        raise NotImplementedError

    def find_app_by_key(self, numeric_key: int) -> Optional[AppRecord]:
        raise NotImplementedError

    def list_apps(self) -> List[AppRecord]:
        raise NotImplementedError

    def close(self) -> None:
        return


__all__ = ["StorageProvider", "StorageError", "RecordValidationError"]
