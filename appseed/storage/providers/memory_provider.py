from typing import Dict, Any, List, Optional
from appseed.storage.models import AppRecord, decode_app
from appseed.storage.provider import StorageProvider


class InMemoryStorage(StorageProvider):
    # documents are kept encoded so later edits to a caller's record never leak in
    def __init__(self):
        self.apps: Dict[str, Dict[str, Any]] = {}

    def upsert_app(self, rec: AppRecord) -> bool:
        created = rec.id not in self.apps
        self.apps[rec.id] = rec.to_dict()
        return created

    def get_app(self, app_id: str) -> Optional[AppRecord]:
        return decode_app(self.apps.get(app_id))

    def find_app_by_key(self, numeric_key: int) -> Optional[AppRecord]:
        doc = next((d for d in self.apps.values() if d["key"] == numeric_key), None)
        return decode_app(doc)

    def list_apps(self) -> List[AppRecord]:
        return [AppRecord.from_dict(d) for d in self.apps.values()]
