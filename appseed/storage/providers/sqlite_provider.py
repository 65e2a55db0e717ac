from __future__ import annotations
from typing import Optional, List
import json, sqlite3, os
from appseed.errors import StorageError
from appseed.logger import get_logger
from appseed.storage.models import AppRecord
from appseed.storage.provider import StorageProvider
from appseed.utils import canonical_json

log = get_logger("appseed.storage.sqlite")


class SQLiteStorage(StorageProvider):
    def __init__(self, path="db/appseed.db"):
        self.path = str(path)
        # If no directory, default to current working directory
        dir_path = os.path.dirname(self.path) or "."
        try:
            os.makedirs(dir_path, exist_ok=True)
            self.db = sqlite3.connect(self.path, check_same_thread=False)
            self._init()
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"cannot open sqlite store at {self.path}: {e}") from e
        log.debug(f"[SQLITE] opened {self.path}")

    def _init(self) -> None:
        self.db.execute("""CREATE TABLE IF NOT EXISTS apps(
            id TEXT PRIMARY KEY,
            numeric_key INTEGER NOT NULL,
            doc TEXT NOT NULL
        )""")
        self.db.commit()

    def upsert_app(self, rec: AppRecord) -> bool:
        try:
            with self.db:
                created = self.db.execute("SELECT 1 FROM apps WHERE id=?", (rec.id,)).fetchone() is None
                self.db.execute(
                    "INSERT INTO apps(id,numeric_key,doc) VALUES(?,?,?) "
                    "ON CONFLICT(id) DO UPDATE SET numeric_key=excluded.numeric_key, doc=excluded.doc",
                    (rec.id, rec.numeric_key, canonical_json(rec.to_dict()))
                )
        except sqlite3.Error as e:
            raise StorageError(f"failed to upsert app {rec.id}: {e}") from e
        return created

    def _query(self, sql: str, params: tuple = ()) -> List[AppRecord]:
        try:
            rows = self.db.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"failed to query apps: {e}") from e
        return [AppRecord.from_dict(json.loads(doc)) for (doc,) in rows]

    def get_app(self, app_id: str) -> Optional[AppRecord]:
        res = self._query("SELECT doc FROM apps WHERE id=?", (app_id,))
        return res[0] if res else None

    def find_app_by_key(self, numeric_key: int) -> Optional[AppRecord]:
        res = self._query("SELECT doc FROM apps WHERE numeric_key=? ORDER BY rowid LIMIT 1", (numeric_key,))
        return res[0] if res else None

    def list_apps(self) -> List[AppRecord]:
        return self._query("SELECT doc FROM apps ORDER BY id")

    def close(self):
        self.db.close()
