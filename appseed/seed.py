# appseed/seed.py

"""
Insert-or-replace seeding of application records.

The bundled DEFAULT_APP document is the registry entry provisioned for the
"lhty2" application; other payloads can be loaded from JSON files.
"""

from __future__ import annotations
import json
from typing import Any, Dict, Union
from appseed.constants import DEV_CHANNEL_TYPE, GUEST_CHANNEL_TYPE
from appseed.errors import StorageError, RecordValidationError
from appseed.logger import get_logger
from appseed.storage.models import AppRecord
from appseed.storage.provider import StorageProvider

log = get_logger("appseed.seed")

DEFAULT_APP: Dict[str, Any] = {
    "_id": "eff83ce8bd790069",
    "desc": "lhty2",
    "key": 10000001,
    "secret": "393424f62ceb82f2896a29598769db96",
    "fingerprint": "719c821c1cb785f73d7dd7229e7ea704",
    "permissions": [
        {"prefix": "/LHTY2."},
    ],
    "channels": {
        "dev": {"@type": DEV_CHANNEL_TYPE},
        "dv": {"@type": GUEST_CHANNEL_TYPE, "can_transfer": True},
        "gc": {"@type": GUEST_CHANNEL_TYPE},
        "gp": {"@type": GUEST_CHANNEL_TYPE},
    },
}

Payload = Union[AppRecord, Dict[str, Any]]


def _as_record(payload: Payload) -> AppRecord:
    if isinstance(payload, AppRecord):
        # re-decode so nested permissions and channels get the same checks as a document
        try:
            payload = payload.to_dict()
        except (AttributeError, TypeError) as e:
            raise RecordValidationError(f"malformed app record: {e}") from e
    return AppRecord.from_dict(payload)


def upsert(store: StorageProvider, app_id: str, record: Payload) -> None:
    """
    Write `record` under `app_id`, creating it if absent and fully replacing it otherwise.

    Raises StorageError if the store cannot commit the write, or its subclass
    RecordValidationError if the payload is rejected before the write.
    """
    if not isinstance(app_id, str) or not app_id:
        raise RecordValidationError("app id must be a non-empty string")
    rec = _as_record(record)
    if rec.id != app_id:
        raise RecordValidationError(f"record id {rec.id!r} does not match upsert key {app_id!r}")

    try:
        created = store.upsert_app(rec)
    except StorageError:
        raise
    except Exception as e:
        raise StorageError(f"failed to upsert app {app_id}: {e}") from e

    log.info(f"[SEED] {'created' if created else 'replaced'} app={app_id} "
             f"permissions={len(rec.permissions)} channels={len(rec.channels)}")


def load_payload(path) -> AppRecord:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise RecordValidationError(f"payload {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise StorageError(f"cannot read payload {path}: {e}") from e
    return AppRecord.from_dict(data)


def seed(store: StorageProvider, payload: Payload | None = None) -> AppRecord:
    rec = _as_record(payload if payload is not None else DEFAULT_APP)
    upsert(store, rec.id, rec)
    return rec
