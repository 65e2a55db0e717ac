# appseed/storage/models.py
from __future__ import annotations
import hmac
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
from appseed.channels import Channel, channels_from_dict, channels_to_dict
from appseed.constants import MAX_APP_KEY
from appseed.errors import RecordValidationError


@dataclass
class Permission:
    """
    One access rule of an application record.

    Every non-empty criterion must match for the rule to permit a path:
    `path` is an exact match, `prefix` a string prefix, `regexp` a search.
    """
    prefix: str = ""
    path: str = ""
    regexp: str = ""

    def is_permitted(self, path: str) -> bool:
        if self.path and path != self.path:
            return False
        if self.prefix and not path.startswith(self.prefix):
            return False
        if self.regexp and not re.search(self.regexp, path):
            return False
        return True

    def to_dict(self) -> Dict[str, str]:
        return {k: v for k, v in (("path", self.path), ("prefix", self.prefix), ("regexp", self.regexp)) if v}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Permission":
        if not isinstance(data, dict):
            raise RecordValidationError("permission entries must be objects")
        values = {}
        for k in ("prefix", "path", "regexp"):
            v = data.get(k, "")
            if not isinstance(v, str):
                raise RecordValidationError(f"permission '{k}' must be a string")
            values[k] = v
        if values["regexp"]:
            try:
                re.compile(values["regexp"])
            except re.error as e:
                raise RecordValidationError(f"invalid permission regexp {values['regexp']!r}: {e}") from e
        return cls(**values)


@dataclass
class AppRecord:
    """
    Storage-level representation of an application registry entry.

    Encodes to the registry document shape (`_id`, `desc`, `key`, ...) and is
    storage-agnostic, so any provider can persist it.
    """
    id: str
    description: str
    numeric_key: int
    secret: str
    fingerprint: str
    permissions: List[Permission] = field(default_factory=list)
    channels: Dict[str, Channel] = field(default_factory=dict)

    def validate(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise RecordValidationError("app id must be a non-empty string")
        for name in ("description", "secret", "fingerprint"):
            if not isinstance(getattr(self, name), str):
                raise RecordValidationError(f"'{name}' must be a string")
        if isinstance(self.numeric_key, bool) or not isinstance(self.numeric_key, int):
            raise RecordValidationError("'numeric_key' must be an integer")
        if not 0 <= self.numeric_key <= MAX_APP_KEY:
            raise RecordValidationError(f"'numeric_key' out of range: {self.numeric_key}")

    def is_permitted(self, path: str, common: Iterable[Permission] = ()) -> bool:
        return any(p.is_permitted(path) for p in common) or \
            any(p.is_permitted(path) for p in self.permissions)

    def check_secret(self, secret: str) -> bool:
        if not self.secret or not secret:
            return False
        return hmac.compare_digest(self.secret.encode("utf-8"), secret.encode("utf-8"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "desc": self.description,
            "key": self.numeric_key,
            "secret": self.secret,
            "fingerprint": self.fingerprint,
            "permissions": [p.to_dict() for p in self.permissions],
            "channels": channels_to_dict(self.channels),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppRecord":
        if not isinstance(data, dict):
            raise RecordValidationError("app record must be an object")
        missing = [k for k in ("_id", "desc", "key", "secret", "fingerprint", "permissions", "channels")
                   if k not in data]
        if missing:
            raise RecordValidationError(f"app record missing fields: {', '.join(missing)}")
        if not isinstance(data["permissions"], list):
            raise RecordValidationError("'permissions' must be a list")

        rec = cls(
            id=data["_id"],
            description=data["desc"],
            numeric_key=data["key"],
            secret=data["secret"],
            fingerprint=data["fingerprint"],
            permissions=[Permission.from_dict(p) for p in data["permissions"]],
            channels=channels_from_dict(data["channels"]),
        )
        rec.validate()
        return rec


def decode_app(doc: Optional[Dict[str, Any]]) -> Optional[AppRecord]:
    return AppRecord.from_dict(doc) if doc is not None else None
