"""
appseed.utils
-------------
Base64 and canonical JSON helpers.
Canonical JSON keeps stored documents byte-stable across repeated upserts.
"""

from __future__ import annotations
import base64, json
from typing import Any, Dict


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def b64d(s: str) -> bytes:
    return base64.b64decode(s.encode("ascii"))


def canonical_json(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
