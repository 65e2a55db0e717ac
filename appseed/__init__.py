"""
appseed
=======
Seeding utility for application registry records.

Provides:
- Application record schema with @type-tagged channel descriptors
- Insert-or-replace upsert against a pluggable storage provider (SQLite default)
- Fingerprint-derived AES-GCM helpers and secret checks
"""

from .seed import upsert, seed, load_payload, DEFAULT_APP
from .errors import StorageError, RecordValidationError

__all__ = [
    "upsert",
    "seed",
    "load_payload",
    "DEFAULT_APP",
    "StorageError",
    "RecordValidationError",
]
