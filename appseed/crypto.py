"""
appseed.crypto
--------------
Per-application cryptographic helpers.

- fingerprint_key(): SHA-256 of an app fingerprint, used as a 256-bit AES key
- AES-GCM: encrypt/decrypt app-scoped data under that key
- encrypt_for_app() / decrypt_for_app(): JSON payload helpers bound to an AppRecord
"""

from __future__ import annotations
from typing import Tuple, Optional, Dict, Any
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
import os, json
from .utils import b64e, b64d
from .storage.models import AppRecord


def fingerprint_key(fingerprint: str) -> bytes:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(fingerprint.encode("utf-8"))
    return digest.finalize()  # always 32 bytes, so AESGCM accepts it


def aead_encrypt(key: bytes, plaintext: bytes, aad: Optional[bytes] = None) -> Tuple[bytes, bytes]:
    aes = AESGCM(key)
    nonce = os.urandom(12)
    ct = aes.encrypt(nonce, plaintext, aad)
    return nonce, ct


def aead_decrypt(key: bytes, nonce: bytes, ciphertext: bytes, aad: Optional[bytes] = None) -> bytes:
    aes = AESGCM(key)
    return aes.decrypt(nonce, ciphertext, aad)


def encrypt_for_app(app: AppRecord, payload: Dict[str, Any]) -> Dict[str, str]:
    # app id is bound as AAD
    nonce, ct = aead_encrypt(fingerprint_key(app.fingerprint), json.dumps(payload).encode("utf-8"),
                             aad=app.id.encode("utf-8"))
    return {"nonce": b64e(nonce), "ciphertext": b64e(ct)}


def decrypt_for_app(app: AppRecord, enc: Dict[str, str]) -> Dict[str, Any]:
    pt = aead_decrypt(fingerprint_key(app.fingerprint), b64d(enc["nonce"]), b64d(enc["ciphertext"]),
                      aad=app.id.encode("utf-8"))
    return json.loads(pt.decode("utf-8"))
