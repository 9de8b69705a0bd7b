"""AES-256-GCM authenticated encryption primitive.

Each seal draws a fresh random nonce; callers never supply one, so a
(key, nonce) pair cannot be reused by mistake.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from msgvault.domain.security.exceptions import (
    ConstructionError,
    DecryptionError,
    InvalidEncryptionKeyError,
)

KEY_SIZE = 32  # 256 bits for AES-256
NONCE_SIZE = 12  # 96 bits for AES-GCM


@dataclass(frozen=True)
class SealedPayload:
    """Ciphertext (with appended tag) and the nonce it was sealed with."""

    nonce: bytes
    ciphertext: bytes


class AesGcmCipher:
    """AES-256-GCM with random nonces and no associated data."""

    def __init__(self, key: bytes):
        if len(key) != KEY_SIZE:
            msg = f"Encryption key must be exactly {KEY_SIZE} bytes, got {len(key)}"
            raise InvalidEncryptionKeyError(msg)
        try:
            self._aesgcm = AESGCM(key)
        except (ValueError, TypeError) as e:
            msg = f"Failed to create AES-GCM cipher: {e}"
            raise ConstructionError(msg) from e

    @property
    def nonce_size(self) -> int:
        return NONCE_SIZE

    def seal(self, plaintext: bytes) -> SealedPayload:
        nonce = os.urandom(NONCE_SIZE)
        ciphertext = self._aesgcm.encrypt(nonce, plaintext, None)
        return SealedPayload(nonce=nonce, ciphertext=ciphertext)

    def open(self, ciphertext: bytes, nonce: bytes) -> bytes:
        try:
            return self._aesgcm.decrypt(nonce, ciphertext, None)
        except InvalidTag as e:
            msg = "Decryption failed: Invalid tag (wrong key or tampered data)"
            raise DecryptionError(msg) from e
        except ValueError as e:
            msg = f"Decryption failed: {e}"
            raise DecryptionError(msg) from e
