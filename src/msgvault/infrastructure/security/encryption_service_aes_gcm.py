"""AES-GCM content encryption service implementation."""

from __future__ import annotations

import base64
import binascii
import json
import logging
import os
from typing import TYPE_CHECKING, Any, Optional

from msgvault.domain.security.exceptions import (
    EnvelopeEncodingError,
    InvalidEncryptionKeyError,
    SerializationError,
)
from msgvault.domain.security.services import (
    ContentEncryptionService,
    EnvelopeContent,
    classify_content,
)
from msgvault.domain.security.value_objects import Envelope
from msgvault.infrastructure.security.aes_gcm_cipher import KEY_SIZE, AesGcmCipher
from msgvault.infrastructure.security.key_material import decode_key

if TYPE_CHECKING:
    from msgvault_config.settings import Settings

logger = logging.getLogger(__name__)


class AesGcmEncryptionService(ContentEncryptionService):
    """
    Envelope codec backed by AES-256-GCM.

    Content is serialized to compact UTF-8 JSON, sealed under a fresh
    nonce and wrapped in an Envelope with base64 fields. A disabled
    service holds no key material and passes all content through.
    """

    def __init__(self, enabled: bool, key: Optional[bytes] = None):
        self._enabled = enabled
        self._cipher: Optional[AesGcmCipher] = None

        if not enabled:
            return

        if not key:
            msg = "Encryption key cannot be empty when encryption is enabled"
            raise InvalidEncryptionKeyError(msg)

        self._cipher = AesGcmCipher(key)

    @classmethod
    def from_settings(cls, settings: Settings) -> AesGcmEncryptionService:
        """Build the service from application settings."""
        if not settings.encryption_enabled:
            return cls(enabled=False)

        secret = settings.encryption_key
        if secret is None or not secret.get_secret_value():
            msg = "ENCRYPTION_KEY must be set when ENCRYPTION_ENABLED is true"
            raise InvalidEncryptionKeyError(msg)

        return cls(enabled=True, key=decode_key(secret.get_secret_value()))

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    def encrypt_content(self, content: Any) -> Any:
        if self._cipher is None:
            return content

        plaintext = self._serialize(content)
        sealed = self._cipher.seal(plaintext)

        return Envelope(
            data=base64.b64encode(sealed.ciphertext).decode("ascii"),
            nonce=base64.b64encode(sealed.nonce).decode("ascii"),
            encrypted=True,
        )

    def decrypt_content(self, content: Any) -> Any:
        if self._cipher is None:
            return content

        classified = classify_content(content)
        if not isinstance(classified, EnvelopeContent):
            return content

        envelope = classified.envelope
        if not envelope.encrypted:
            return content

        ciphertext = self._b64decode(envelope.data, "data")
        nonce = self._b64decode(envelope.nonce, "nonce")
        if len(nonce) != self._cipher.nonce_size:
            msg = (
                f"Envelope nonce must be {self._cipher.nonce_size} bytes, "
                f"got {len(nonce)}"
            )
            raise EnvelopeEncodingError(msg)

        plaintext = self._cipher.open(ciphertext, nonce)
        return self._deserialize(plaintext)

    @staticmethod
    def generate_key() -> bytes:
        return os.urandom(KEY_SIZE)

    # Private helpers

    @staticmethod
    def _serialize(content: Any) -> bytes:
        try:
            text = json.dumps(
                content,
                default=_json_default,
                ensure_ascii=False,
                allow_nan=False,
                separators=(",", ":"),
            )
        except (TypeError, ValueError) as e:
            msg = f"Failed to serialize content to JSON: {e}"
            raise SerializationError(msg) from e
        return text.encode("utf-8")

    @staticmethod
    def _deserialize(plaintext: bytes) -> Any:
        try:
            return json.loads(plaintext.decode("utf-8"))
        except ValueError:
            # Content that was not JSON comes back as raw text
            logger.debug("Decrypted content is not JSON, returning raw text")
            return plaintext.decode("utf-8", errors="replace")

    @staticmethod
    def _b64decode(value: str, field_name: str) -> bytes:
        try:
            return base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            msg = f"Failed to decode envelope {field_name}: {e}"
            raise EnvelopeEncodingError(msg) from e


def _json_default(value: Any) -> Any:
    if isinstance(value, Envelope):
        return value.to_dict()
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)
