"""Security infrastructure - AES-GCM encryption and key loading."""

from msgvault.infrastructure.security.aes_gcm_cipher import (
    KEY_SIZE,
    NONCE_SIZE,
    AesGcmCipher,
    SealedPayload,
)
from msgvault.infrastructure.security.encryption_service_aes_gcm import (
    AesGcmEncryptionService,
)
from msgvault.infrastructure.security.key_material import (
    decode_key,
    encode_key,
    load_key,
)

__all__ = [
    "KEY_SIZE",
    "NONCE_SIZE",
    "AesGcmCipher",
    "AesGcmEncryptionService",
    "SealedPayload",
    "decode_key",
    "encode_key",
    "load_key",
]
