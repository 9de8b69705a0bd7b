"""Security domain - content encryption envelopes and classification."""

from msgvault.domain.security.exceptions import (
    ConstructionError,
    DecryptionError,
    EncryptionError,
    EnvelopeEncodingError,
    InvalidEncryptionKeyError,
    SecurityDomainError,
    SerializationError,
)

__all__ = [
    "ConstructionError",
    "DecryptionError",
    "EncryptionError",
    "EnvelopeEncodingError",
    "InvalidEncryptionKeyError",
    "SecurityDomainError",
    "SerializationError",
]
