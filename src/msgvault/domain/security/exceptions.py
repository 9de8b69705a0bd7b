"""Security domain exceptions."""


class SecurityDomainError(Exception):
    """Base exception for security domain."""


class ConstructionError(SecurityDomainError):
    """Raised when the encryption service cannot be built."""


class InvalidEncryptionKeyError(ConstructionError):
    """Raised when encryption key is invalid or missing."""


class EncryptionError(SecurityDomainError):
    """Raised when encryption fails."""


class SerializationError(EncryptionError):
    """Raised when content cannot be converted to JSON before encryption."""


class EnvelopeEncodingError(SecurityDomainError):
    """Raised when an envelope carries malformed base64 fields."""


class DecryptionError(SecurityDomainError):
    """Raised when decryption fails."""
