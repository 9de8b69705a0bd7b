"""Security domain services."""

from msgvault.domain.security.services.content_classifier import (
    ClassifiedContent,
    EnvelopeContent,
    PlainContent,
    classify_content,
    is_envelope,
)
from msgvault.domain.security.services.encryption_service import (
    ContentEncryptionService,
)

__all__ = [
    "ClassifiedContent",
    "ContentEncryptionService",
    "EnvelopeContent",
    "PlainContent",
    "classify_content",
    "is_envelope",
]
