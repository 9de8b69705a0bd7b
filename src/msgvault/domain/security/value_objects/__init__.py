"""Security value objects."""

from msgvault.domain.security.value_objects.envelope import ENVELOPE_FIELDS, Envelope

__all__ = ["ENVELOPE_FIELDS", "Envelope"]
