"""Envelope value object - the stored form of encrypted content."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

ENVELOPE_FIELDS = ("data", "nonce", "encrypted")


@dataclass(frozen=True)
class Envelope:
    """
    Self-describing container for encrypted message content.

    Serialized form (field names are fixed):

        {"data": "<base64>", "nonce": "<base64>", "encrypted": true}

    - data: base64 of ciphertext with the GCM tag appended
    - nonce: base64 of the nonce used for this one encryption
    - encrypted: format discriminator, always True for real envelopes
    """

    data: str
    nonce: str
    encrypted: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.data,
            "nonce": self.nonce,
            "encrypted": self.encrypted,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Optional[Envelope]:
        """
        Build an envelope from its mapping form.

        Returns None unless the discriminator is exactly True and both
        data and nonce are strings.
        """
        if mapping.get("encrypted") is not True:
            return None

        data = mapping.get("data")
        nonce = mapping.get("nonce")
        if not isinstance(data, str) or not isinstance(nonce, str):
            return None

        return cls(data=data, nonce=nonce, encrypted=True)

    @classmethod
    def from_json(cls, text: str) -> Optional[Envelope]:
        """Parse an envelope from JSON text, or return None."""
        try:
            parsed = json.loads(text)
        except ValueError:
            return None

        if not isinstance(parsed, dict):
            return None

        return cls.from_mapping(parsed)

    def __repr__(self) -> str:
        return f"Envelope(nonce={self.nonce}, encrypted={self.encrypted})"
