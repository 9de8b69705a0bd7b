"""Stored chat message entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from msgvault.domain.shared.time import utc_now


@dataclass
class Message:
    """
    A chat message as held by the message store.

    content is opaque to the store: a plaintext JSON value, or an
    encryption envelope in any of its forms (Envelope, mapping, JSON
    text). The encryption batch replaces it in place.
    """

    topic: str
    seq_id: int
    content: Any
    sender: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Message(id={self.id}, topic={self.topic}, seq_id={self.seq_id})"
