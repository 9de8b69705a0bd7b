"""SQLAlchemy model for stored messages."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, DateTime, Index, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from msgvault.domain.shared.time import utc_now
from msgvault.infrastructure.persistence.sqlalchemy.models.base import Base


class MessageModel(Base):
    """SQLAlchemy model for chat messages."""

    __tablename__ = "messages"

    __table_args__ = (
        UniqueConstraint("topic", "seq_id", name="uq_messages_topic_seq"),
        Index("ix_messages_topic", "topic"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    topic: Mapped[str] = mapped_column(String(64), nullable=False)
    seq_id: Mapped[int] = mapped_column(Integer, nullable=False)
    sender: Mapped[str | None] = mapped_column(String(64), nullable=True)

    # Plaintext JSON or the mapping form of an encryption envelope
    content: Mapped[Any] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"MessageModel(id={self.id}, topic={self.topic}, seq_id={self.seq_id})"
        )
