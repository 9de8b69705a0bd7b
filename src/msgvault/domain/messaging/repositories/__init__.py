"""Messaging repository interfaces."""

from msgvault.domain.messaging.repositories.message_repository import (
    MessageRepository,
)

__all__ = ["MessageRepository"]
