"""Messaging entities."""

from msgvault.domain.messaging.entities.message import Message

__all__ = ["Message"]
