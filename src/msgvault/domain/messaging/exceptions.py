"""Messaging domain exceptions."""


class MessagingDomainError(Exception):
    """Base exception for messaging domain."""


class MessageStoreError(MessagingDomainError):
    """Raised when the message store cannot load or persist messages."""


class MessageNotFoundError(MessageStoreError):
    """Raised when a message to update no longer exists."""
