"""Messaging repositories - SQLAlchemy implementations."""

from msgvault.infrastructure.persistence.sqlalchemy.repositories.message_repository import (  # NOQA: E501
    MessageRepositorySQLAlchemy,
)

__all__ = ["MessageRepositorySQLAlchemy"]
