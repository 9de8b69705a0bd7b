"""SQLAlchemy models for persistence layer."""

from msgvault.infrastructure.persistence.sqlalchemy.models.base import Base
from msgvault.infrastructure.persistence.sqlalchemy.models.message_model import (
    MessageModel,
)

__all__ = [
    "Base",
    "MessageModel",
]
