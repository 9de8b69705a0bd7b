"""SQLAlchemy implementation of MessageRepository."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from msgvault.domain.messaging.entities import Message
from msgvault.domain.messaging.exceptions import (
    MessageNotFoundError,
    MessageStoreError,
)
from msgvault.domain.messaging.repositories import MessageRepository
from msgvault.domain.security.value_objects import Envelope
from msgvault.domain.shared.time import utc_now
from msgvault.infrastructure.persistence.sqlalchemy.models import MessageModel

logger = logging.getLogger(__name__)


class MessageRepositorySQLAlchemy(MessageRepository):
    """
    SQLAlchemy implementation for message storage.

    Every write commits on its own, so a failed message never takes
    already-saved messages down with it.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_topic(self, topic: str) -> list[Message]:
        stmt = (
            select(MessageModel)
            .where(MessageModel.topic == topic)
            .order_by(MessageModel.seq_id)
        )

        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            msg = f"Failed to get messages for topic {topic}: {e}"
            raise MessageStoreError(msg) from e

        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def save(self, message: Message) -> None:
        updated_at = utc_now()
        stmt = (
            update(MessageModel)
            .where(MessageModel.id == message.id)
            .values(
                content=self._content_to_column(message.content),
                updated_at=updated_at,
            )
        )

        try:
            result = await self._session.execute(stmt)
            if result.rowcount == 0:
                await self._session.rollback()
                msg = f"Message {message.id} not found in topic {message.topic}"
                raise MessageNotFoundError(msg)
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            msg = f"Failed to save message {message.id}: {e}"
            raise MessageStoreError(msg) from e

        message.updated_at = updated_at

    async def add(self, message: Message) -> None:
        self._session.add(self._entity_to_model(message))

        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            msg = f"Failed to add message {message.id}: {e}"
            raise MessageStoreError(msg) from e

    # Private helpers

    @staticmethod
    def _content_to_column(content: Any) -> Any:
        if isinstance(content, Envelope):
            return content.to_dict()
        return content

    @staticmethod
    def _model_to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            topic=model.topic,
            seq_id=model.seq_id,
            sender=model.sender,
            content=model.content,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @classmethod
    def _entity_to_model(cls, entity: Message) -> MessageModel:
        return MessageModel(
            id=entity.id,
            topic=entity.topic,
            seq_id=entity.seq_id,
            sender=entity.sender,
            content=cls._content_to_column(entity.content),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
