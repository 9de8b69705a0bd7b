"""Encrypt or decrypt the stored messages of a topic in place."""

from __future__ import annotations

import logging
from typing import Any

from msgvault.application.dtos.security import (
    ReconciliationMode,
    ReconciliationResult,
)
from msgvault.domain.messaging.entities import Message
from msgvault.domain.messaging.exceptions import MessageStoreError
from msgvault.domain.messaging.repositories import MessageRepository
from msgvault.domain.security.exceptions import SecurityDomainError
from msgvault.domain.security.services import ContentEncryptionService, is_envelope

logger = logging.getLogger(__name__)


class ReconcileMessageEncryptionCommand:
    """Bring every message of a topic to the encrypted (or plaintext) state.

    Messages are handled one at a time in store order:
    - ENCRYPT encrypts plaintext messages and skips envelopes
    - DECRYPT decrypts envelopes and skips plaintext messages

    Failures are isolated per message: a codec or save error is
    recorded and the run moves on. Messages already saved stay saved.
    A failure to load the topic aborts the run.
    """

    def __init__(
        self,
        encryption_service: ContentEncryptionService,
        message_repository: MessageRepository,
    ):
        self._encryption = encryption_service
        self._repository = message_repository

    async def execute(
        self,
        topic: str,
        mode: ReconciliationMode = ReconciliationMode.ENCRYPT,
        dry_run: bool = False,
    ) -> ReconciliationResult:
        if not topic:
            msg = "Topic name must not be empty"
            raise ValueError(msg)
        if not self._encryption.is_enabled:
            msg = "Encryption service must be enabled to reconcile messages"
            raise ValueError(msg)

        messages = await self._repository.find_by_topic(topic)

        result = ReconciliationResult(
            topic=topic,
            mode=mode,
            dry_run=dry_run,
            total_messages=len(messages),
        )

        for message in messages:
            await self._reconcile_message(message, mode, dry_run, result)

        logger.info(
            "%s of topic %s finished: %d total, %d processed, %d transformed, "
            "%d errors%s",
            mode.value.capitalize(),
            topic,
            result.total_messages,
            result.processed,
            result.transformed,
            result.error_count,
            " (dry run)" if dry_run else "",
        )
        return result

    async def _reconcile_message(
        self,
        message: Message,
        mode: ReconciliationMode,
        dry_run: bool,
        result: ReconciliationResult,
    ) -> None:
        if not self._needs_transform(message.content, mode):
            result.processed += 1
            return

        try:
            new_content = self._transform(message.content, mode)
        except SecurityDomainError as e:
            logger.error(
                "Failed to %s message %s in topic %s: %s",
                mode.value,
                message.id,
                message.topic,
                e,
            )
            result.add_error(message.id, e)
            return

        if not dry_run:
            message.content = new_content
            try:
                await self._repository.save(message)
            except MessageStoreError as e:
                logger.error(
                    "Failed to save message %s in topic %s: %s",
                    message.id,
                    message.topic,
                    e,
                )
                result.add_error(message.id, e)
                return

        result.transformed += 1
        result.processed += 1

    @staticmethod
    def _needs_transform(content: Any, mode: ReconciliationMode) -> bool:
        encrypted = is_envelope(content)
        if mode == ReconciliationMode.ENCRYPT:
            return not encrypted
        return encrypted

    def _transform(self, content: Any, mode: ReconciliationMode) -> Any:
        if mode == ReconciliationMode.ENCRYPT:
            return self._encryption.encrypt_content(content)
        return self._encryption.decrypt_content(content)
