"""
Integration test for the encryption pass against PostgreSQL.

Uses the database configured in settings (POSTGRES_* or
DATABASE_URL_OVERRIDE). Skipped unless --run-integration is given.
"""

import pytest
import pytest_asyncio
from sqlalchemy import delete

from msgvault.application.commands import ReconcileMessageEncryptionCommand
from msgvault.application.dtos.security import ReconciliationMode
from msgvault.domain.messaging.entities import Message
from msgvault.infrastructure.persistence.sqlalchemy.database import (
    create_engine_from_url,
    create_tables,
    get_session_maker,
)
from msgvault.infrastructure.persistence.sqlalchemy.models import MessageModel
from msgvault.infrastructure.persistence.sqlalchemy.repositories import (
    MessageRepositorySQLAlchemy,
)
from msgvault.infrastructure.security import AesGcmEncryptionService
from msgvault_config import get_settings

TOPIC = "grpIntegrationTopic"

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def session_maker():
    engine = create_engine_from_url(get_settings().database_url)
    await create_tables(engine)
    maker = get_session_maker(engine)

    yield maker

    async with maker() as session:
        await session.execute(delete(MessageModel).where(MessageModel.topic == TOPIC))
        await session.commit()
    await engine.dispose()


@pytest.mark.asyncio
async def test_encrypt_then_decrypt_topic(session_maker):
    service = AesGcmEncryptionService(enabled=True, key=bytes(range(32)))
    contents = ["Hello", {"txt": "hi", "ent": [{"tp": "LN"}]}, None]

    async with session_maker() as session:
        repo = MessageRepositorySQLAlchemy(session)
        for seq_id, content in enumerate(contents, 1):
            await repo.add(Message(topic=TOPIC, seq_id=seq_id, content=content))

    async with session_maker() as session:
        command = ReconcileMessageEncryptionCommand(
            service,
            MessageRepositorySQLAlchemy(session),
        )
        encrypted = await command.execute(topic=TOPIC)
        decrypted = await command.execute(
            topic=TOPIC,
            mode=ReconciliationMode.DECRYPT,
        )

    assert encrypted.transformed == 3
    assert decrypted.transformed == 3

    async with session_maker() as session:
        messages = await MessageRepositorySQLAlchemy(session).find_by_topic(TOPIC)

    assert [m.content for m in messages] == contents
