"""Repository interface for stored messages - Messaging domain."""

from abc import ABC, abstractmethod

from msgvault.domain.messaging.entities import Message


class MessageRepository(ABC):
    """
    Repository for stored chat messages.

    It does NOT:
    - Encrypt or decrypt content (that's ContentEncryptionService's job)
    - Decide whether content is encrypted (that's the content classifier)

    It ONLY:
    - Loads messages of a topic
    - Persists message content changes
    """

    @abstractmethod
    async def find_by_topic(self, topic: str) -> list[Message]:
        """
        Find all messages of a topic, ordered by sequence id.

        Parameters
        ----------
        topic
            Topic name

        Returns
        -------
        List of Message entities (empty if the topic has none)

        Raises
        ------
        MessageStoreError
            If the store cannot be read
        """

    @abstractmethod
    async def save(self, message: Message) -> None:
        """
        Persist the content of an existing message.

        Parameters
        ----------
        message
            Message entity with updated content

        Raises
        ------
        MessageNotFoundError
            If the message no longer exists
        MessageStoreError
            If the update cannot be written
        """

    @abstractmethod
    async def add(self, message: Message) -> None:
        """
        Store a new message.

        Raises
        ------
        MessageStoreError
            If the message cannot be written
        """
