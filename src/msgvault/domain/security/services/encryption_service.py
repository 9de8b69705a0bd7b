"""Content encryption service interface for the Security domain."""

from abc import ABC, abstractmethod
from typing import Any


class ContentEncryptionService(ABC):
    """Domain service interface for message content encryption."""

    @property
    @abstractmethod
    def is_enabled(self) -> bool:
        """Whether encryption is active (disabled services are identity)."""

    @abstractmethod
    def encrypt_content(self, content: Any) -> Any:
        """
        Encrypt arbitrary JSON-compatible content into an envelope.

        Parameters
        ----------
        content
            Message content (None, str, numbers, lists, dicts)

        Returns
        -------
        Envelope, or content unchanged when the service is disabled

        Raises
        ------
        SerializationError
            If content cannot be converted to JSON
        """

    @abstractmethod
    def decrypt_content(self, content: Any) -> Any:
        """
        Decrypt an envelope back to the original content.

        Content that is not an envelope is returned unchanged.

        Parameters
        ----------
        content
            Envelope, envelope mapping, envelope JSON text or plaintext

        Returns
        -------
        Decrypted JSON value (or raw text if the plaintext is not JSON)

        Raises
        ------
        EnvelopeEncodingError
            If the envelope fields are not valid base64
        DecryptionError
            If decryption fails (wrong key, tampered data)
        """
