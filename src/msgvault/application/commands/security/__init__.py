"""Security commands - bulk encryption of stored message content."""

from msgvault.application.commands.security.reconcile_message_encryption_command import (  # NOQA: E501
    ReconcileMessageEncryptionCommand,
)

__all__ = ["ReconcileMessageEncryptionCommand"]
