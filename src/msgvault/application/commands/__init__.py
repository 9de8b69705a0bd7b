"""Application commands."""

from msgvault.application.commands.security import (
    ReconcileMessageEncryptionCommand,
)

__all__ = ["ReconcileMessageEncryptionCommand"]
