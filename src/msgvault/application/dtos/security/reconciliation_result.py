"""DTO for message encryption reconciliation result."""

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID


class ReconciliationMode(str, Enum):
    """Direction of a reconciliation run."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


@dataclass(frozen=True)
class MessageFailure:
    """A message that could not be transformed or saved."""

    message_id: UUID
    topic: str
    error: str


@dataclass
class ReconciliationResult:
    """Result of an encryption or decryption pass over one topic."""

    topic: str
    mode: ReconciliationMode
    dry_run: bool

    total_messages: int = 0
    processed: int = 0
    transformed: int = 0

    errors: list[MessageFailure] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def success(self) -> bool:
        return self.error_count == 0

    def add_error(self, message_id: UUID, error: Exception) -> None:
        self.errors.append(
            MessageFailure(message_id=message_id, topic=self.topic, error=str(error)),
        )

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "topic": self.topic,
            "mode": self.mode.value,
            "dry_run": self.dry_run,
            "total_messages": self.total_messages,
            "processed": self.processed,
            "transformed": self.transformed,
            "error_count": self.error_count,
            "errors": [
                {
                    "message_id": str(f.message_id),
                    "topic": f.topic,
                    "error": f.error,
                }
                for f in self.errors
            ],
        }
