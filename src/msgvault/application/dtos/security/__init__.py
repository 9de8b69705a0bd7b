"""Security DTOs. Results of encryption reconciliation runs."""

from msgvault.application.dtos.security.reconciliation_result import (
    MessageFailure,
    ReconciliationMode,
    ReconciliationResult,
)

__all__ = [
    "MessageFailure",
    "ReconciliationMode",
    "ReconciliationResult",
]
