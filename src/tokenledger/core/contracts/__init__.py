"""
Contract Validation Module

JSON Schema контракты событий и снапшотов tokenledger.
"""

from .validators import (
    APPROVAL_EVENT_CONTRACT,
    LEDGER_SNAPSHOT_CONTRACT,
    TRANSFER_EVENT_CONTRACT,
    ContractValidator,
    SchemaLoader,
    validate_approval_event,
    validate_ledger_snapshot,
    validate_transfer_event,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Compiled contracts
    "TRANSFER_EVENT_CONTRACT",
    "APPROVAL_EVENT_CONTRACT",
    "LEDGER_SNAPSHOT_CONTRACT",
    # Functions
    "validate_transfer_event",
    "validate_approval_event",
    "validate_ledger_snapshot",
]
