"""
Domain models and value objects.

Contains fundamental domain entities like AccountId, ledger events, snapshots.
"""

from tokenledger.core.domain.account import (
    ACCOUNT_ID_SIZE,
    AccountId,
    require_account,
)
from tokenledger.core.domain.events import ApprovalEvent, LedgerEvent, TransferEvent
from tokenledger.core.domain.snapshot import (
    AllowanceEntry,
    BalanceEntry,
    LedgerSnapshot,
)

__all__ = [
    # Account model
    "ACCOUNT_ID_SIZE",
    "AccountId",
    "require_account",
    # Events
    "ApprovalEvent",
    "LedgerEvent",
    "TransferEvent",
    # Snapshot
    "AllowanceEntry",
    "BalanceEntry",
    "LedgerSnapshot",
]
