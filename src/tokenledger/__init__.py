"""
tokenledger — fungible-token ledger core.

Balances, allowances and a fixed total supply with direct and delegated
transfers. The host supplies the caller identity and an event sink.
"""

from tokenledger.ledger import (
    CollectingNotifier,
    Ledger,
    LedgerConfig,
    StaticCaller,
    SwitchableCaller,
    SynchronizedLedger,
)
from tokenledger.core.domain import AccountId, ApprovalEvent, TransferEvent

__version__ = "0.1.0"

__all__ = [
    "AccountId",
    "ApprovalEvent",
    "CollectingNotifier",
    "Ledger",
    "LedgerConfig",
    "StaticCaller",
    "SwitchableCaller",
    "SynchronizedLedger",
    "TransferEvent",
]
