"""Ledger — баланс, allowances и total supply fungible-токена.

Хост передаёт CallerContext (кто вызывает) и Notifier (куда уходят события).
"""

from .caller import CallerContext, StaticCaller, SwitchableCaller, ThreadLocalCaller
from .config import LedgerConfig
from .ledger import Ledger
from .notifier import (
    CollectingNotifier,
    FanoutNotifier,
    LoggingNotifier,
    Notifier,
    NullNotifier,
)
from .synchronized import SynchronizedLedger
from .transitions import (
    BALANCE_OVERFLOW,
    INSUFFICIENT_ALLOWANCE,
    INSUFFICIENT_BALANCE,
    ApprovalPlan,
    TransferPlan,
    plan_approval,
    plan_transfer,
    plan_transfer_from,
)

__all__ = [
    # Ledger
    "Ledger",
    "LedgerConfig",
    "SynchronizedLedger",
    # Caller context
    "CallerContext",
    "StaticCaller",
    "SwitchableCaller",
    "ThreadLocalCaller",
    # Notifiers
    "Notifier",
    "NullNotifier",
    "CollectingNotifier",
    "LoggingNotifier",
    "FanoutNotifier",
    # Transitions
    "TransferPlan",
    "ApprovalPlan",
    "plan_transfer",
    "plan_transfer_from",
    "plan_approval",
    "INSUFFICIENT_BALANCE",
    "INSUFFICIENT_ALLOWANCE",
    "BALANCE_OVERFLOW",
]
