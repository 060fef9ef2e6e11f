"""
SynchronizedLedger — Ledger за единой границей взаимного исключения

Ledger рассчитан на строго последовательное исполнение. Для многопоточного
хоста (например, RPC-сервер) каждая операция, включая уведомления,
выполняется под одним RLock: запрос никогда не видит наполовину
применённую пару списание/зачисление.
"""

import threading
from typing import Dict

from tokenledger.core.domain.account import AccountId
from tokenledger.core.domain.snapshot import LedgerSnapshot

from .ledger import Ledger


class SynchronizedLedger:
    """Потокобезопасная обёртка над Ledger."""

    def __init__(self, ledger: Ledger):
        self._ledger = ledger
        self._lock = threading.RLock()

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def total_supply(self) -> int:
        with self._lock:
            return self._ledger.total_supply()

    def balance_of(self, owner: AccountId) -> int:
        with self._lock:
            return self._ledger.balance_of(owner)

    def allowance(self, owner: AccountId, spender: AccountId) -> int:
        with self._lock:
            return self._ledger.allowance(owner, spender)

    def approve(self, spender: AccountId, value: int) -> bool:
        with self._lock:
            return self._ledger.approve(spender, value)

    def transfer(self, to: AccountId, value: int) -> bool:
        with self._lock:
            return self._ledger.transfer(to, value)

    def transfer_from(self, from_account: AccountId, to: AccountId, value: int) -> bool:
        with self._lock:
            return self._ledger.transfer_from(from_account, to, value)

    def holders(self) -> Dict[AccountId, int]:
        with self._lock:
            return self._ledger.holders()

    def check_supply_invariant(self) -> bool:
        with self._lock:
            return self._ledger.check_supply_invariant()

    def snapshot(self) -> LedgerSnapshot:
        with self._lock:
            return self._ledger.snapshot()
