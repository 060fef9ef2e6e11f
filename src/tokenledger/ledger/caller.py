"""
Caller Context — Идентичность вызывающего

Хост сообщает Ledger, кто вызывает текущую операцию. Ledger читает
current_caller() на каждом вызове и никогда не кэширует результат.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Protocol, runtime_checkable

from tokenledger.core.domain.account import AccountId, require_account


@runtime_checkable
class CallerContext(Protocol):
    """Источник идентичности вызывающего для текущей операции."""

    def current_caller(self) -> AccountId:
        ...


class StaticCaller:
    """Фиксированная идентичность (один вызывающий на всё время жизни)."""

    def __init__(self, account: AccountId):
        self._account = require_account(account, "account")

    def current_caller(self) -> AccountId:
        return self._account


class SwitchableCaller:
    """Переключаемая идентичность.

    Аналог "message sender" хоста для тестов и встраивания: set_caller()
    меняет вызывающего, as_caller() меняет его на время блока with.
    """

    def __init__(self, account: AccountId):
        self._account = require_account(account, "account")

    def current_caller(self) -> AccountId:
        return self._account

    def set_caller(self, account: AccountId) -> None:
        self._account = require_account(account, "account")

    @contextmanager
    def as_caller(self, account: AccountId) -> Iterator[AccountId]:
        previous = self._account
        self.set_caller(account)
        try:
            yield account
        finally:
            self._account = previous


class ThreadLocalCaller:
    """Идентичность на поток: каждый поток хоста видит своего вызывающего.

    Потоки, не вызывавшие set_caller(), видят default.
    """

    def __init__(self, default: AccountId):
        self._default = require_account(default, "default")
        self._local = threading.local()

    def current_caller(self) -> AccountId:
        return getattr(self._local, "account", self._default)

    def set_caller(self, account: AccountId) -> None:
        self._local.account = require_account(account, "account")
