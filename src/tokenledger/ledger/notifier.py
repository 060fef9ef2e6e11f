"""
Notifier — Получатели уведомлений Transfer/Approval

Доставка fire-and-forget: Ledger не ждёт подтверждения и не повторяет emit.
"""

import logging
from typing import List, Protocol, runtime_checkable

from tokenledger.core.domain.events import ApprovalEvent, LedgerEvent, TransferEvent

EVENT_LOGGER_NAME = "tokenledger.events"


@runtime_checkable
class Notifier(Protocol):
    """Получатель событий ledger."""

    def emit(self, event: LedgerEvent) -> None:
        ...


class NullNotifier:
    """Отбрасывает все события."""

    def emit(self, event: LedgerEvent) -> None:
        pass


class CollectingNotifier:
    """Накапливает события в порядке emit (для тестов и аудита)."""

    def __init__(self):
        self.events: List[LedgerEvent] = []

    def emit(self, event: LedgerEvent) -> None:
        self.events.append(event)

    def transfers(self) -> List[TransferEvent]:
        return [e for e in self.events if isinstance(e, TransferEvent)]

    def approvals(self) -> List[ApprovalEvent]:
        return [e for e in self.events if isinstance(e, ApprovalEvent)]

    def clear(self) -> None:
        self.events.clear()


class LoggingNotifier:
    """Пишет каждое событие в logger tokenledger.events (INFO)."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(EVENT_LOGGER_NAME)

    def emit(self, event: LedgerEvent) -> None:
        self._logger.info("%s %s", event.kind, event.to_payload())


class FanoutNotifier:
    """Передаёт событие каждому notifier по порядку."""

    def __init__(self, *notifiers: Notifier):
        self._notifiers = list(notifiers)

    def emit(self, event: LedgerEvent) -> None:
        for notifier in self._notifiers:
            notifier.emit(event)
