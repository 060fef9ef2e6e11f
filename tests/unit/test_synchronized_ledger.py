"""Unit тесты для SynchronizedLedger (многопоточный хост)."""

import threading

from tokenledger.core.domain import AccountId
from tokenledger.ledger import (
    CollectingNotifier,
    Ledger,
    SynchronizedLedger,
    ThreadLocalCaller,
)

TREASURY = AccountId.from_byte(0x01)
WORKERS = [AccountId.from_byte(0x10 + i) for i in range(4)]


def make_ledger(supply=10_000):
    caller = ThreadLocalCaller(TREASURY)
    notifier = CollectingNotifier()
    ledger = SynchronizedLedger(Ledger(supply, caller, notifier=notifier))
    return ledger, caller, notifier


def test_delegates_queries_and_mutations():
    ledger, caller, _ = make_ledger(100)

    assert ledger.total_supply() == 100
    assert ledger.transfer(WORKERS[0], 10) is True
    assert ledger.approve(WORKERS[1], 5) is True
    assert ledger.allowance(TREASURY, WORKERS[1]) == 5

    caller.set_caller(WORKERS[1])
    assert ledger.transfer_from(TREASURY, WORKERS[1], 5) is True
    caller.set_caller(TREASURY)

    assert ledger.balance_of(WORKERS[1]) == 5
    assert ledger.holders() == {TREASURY: 85, WORKERS[0]: 10, WORKERS[1]: 5}
    assert ledger.snapshot().supply_conserved is True
    assert ledger.ledger.total_supply() == 100


def test_concurrent_transfers_conserve_supply():
    ledger, caller, notifier = make_ledger()
    for worker in WORKERS:
        ledger.approve(worker, 10_000)

    errors = []

    def spend(worker):
        caller.set_caller(worker)
        try:
            for i in range(200):
                target = WORKERS[(i + 1) % len(WORKERS)]
                if i % 2 == 0:
                    assert ledger.transfer_from(TREASURY, worker, 3)
                else:
                    assert ledger.transfer(target, 1)
                if not ledger.check_supply_invariant():
                    errors.append("supply drift")
        except Exception as e:  # pragma: no cover - reported below
            errors.append(repr(e))

    threads = [threading.Thread(target=spend, args=(w,)) for w in WORKERS]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert ledger.check_supply_invariant() is True
    assert sum(ledger.holders().values()) == 10_000

    spent = sum(10_000 - ledger.allowance(TREASURY, w) for w in WORKERS)
    assert spent == 4 * 100 * 3
    assert ledger.balance_of(TREASURY) == 10_000 - spent

    transfer_events = [e for e in notifier.transfers() if not e.is_mint]
    assert len(transfer_events) == 4 * 200
