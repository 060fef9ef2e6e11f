"""Ledger — учёт fungible-токена.

Владеет двумя map (balances, allowances) и скаляром total supply.

Операции:
- Запросы: total_supply, balance_of, allowance
- Мутации: approve, transfer, transfer_from

Инварианты:
- sum(balances) == total_supply после каждой операции
- Отсутствующая запись эквивалентна нулю
- Отказ (False) оставляет состояние неизменным и не порождает событий
- Балансы после конструирования меняются только через shared transfer primitive

Модель исполнения: один вызов за раз, без блокировок. Для многопоточного
хоста используйте SynchronizedLedger.
"""

import logging
from typing import Dict, Optional, Tuple

from tokenledger.core.contracts.validators import (
    validate_approval_event,
    validate_transfer_event,
)
from tokenledger.core.domain.account import AccountId, require_account
from tokenledger.core.domain.events import LedgerEvent, TransferEvent
from tokenledger.core.domain.snapshot import AllowanceEntry, BalanceEntry, LedgerSnapshot
from tokenledger.core.errors import InvalidAmountError
from tokenledger.core.math.amount_safeguards import get_or_zero, validate_amount

from .caller import CallerContext
from .config import LedgerConfig
from .notifier import Notifier, NullNotifier
from .transitions import (
    AllowanceWrites,
    BalanceWrites,
    TransferPlan,
    plan_approval,
    plan_transfer,
    plan_transfer_from,
)

logger = logging.getLogger(__name__)


class Ledger:
    """Ledger fungible-токена с прямыми и делегированными transfer."""

    def __init__(
        self,
        initial_supply: int,
        caller_context: CallerContext,
        notifier: Optional[Notifier] = None,
        config: Optional[LedgerConfig] = None,
    ):
        """
        Выпуск всего supply на счёт вызывающего.

        Args:
            initial_supply: total supply (неизменен после конструирования)
            caller_context: источник идентичности вызывающего
            notifier: получатель событий (default: NullNotifier)
            config: конфигурация (default: LedgerConfig())

        Raises:
            InvalidAmountError: initial_supply невалиден или нулевой при
                reject_zero_supply
            TypeError: caller_context вернул не AccountId
        """
        self._config = config or LedgerConfig()
        self._caller_context = caller_context
        self._notifier: Notifier = notifier or NullNotifier()

        validate_amount(initial_supply, "initial_supply", self._config.amount_max)
        if self._config.reject_zero_supply and initial_supply == 0:
            raise InvalidAmountError("initial_supply must be positive")

        issuer = self._caller()

        self._total_supply = initial_supply
        self._balances: Dict[AccountId, int] = {}
        self._allowances: Dict[Tuple[AccountId, AccountId], int] = {}
        self.last_rejection: Optional[TransferPlan] = None

        mint = TransferEvent(from_account=None, to_account=issuer, value=initial_supply)
        self._check_contract(mint)

        self._write_balances(((issuer, initial_supply),))
        logger.info("Ledger created: supply=%d issuer=%s", initial_supply, issuer)
        self._notifier.emit(mint)

    @property
    def config(self) -> LedgerConfig:
        return self._config

    # =========================================================================
    # QUERIES
    # =========================================================================

    def total_supply(self) -> int:
        return self._total_supply

    def balance_of(self, owner: AccountId) -> int:
        require_account(owner, "owner")
        return get_or_zero(self._balances, owner)

    def allowance(self, owner: AccountId, spender: AccountId) -> int:
        require_account(owner, "owner")
        require_account(spender, "spender")
        return get_or_zero(self._allowances, (owner, spender))

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def approve(self, spender: AccountId, value: int) -> bool:
        """Разрешить spender перемещать до value со счёта вызывающего.

        Перезаписывает предыдущий allowance. Всегда True.
        """
        require_account(spender, "spender")
        self._validate_value(value)
        owner = self._caller()

        plan = plan_approval(owner, spender, value)
        self._check_contract(plan.event)
        self._write_allowances(plan.allowance_writes)
        self._notifier.emit(plan.event)
        return True

    def transfer(self, to: AccountId, value: int) -> bool:
        """Перевести value со счёта вызывающего на to."""
        require_account(to, "to")
        self._validate_value(value)
        sender = self._caller()

        plan = plan_transfer(self._balances, sender, to, value, self._config.amount_max)
        return self._apply(plan)

    def transfer_from(self, from_account: AccountId, to: AccountId, value: int) -> bool:
        """Перевести value со счёта from_account на to от имени вызывающего.

        Требует allowance (from_account, caller) >= value; при успехе
        allowance уменьшается ровно на value.
        """
        require_account(from_account, "from_account")
        require_account(to, "to")
        self._validate_value(value)
        spender = self._caller()

        plan = plan_transfer_from(
            self._balances,
            self._allowances,
            spender,
            from_account,
            to,
            value,
            self._config.amount_max,
        )
        return self._apply(plan)

    # =========================================================================
    # INSPECTION
    # =========================================================================

    def holders(self) -> Dict[AccountId, int]:
        """Копия ненулевых балансов."""
        return {account: balance for account, balance in self._balances.items() if balance}

    def check_supply_invariant(self) -> bool:
        return sum(self._balances.values()) == self._total_supply

    def snapshot(self) -> LedgerSnapshot:
        """Снапшот ненулевых записей, отсортированных по hex аккаунта."""
        balances = sorted(
            (BalanceEntry(account=a, balance=b) for a, b in self._balances.items() if b),
            key=lambda e: e.account.raw,
        )
        allowances = sorted(
            (
                AllowanceEntry(owner=owner, spender=spender, allowance=v)
                for (owner, spender), v in self._allowances.items()
                if v
            ),
            key=lambda e: (e.owner.raw, e.spender.raw),
        )
        return LedgerSnapshot(
            total_supply=self._total_supply,
            balances=tuple(balances),
            allowances=tuple(allowances),
        )

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _caller(self) -> AccountId:
        return require_account(self._caller_context.current_caller(), "caller")

    def _validate_value(self, value: int) -> None:
        validate_amount(value, "value", self._config.amount_max)

    def _apply(self, plan: TransferPlan) -> bool:
        if not plan.allowed:
            self.last_rejection = plan
            logger.debug(
                "Transfer rejected: %s (%s) from=%s to=%s value=%d",
                plan.block_reason,
                plan.details,
                plan.from_account,
                plan.to_account,
                plan.value,
            )
            return False

        self._check_contract(plan.event)
        self.last_rejection = None
        self._write_balances(plan.balance_writes)
        self._write_allowances(plan.allowance_writes)
        self._notifier.emit(plan.event)
        return True

    def _write_balances(self, writes: BalanceWrites) -> None:
        for account, balance in writes:
            if balance == 0 and self._config.prune_zero_balances:
                self._balances.pop(account, None)
            else:
                self._balances[account] = balance

    def _write_allowances(self, writes: AllowanceWrites) -> None:
        for key, value in writes:
            if value == 0 and self._config.prune_zero_balances:
                self._allowances.pop(key, None)
            else:
                self._allowances[key] = value

    def _check_contract(self, event: LedgerEvent) -> None:
        # До любых записей: нарушение контракта не оставляет частичного состояния
        if not self._config.validate_event_contracts:
            return
        if isinstance(event, TransferEvent):
            validate_transfer_event(event.to_payload())
        else:
            validate_approval_event(event.to_payload())
