"""
Ledger Transitions — чистое планирование переходов состояния

Вычисление нового состояния отделено от его применения и от уведомлений:
планировщик читает текущие map, ничего не мутирует и возвращает план
(записи balance/allowance + событие). Ledger применяет план целиком,
затем передаёт событие Notifier.

Порядок проверок transfer_from:
1. Allowance (from, spender) >= value, иначе insufficient_allowance
2. Shared transfer primitive: баланс from >= value, иначе insufficient_balance
3. Баланс получателя + value <= amount_max, иначе balance_overflow
4. Allowance уменьшается ровно на value

Отклонённый план не содержит записей и события: состояние не меняется.
"""

from dataclasses import dataclass, replace
from typing import Final, Mapping, Optional, Tuple

from tokenledger.core.domain.account import AccountId
from tokenledger.core.domain.events import ApprovalEvent, TransferEvent
from tokenledger.core.errors import AmountOverflowError
from tokenledger.core.math.amount_safeguards import (
    AMOUNT_MAX,
    checked_add,
    checked_sub,
    get_or_zero,
)

# =============================================================================
# BLOCK REASONS
# =============================================================================

INSUFFICIENT_BALANCE: Final[str] = "insufficient_balance"
INSUFFICIENT_ALLOWANCE: Final[str] = "insufficient_allowance"
BALANCE_OVERFLOW: Final[str] = "balance_overflow"


AllowanceKey = Tuple[AccountId, AccountId]
BalanceWrites = Tuple[Tuple[AccountId, int], ...]
AllowanceWrites = Tuple[Tuple[AllowanceKey, int], ...]


# =============================================================================
# PLANS
# =============================================================================


@dataclass(frozen=True)
class TransferPlan:
    """Результат планирования transfer / transfer_from."""

    allowed: bool
    block_reason: str

    # Входные параметры для диагностики
    from_account: AccountId
    to_account: AccountId
    value: int
    spender: Optional[AccountId]

    # Записи применяются по порядку; при from == to вторая запись
    # перекрывает первую тем же исходным значением
    balance_writes: BalanceWrites
    allowance_writes: AllowanceWrites
    event: Optional[TransferEvent]

    details: str


@dataclass(frozen=True)
class ApprovalPlan:
    """Результат планирования approve (всегда allowed)."""

    owner: AccountId
    spender: AccountId
    value: int
    allowance_writes: AllowanceWrites
    event: ApprovalEvent


def _rejected(
    reason: str,
    from_account: AccountId,
    to_account: AccountId,
    value: int,
    spender: Optional[AccountId],
    details: str,
) -> TransferPlan:
    return TransferPlan(
        allowed=False,
        block_reason=reason,
        from_account=from_account,
        to_account=to_account,
        value=value,
        spender=spender,
        balance_writes=(),
        allowance_writes=(),
        event=None,
        details=details,
    )


# =============================================================================
# PLANNERS
# =============================================================================


def plan_transfer(
    balances: Mapping[AccountId, int],
    from_account: AccountId,
    to_account: AccountId,
    value: int,
    amount_max: int = AMOUNT_MAX,
) -> TransferPlan:
    """Shared transfer primitive: перемещение value от from_account к to_account.

    Единственная проверка корректности — баланс источника. Авторизация
    (allowance) — ответственность вызывающего планировщика.

    Args:
        balances: текущие балансы (не мутируются)
        from_account: источник
        to_account: получатель (может совпадать с источником)
        value: валидный Amount
        amount_max: верхняя граница баланса получателя

    Returns:
        TransferPlan с записями и TransferEvent, либо отклонённый план
    """
    from_balance = get_or_zero(balances, from_account)
    if from_balance < value:
        return _rejected(
            INSUFFICIENT_BALANCE,
            from_account,
            to_account,
            value,
            None,
            f"balance {from_balance} < value {value}",
        )

    new_from_balance = checked_sub(from_balance, value)

    # Баланс получателя читается после списания: при from == to
    # это уже уменьшенное значение, и итог равен исходному
    if to_account == from_account:
        to_balance = new_from_balance
    else:
        to_balance = get_or_zero(balances, to_account)

    try:
        new_to_balance = checked_add(to_balance, value, amount_max)
    except AmountOverflowError as e:
        return _rejected(
            BALANCE_OVERFLOW,
            from_account,
            to_account,
            value,
            None,
            str(e),
        )

    return TransferPlan(
        allowed=True,
        block_reason="",
        from_account=from_account,
        to_account=to_account,
        value=value,
        spender=None,
        balance_writes=(
            (from_account, new_from_balance),
            (to_account, new_to_balance),
        ),
        allowance_writes=(),
        event=TransferEvent(from_account=from_account, to_account=to_account, value=value),
        details=f"PASS: {from_balance} -> {new_from_balance}",
    )


def plan_transfer_from(
    balances: Mapping[AccountId, int],
    allowances: Mapping[AllowanceKey, int],
    spender: AccountId,
    from_account: AccountId,
    to_account: AccountId,
    value: int,
    amount_max: int = AMOUNT_MAX,
) -> TransferPlan:
    """Делегированный transfer: spender перемещает value со счёта from_account.

    Прохождение проверки allowance не гарантирует прохождение проверки
    баланса: это независимые величины.
    """
    allowance = get_or_zero(allowances, (from_account, spender))
    if allowance < value:
        return _rejected(
            INSUFFICIENT_ALLOWANCE,
            from_account,
            to_account,
            value,
            spender,
            f"allowance {allowance} < value {value}",
        )

    plan = plan_transfer(balances, from_account, to_account, value, amount_max)
    if not plan.allowed:
        return replace(plan, spender=spender)

    return replace(
        plan,
        spender=spender,
        allowance_writes=(((from_account, spender), checked_sub(allowance, value)),),
        details=f"{plan.details}; allowance {allowance} -> {allowance - value}",
    )


def plan_approval(owner: AccountId, spender: AccountId, value: int) -> ApprovalPlan:
    """Approve: перезапись allowance (owner, spender) значением value.

    Не аддитивно: предыдущий allowance игнорируется, последняя запись побеждает.
    """
    return ApprovalPlan(
        owner=owner,
        spender=spender,
        value=value,
        allowance_writes=(((owner, spender), value),),
        event=ApprovalEvent(owner=owner, spender=spender, value=value),
    )
