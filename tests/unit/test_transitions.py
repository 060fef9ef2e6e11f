"""Unit тесты для чистых планировщиков переходов.

Coverage:
- plan_transfer: PASS, insufficient_balance, self transfer, overflow
- plan_transfer_from: insufficient_allowance, баланс независим от allowance
- plan_approval: перезапись
- Планировщики не мутируют входные map
"""

import pytest

from tokenledger.core.domain import AccountId, ApprovalEvent, TransferEvent
from tokenledger.core.math import AMOUNT_MAX
from tokenledger.ledger import (
    BALANCE_OVERFLOW,
    INSUFFICIENT_ALLOWANCE,
    INSUFFICIENT_BALANCE,
    plan_approval,
    plan_transfer,
    plan_transfer_from,
)

A = AccountId.from_byte(0x01)
B = AccountId.from_byte(0x02)
C = AccountId.from_byte(0x03)


def apply_writes(mapping, writes):
    result = dict(mapping)
    for key, value in writes:
        result[key] = value
    return result


# =============================================================================
# plan_transfer
# =============================================================================


def test_plan_transfer_pass():
    balances = {A: 100}
    plan = plan_transfer(balances, A, B, 10)

    assert plan.allowed is True
    assert plan.block_reason == ""
    assert plan.balance_writes == ((A, 90), (B, 10))
    assert plan.allowance_writes == ()
    assert plan.event == TransferEvent(from_account=A, to_account=B, value=10)
    assert "PASS" in plan.details


def test_plan_transfer_does_not_mutate_input():
    balances = {A: 100}
    plan_transfer(balances, A, B, 10)
    assert balances == {A: 100}


def test_plan_transfer_insufficient_balance():
    plan = plan_transfer({A: 90}, A, B, 1000)

    assert plan.allowed is False
    assert plan.block_reason == INSUFFICIENT_BALANCE
    assert plan.balance_writes == ()
    assert plan.event is None


def test_plan_transfer_from_unknown_account_is_zero_balance():
    plan = plan_transfer({}, C, A, 1)
    assert plan.block_reason == INSUFFICIENT_BALANCE


def test_plan_transfer_zero_value_from_unknown_account_allowed():
    plan = plan_transfer({}, C, A, 0)
    assert plan.allowed is True
    assert apply_writes({}, plan.balance_writes) == {C: 0, A: 0}


def test_plan_transfer_exact_balance():
    plan = plan_transfer({A: 100}, A, B, 100)
    assert plan.allowed is True
    assert apply_writes({A: 100}, plan.balance_writes) == {A: 0, B: 100}


def test_plan_self_transfer_is_neutral():
    plan = plan_transfer({A: 100}, A, A, 40)

    assert plan.allowed is True
    assert apply_writes({A: 100}, plan.balance_writes) == {A: 100}
    assert plan.event == TransferEvent(from_account=A, to_account=A, value=40)


def test_plan_self_transfer_above_balance_rejected():
    plan = plan_transfer({A: 100}, A, A, 101)
    assert plan.block_reason == INSUFFICIENT_BALANCE


class TestOverflowPolicy:
    """Overflow баланса получателя отклоняет операцию (без wrap-around)."""

    def test_recipient_overflow_rejected(self):
        balances = {A: 10, B: AMOUNT_MAX}
        plan = plan_transfer(balances, A, B, 1)

        assert plan.allowed is False
        assert plan.block_reason == BALANCE_OVERFLOW
        assert plan.balance_writes == ()
        assert plan.event is None

    def test_recipient_overflow_against_custom_max(self):
        plan = plan_transfer({A: 10, B: 95}, A, B, 6, amount_max=100)
        assert plan.block_reason == BALANCE_OVERFLOW

    def test_recipient_reaching_max_allowed(self):
        plan = plan_transfer({A: 10, B: 95}, A, B, 5, amount_max=100)
        assert plan.allowed is True
        assert apply_writes({A: 10, B: 95}, plan.balance_writes) == {A: 5, B: 100}

    def test_self_transfer_at_max_never_overflows(self):
        plan = plan_transfer({A: AMOUNT_MAX}, A, A, AMOUNT_MAX)
        assert plan.allowed is True

    def test_overflow_through_transfer_from_keeps_allowance(self):
        plan = plan_transfer_from({A: 10, B: AMOUNT_MAX}, {(A, C): 10}, C, A, B, 1)
        assert plan.block_reason == BALANCE_OVERFLOW
        assert plan.allowance_writes == ()


# =============================================================================
# plan_transfer_from
# =============================================================================


def test_plan_transfer_from_pass_consumes_allowance():
    plan = plan_transfer_from({A: 100}, {(A, B): 200}, B, A, C, 50)

    assert plan.allowed is True
    assert plan.spender == B
    assert plan.balance_writes == ((A, 50), (C, 50))
    assert plan.allowance_writes == (((A, B), 150),)
    assert "allowance 200 -> 150" in plan.details


def test_plan_transfer_from_insufficient_allowance():
    plan = plan_transfer_from({A: 100}, {(A, B): 5}, B, A, C, 10)

    assert plan.allowed is False
    assert plan.block_reason == INSUFFICIENT_ALLOWANCE
    assert plan.spender == B
    assert plan.balance_writes == ()
    assert plan.allowance_writes == ()


def test_plan_transfer_from_no_allowance_entry():
    plan = plan_transfer_from({A: 100}, {}, B, A, C, 1)
    assert plan.block_reason == INSUFFICIENT_ALLOWANCE


def test_plan_transfer_from_allowance_ok_balance_insufficient():
    plan = plan_transfer_from({A: 50}, {(A, B): 150}, B, A, C, 100)

    assert plan.allowed is False
    assert plan.block_reason == INSUFFICIENT_BALANCE
    assert plan.spender == B
    assert plan.allowance_writes == ()


def test_plan_transfer_from_allowance_checked_before_balance():
    plan = plan_transfer_from({}, {}, B, A, C, 10)
    assert plan.block_reason == INSUFFICIENT_ALLOWANCE


def test_plan_transfer_from_uses_spender_specific_allowance():
    allowances = {(A, B): 100, (A, C): 0}
    plan = plan_transfer_from({A: 100}, allowances, C, A, B, 1)
    assert plan.block_reason == INSUFFICIENT_ALLOWANCE


# =============================================================================
# plan_approval
# =============================================================================


def test_plan_approval():
    plan = plan_approval(A, B, 200)

    assert plan.allowance_writes == (((A, B), 200),)
    assert plan.event == ApprovalEvent(owner=A, spender=B, value=200)


@pytest.mark.parametrize("value", [0, 1, AMOUNT_MAX])
def test_plan_approval_any_value(value):
    plan = plan_approval(A, A, value)
    assert plan.allowance_writes == (((A, A), value),)
