"""
LedgerSnapshot — Снапшот состояния ledger

Immutable Pydantic модель для инспекции и аудита: total supply, балансы
и allowances в детерминированном порядке (сортировка по hex аккаунта).
Соответствует JSON Schema (contracts/schema/ledger_snapshot.json).

Снапшот — это view, а не формат хранения: durability обеспечивает хост.
"""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field

from tokenledger.core.math.amount_safeguards import AMOUNT_MAX

from .account import AccountId


# =============================================================================
# NESTED MODELS
# =============================================================================


class BalanceEntry(BaseModel):
    """Баланс одного аккаунта."""

    account: AccountId
    balance: int = Field(..., ge=0, le=AMOUNT_MAX)

    model_config = {"frozen": True}


class AllowanceEntry(BaseModel):
    """Allowance пары (owner, spender)."""

    owner: AccountId
    spender: AccountId
    allowance: int = Field(..., ge=0, le=AMOUNT_MAX)

    model_config = {"frozen": True}


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class LedgerSnapshot(BaseModel):
    """
    Снапшот ledger.

    Включает только ненулевые записи; отсутствие записи эквивалентно нулю.
    """

    total_supply: int = Field(..., ge=0, le=AMOUNT_MAX, description="Total supply")
    balances: Tuple[BalanceEntry, ...] = Field(default=(), description="Ненулевые балансы")
    allowances: Tuple[AllowanceEntry, ...] = Field(
        default=(), description="Ненулевые allowances"
    )

    model_config = {"frozen": True}

    @property
    def balance_sum(self) -> int:
        return sum(entry.balance for entry in self.balances)

    @property
    def supply_conserved(self) -> bool:
        """Сумма балансов равна total supply."""
        return self.balance_sum == self.total_supply

    def to_payload(self) -> Dict[str, Any]:
        """JSON-совместимый dict (accounts как hex)."""
        return {
            "total_supply": self.total_supply,
            "balances": [
                {"account": e.account.hex(), "balance": e.balance} for e in self.balances
            ],
            "allowances": [
                {
                    "owner": e.owner.hex(),
                    "spender": e.spender.hex(),
                    "allowance": e.allowance,
                }
                for e in self.allowances
            ],
        }
