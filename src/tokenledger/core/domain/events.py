"""
Ledger Events — Уведомления о Transfer и Approval

Immutable Pydantic модели событий, которые Ledger передаёт Notifier.
Payload (to_payload) соответствует JSON Schema контрактам
transfer_event.json и approval_event.json.

Семантика:
- TransferEvent.from_account = None — выпуск (mint при конструировании)
- TransferEvent.to_account = None — не используется (burn отсутствует)
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field

from tokenledger.core.math.amount_safeguards import AMOUNT_MAX

from .account import AccountId


# =============================================================================
# EVENT MODELS
# =============================================================================


class TransferEvent(BaseModel):
    """
    Перемещение value между аккаунтами.

    Payload использует ключи "from"/"to" (null для отсутствующего аккаунта).
    """

    kind: Literal["transfer"] = "transfer"
    from_account: Optional[AccountId] = Field(
        ..., serialization_alias="from", description="Источник (None — выпуск)"
    )
    to_account: Optional[AccountId] = Field(
        ..., serialization_alias="to", description="Получатель"
    )
    value: int = Field(..., ge=0, le=AMOUNT_MAX, strict=True, description="Amount")

    model_config = {"frozen": True}

    @property
    def is_mint(self) -> bool:
        return self.from_account is None

    def to_payload(self) -> Dict[str, Any]:
        """JSON-совместимый dict (accounts как hex)."""
        payload = self.model_dump(mode="json", by_alias=True)
        payload["from"] = self.from_account.hex() if self.from_account else None
        payload["to"] = self.to_account.hex() if self.to_account else None
        return payload


class ApprovalEvent(BaseModel):
    """Установка allowance владельцем owner для spender."""

    kind: Literal["approval"] = "approval"
    owner: AccountId = Field(..., description="Владелец баланса")
    spender: AccountId = Field(..., description="Уполномоченный аккаунт")
    value: int = Field(..., ge=0, le=AMOUNT_MAX, strict=True, description="Новый allowance")

    model_config = {"frozen": True}

    def to_payload(self) -> Dict[str, Any]:
        """JSON-совместимый dict (accounts как hex)."""
        return {
            "kind": self.kind,
            "owner": self.owner.hex(),
            "spender": self.spender.hex(),
            "value": self.value,
        }


LedgerEvent = Union[TransferEvent, ApprovalEvent]
