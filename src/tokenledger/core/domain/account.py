"""
AccountId — Идентификатор владельца баланса

Immutable Pydantic модель над непрозрачным 32-байтным идентификатором
(например, адрес, производный от публичного ключа).

Ledger использует только равенство и хеширование; внутренняя структура
идентификатора не интерпретируется.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_serializer, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Размер идентификатора в байтах
ACCOUNT_ID_SIZE: Final[int] = 32


# =============================================================================
# ACCOUNT MODEL
# =============================================================================


class AccountId(BaseModel):
    """
    Идентификатор аккаунта фиксированного размера.

    Immutable модель (frozen=True), поэтому hashable и пригодна как ключ dict.
    В JSON сериализуется как lowercase hex.
    """

    raw: bytes = Field(
        ..., description=f"Непрозрачный идентификатор ({ACCOUNT_ID_SIZE} байт)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("raw", mode="before")
    @classmethod
    def parse_hex(cls, v: Any) -> Any:
        """Hex-строка (с префиксом 0x или без) конвертируется в bytes."""
        if isinstance(v, str):
            text = v[2:] if v.startswith(("0x", "0X")) else v
            try:
                return bytes.fromhex(text)
            except ValueError as e:
                raise ValueError(f"account id is not valid hex: {e}")
        return v

    @field_validator("raw")
    @classmethod
    def validate_size(cls, v: bytes) -> bytes:
        if len(v) != ACCOUNT_ID_SIZE:
            raise ValueError(
                f"account id must be {ACCOUNT_ID_SIZE} bytes, got {len(v)}"
            )
        return v

    @field_serializer("raw")
    def serialize_raw(self, v: bytes) -> str:
        return v.hex()

    @classmethod
    def from_hex(cls, value: str) -> "AccountId":
        """Создание из hex-строки."""
        return cls(raw=value)

    @classmethod
    def from_byte(cls, value: int) -> "AccountId":
        """
        Идентификатор из одного повторённого байта.

        Удобно для fixtures: AccountId.from_byte(0x01) == 0x0101...01.
        """
        return cls(raw=bytes([value]) * ACCOUNT_ID_SIZE)

    def hex(self) -> str:
        return self.raw.hex()

    def __str__(self) -> str:
        return f"0x{self.raw.hex()}"


def require_account(value: object, name: str) -> AccountId:
    """
    Проверка типа аккаунта на границе публичного API.

    Raises:
        TypeError: Если value не AccountId
    """
    if not isinstance(value, AccountId):
        raise TypeError(f"{name} must be AccountId, got {type(value).__name__}")
    return value
