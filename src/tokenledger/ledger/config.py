"""Конфигурация Ledger."""

from dataclasses import dataclass

from tokenledger.core.math.amount_safeguards import AMOUNT_MAX


@dataclass(frozen=True)
class LedgerConfig:
    """Конфигурация Ledger.

    Политики по умолчанию повторяют эталонное поведение: нулевой supply
    разрешён, нулевые записи остаются в map, контракты событий не проверяются.
    """

    # Верхняя граница любого Amount (балансы, allowances, supply); не выше AMOUNT_MAX
    amount_max: int = AMOUNT_MAX

    # Отклонять initial_supply == 0 при конструировании
    reject_zero_supply: bool = False

    # Удалять записи balance/allowance, ставшие нулевыми
    prune_zero_balances: bool = False

    # Проверять payload каждого события по JSON Schema перед emit
    validate_event_contracts: bool = False

    def __post_init__(self):
        if isinstance(self.amount_max, bool) or not isinstance(self.amount_max, int):
            raise ValueError(f"amount_max must be int, got {type(self.amount_max).__name__}")
        if self.amount_max <= 0:
            raise ValueError(f"amount_max must be positive, got {self.amount_max}")
        if self.amount_max > AMOUNT_MAX:
            raise ValueError(
                f"amount_max must be <= {AMOUNT_MAX} (event value bound), got {self.amount_max}"
            )
