"""
Иерархия исключений tokenledger.

Бизнес-отказы (недостаточный баланс, недостаточный allowance, overflow
получателя) НЕ являются исключениями: операции Ledger возвращают False.
Исключения ниже сигнализируют об ошибках вызывающего кода.
"""


class LedgerError(Exception):
    """Базовое исключение tokenledger."""


class InvalidAmountError(LedgerError, ValueError):
    """Amount вне диапазона [0, amount_max] или не целое число."""


class AmountOverflowError(LedgerError, ArithmeticError):
    """Сложение Amount превысило amount_max."""


class AmountUnderflowError(LedgerError, ArithmeticError):
    """Вычитание Amount дало отрицательный результат."""
