"""
Amount Safeguards — Checked Integer Arithmetic

Модуль обеспечивает целочисленную арифметику Amount без молчаливого wrap-around:
- Валидация Amount (int, не bool, в диапазоне [0, amount_max])
- Сложение с проверкой overflow
- Вычитание с проверкой underflow
- Zero-default чтение из разреженных map

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат арифметики всегда в [0, amount_max] или исключение
2. Отсутствие ключа в map эквивалентно сохранённому нулю
3. Все операции детерминированы (только int, никакого float)
"""

from typing import Final, Hashable, Mapping, TypeVar

from tokenledger.core.errors import (
    AmountOverflowError,
    AmountUnderflowError,
    InvalidAmountError,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ширина Amount: беззнаковое 128-битное целое
AMOUNT_BITS: Final[int] = 128

# Максимальное представимое значение Amount
AMOUNT_MAX: Final[int] = 2**AMOUNT_BITS - 1

# Нулевой Amount (значение по умолчанию для отсутствующих ключей)
ZERO: Final[int] = 0


K = TypeVar("K", bound=Hashable)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_amount(value: object, amount_max: int = AMOUNT_MAX) -> bool:
    """
    Проверка, является ли значение валидным Amount.

    bool отклоняется явно: isinstance(True, int) истинно в Python,
    но True не является количеством токенов.

    Examples:
        >>> is_valid_amount(10)
        True
        >>> is_valid_amount(-1)
        False
        >>> is_valid_amount(True)
        False
        >>> is_valid_amount(1.0)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= amount_max


def validate_amount(value: object, name: str, amount_max: int = AMOUNT_MAX) -> int:
    """
    Валидация Amount.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        amount_max: Верхняя граница (default: AMOUNT_MAX)

    Returns:
        value (как int), если валидно

    Raises:
        InvalidAmountError: Если value не int, bool, отрицательное или > amount_max
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmountError(
            f"{name} must be an integer amount, got {type(value).__name__}"
        )

    if value < 0:
        raise InvalidAmountError(f"{name} must be non-negative, got {value}")

    if value > amount_max:
        raise InvalidAmountError(f"{name} must be <= {amount_max}, got {value}")

    return value


# =============================================================================
# CHECKED АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int, amount_max: int = AMOUNT_MAX) -> int:
    """
    Сложение Amount с проверкой overflow.

    Args:
        a: Первое слагаемое (валидный Amount)
        b: Второе слагаемое (валидный Amount)
        amount_max: Верхняя граница результата

    Returns:
        a + b

    Raises:
        AmountOverflowError: Если a + b > amount_max

    Examples:
        >>> checked_add(90, 10)
        100
        >>> checked_add(AMOUNT_MAX, 1)
        Traceback (most recent call last):
        ...
        tokenledger.core.errors.AmountOverflowError: ...
    """
    result = a + b
    if result > amount_max:
        raise AmountOverflowError(f"{a} + {b} exceeds amount_max {amount_max}")
    return result


def checked_sub(a: int, b: int) -> int:
    """
    Вычитание Amount с проверкой underflow.

    Raises:
        AmountUnderflowError: Если b > a
    """
    if b > a:
        raise AmountUnderflowError(f"{a} - {b} is negative")
    return a - b


# =============================================================================
# ZERO-DEFAULT ЧТЕНИЕ
# =============================================================================


def get_or_zero(mapping: Mapping[K, int], key: K) -> int:
    """
    Чтение значения из разреженной map с нулём по умолчанию.

    Единственная точка defaulting для всех чтений balance/allowance.
    """
    return mapping.get(key, ZERO)
