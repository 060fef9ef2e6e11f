"""
Core math modules для tokenledger

Целочисленные примитивы Amount с гарантией отсутствия wrap-around.
"""

# Amount Safeguards
from tokenledger.core.math.amount_safeguards import (
    # Constants
    AMOUNT_BITS,
    AMOUNT_MAX,
    ZERO,
    # Checked arithmetic
    checked_add,
    checked_sub,
    # Zero-default lookup
    get_or_zero,
    # Validation
    is_valid_amount,
    validate_amount,
)

__all__ = [
    # Amount Safeguards — Constants
    "AMOUNT_BITS",
    "AMOUNT_MAX",
    "ZERO",
    # Amount Safeguards — Checked arithmetic
    "checked_add",
    "checked_sub",
    # Amount Safeguards — Zero-default lookup
    "get_or_zero",
    # Amount Safeguards — Validation
    "is_valid_amount",
    "validate_amount",
]
