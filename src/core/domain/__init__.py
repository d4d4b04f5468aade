"""
Domain models and value objects.

Contains fundamental ledger entities: Item, Account, Order, money helpers
and the error taxonomy shared by all ledger operations.
"""

from src.core.domain.account import Account
from src.core.domain.errors import LedgerError, LedgerErrorCode, LedgerResult
from src.core.domain.item import Item
from src.core.domain.money import (
    MONEY_PLACES,
    MoneyLike,
    ZERO,
    format_money,
    line_total,
    quantum,
    to_money,
    validate_non_negative,
    validate_positive,
)
from src.core.domain.order import TERMINAL_STATUSES, Order, OrderStatus

__all__ = [
    # Money module
    "MONEY_PLACES",
    "MoneyLike",
    "ZERO",
    "quantum",
    "to_money",
    "line_total",
    "validate_non_negative",
    "validate_positive",
    "format_money",
    # Entities
    "Item",
    "Account",
    # Order model
    "Order",
    "OrderStatus",
    "TERMINAL_STATUSES",
    # Errors
    "LedgerErrorCode",
    "LedgerError",
    "LedgerResult",
]
