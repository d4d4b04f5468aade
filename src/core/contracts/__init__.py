"""
Contract Validation Module

Модуль для валидации JSON контрактов order ledger.
"""

from .validators import (
    AccountValidator,
    ContractValidator,
    ItemValidator,
    LedgerSnapshotValidator,
    OrderValidator,
    SchemaLoader,
    get_validator,
    validate_account,
    validate_item,
    validate_ledger_snapshot,
    validate_order,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ItemValidator",
    "AccountValidator",
    "OrderValidator",
    "LedgerSnapshotValidator",
    # Functions
    "get_validator",
    "validate_item",
    "validate_account",
    "validate_order",
    "validate_ledger_snapshot",
]
