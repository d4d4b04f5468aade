"""
Ledger Errors — Таксономия ошибок и результат операций ledger

Все ошибки ledger локальны и восстановимы: они возвращаются вызывающему
как значение (LedgerResult), а не выбрасываются. Отклонённый заказ
оставляет все сущности без изменений.

Для вызывающих, предпочитающих исключения, LedgerResult.unwrap()
выбрасывает LedgerError с тем же кодом.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, cast


T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class LedgerErrorCode(str, Enum):
    """Код ошибки операции ledger"""

    ACCOUNT_NOT_FOUND = "account_not_found"
    ITEM_NOT_FOUND = "item_not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    INVALID_QUANTITY = "invalid_quantity"  # quantity <= 0
    DUPLICATE_IDENTIFIER = "duplicate_identifier"
    INVALID_ARGUMENT = "invalid_argument"  # отрицательная цена/остаток/баланс
    ORDER_ALREADY_FINALIZED = "order_already_finalized"  # повторная обработка
    UNKNOWN_ORDER = "unknown_order"  # заказ создан не этим ledger


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LedgerError(Exception):
    """Исключение с кодом ошибки ledger (см. LedgerResult.unwrap)"""

    def __init__(self, code: LedgerErrorCode, details: str = ""):
        self.code = code
        self.details = details
        super().__init__(f"{code.value}: {details}" if details else code.value)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class LedgerResult(Generic[T]):
    """Результат операции ledger."""

    ok: bool
    value: Optional[T]
    error: Optional[LedgerErrorCode]

    # Детали
    details: str = ""

    @classmethod
    def success(cls, value: T, details: str = "") -> "LedgerResult[T]":
        return cls(ok=True, value=value, error=None, details=details)

    @classmethod
    def failure(
        cls,
        error: LedgerErrorCode,
        details: str = "",
        value: Optional[T] = None,
    ) -> "LedgerResult[T]":
        """
        Неуспешный результат.

        value может содержать сущность и при ошибке — например,
        отклонённый заказ в статусе REJECTED.
        """
        return cls(ok=False, value=value, error=error, details=details)

    def unwrap(self) -> T:
        """
        Значение успешного результата.

        Raises:
            LedgerError: Если результат неуспешный
        """
        if self.error is not None:
            raise LedgerError(self.error, self.details)
        return cast(T, self.value)

    def __bool__(self) -> bool:
        return self.ok
