"""
Order — Модель заказа

Immutable Pydantic модель, представляющая запрос на покупку quantity единиц
одного Item одним Account.

Жизненный цикл: PENDING → PROCESSED | REJECTED.
Смена статуса создаёт новый экземпляр (model_copy), исходный не меняется.
Сумма заказа (total) фиксируется в момент создания и не пересчитывается.

Account и Item — разделяемые ссылки (не копии): заказ ссылается на сущности
ledger, но не владеет ими.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .account import Account
from .errors import LedgerErrorCode
from .item import Item
from .money import line_total


# =============================================================================
# ENUMS
# =============================================================================


class OrderStatus(str, Enum):
    """Статус заказа"""

    PENDING = "pending"  # Создан, ничего не списано
    PROCESSED = "processed"  # Остаток и баланс списаны
    REJECTED = "rejected"  # Отклонён, сущности не изменены


TERMINAL_STATUSES = frozenset({OrderStatus.PROCESSED, OrderStatus.REJECTED})


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ORDER MODEL
# =============================================================================


class Order(BaseModel):
    """
    Модель заказа.

    Immutable модель (frozen=True). Все изменения статуса должны
    создавать новый экземпляр через mark_processed / mark_rejected.
    """

    # Идентификация
    order_id: str = Field(..., min_length=1, description="Идентификатор заказа (например, 'ORD1')")
    sequence_no: int = Field(..., ge=1, description="Порядковый номер из монотонного счётчика")

    # Участники (разделяемые ссылки)
    account: Account = Field(..., description="Аккаунт покупателя")
    item: Item = Field(..., description="Заказанный товар")

    # Параметры заказа
    quantity: int = Field(..., gt=0, description="Запрошенное количество")
    unit_price: Decimal = Field(..., ge=0, description="Цена за единицу на момент создания")
    total: Decimal = Field(..., ge=0, description="Сумма заказа на момент создания")

    # Состояние
    status: OrderStatus = Field(default=OrderStatus.PENDING, description="Статус заказа")
    rejection_reason: Optional[LedgerErrorCode] = Field(
        None, description="Причина отклонения (только для REJECTED)"
    )

    # Время
    created_at: datetime = Field(default_factory=utc_now, description="Время создания (UTC)")
    processed_at: Optional[datetime] = Field(
        None, description="Время перехода в терминальный статус (UTC)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("total")
    @classmethod
    def validate_total_matches(cls, v: Decimal, info) -> Decimal:
        """Проверка, что total == unit_price * quantity"""
        data = info.data
        if "unit_price" in data and "quantity" in data:
            expected = line_total(data["unit_price"], data["quantity"])
            if v != expected:
                raise ValueError(f"total {v} must equal unit_price * quantity = {expected}")
        return v

    @classmethod
    def open(
        cls,
        order_id: str,
        sequence_no: int,
        account: Account,
        item: Item,
        quantity: int,
    ) -> "Order":
        """
        Создание заказа в статусе PENDING.

        Цена и сумма фиксируются по текущей цене товара.
        Ни остаток, ни баланс не изменяются.
        """
        return cls(
            order_id=order_id,
            sequence_no=sequence_no,
            account=account,
            item=item,
            quantity=quantity,
            unit_price=item.price,
            total=item.total_price(quantity),
        )

    def is_terminal(self) -> bool:
        """True для PROCESSED и REJECTED"""
        return self.status in TERMINAL_STATUSES

    def mark_processed(self, at: Optional[datetime] = None) -> "Order":
        """Новый экземпляр в статусе PROCESSED"""
        return self.model_copy(
            update={"status": OrderStatus.PROCESSED, "processed_at": at or utc_now()}
        )

    def mark_rejected(self, reason: LedgerErrorCode, at: Optional[datetime] = None) -> "Order":
        """Новый экземпляр в статусе REJECTED с причиной"""
        return self.model_copy(
            update={
                "status": OrderStatus.REJECTED,
                "rejection_reason": reason,
                "processed_at": at or utc_now(),
            }
        )

    def to_record(self) -> dict[str, Any]:
        """
        Плоское JSON-представление заказа.

        Вместо вложенных сущностей — их идентификаторы
        (account_email, item_name). Соответствует контракту order.json.
        """
        record = self.model_dump(mode="json", exclude={"account", "item"})
        record["account_email"] = self.account.email
        record["item_name"] = self.item.name
        return record

    def __str__(self) -> str:
        return (
            f"Order {self.order_id}: {self.account.name} ordered "
            f"{self.quantity} x {self.item.name} for ${self.total}"
        )
