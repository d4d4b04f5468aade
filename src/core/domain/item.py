"""
Item — Модель товара в ledger

Товар с ценой за единицу и доступным остатком.
В отличие от Order, Item изменяем: остаток уменьшается при обработке заказов.
validate_assignment=True гарантирует, что ни цена, ни остаток
не станут отрицательными даже при прямом присваивании.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from .money import MoneyLike, line_total, validate_non_negative


# =============================================================================
# ITEM MODEL
# =============================================================================


class Item(BaseModel):
    """
    Модель товара.

    Инварианты:
    - price >= 0
    - quantity >= 0 (остаток никогда не уходит в минус)
    """

    # Идентификация
    name: str = Field(..., min_length=1, description="Название товара (уникально в ledger)")

    # Параметры
    price: Decimal = Field(..., ge=0, description="Цена за единицу")
    quantity: int = Field(..., ge=0, description="Доступный остаток")

    model_config = {"validate_assignment": True}

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v: MoneyLike) -> Decimal:
        """Нормализация цены в денежный Decimal"""
        return validate_non_negative(v, "price")

    def is_available(self, quantity: int) -> bool:
        """
        Проверка доступности остатка.

        Граница включительная: можно заказать ровно весь остаток.

        Args:
            quantity: Запрошенное количество

        Returns:
            True если self.quantity >= quantity
        """
        return self.quantity >= quantity

    def total_price(self, quantity: int) -> Decimal:
        """Стоимость quantity единиц по текущей цене"""
        return line_total(self.price, quantity)

    def reduce_stock(self, quantity: int) -> None:
        """
        Списание остатка.

        Args:
            quantity: Количество к списанию (> 0)

        Raises:
            ValueError: Если quantity <= 0 или остатка недостаточно
        """
        if quantity <= 0:
            raise ValueError(f"quantity {quantity} must be positive")
        if not self.is_available(quantity):
            raise ValueError(
                f"Insufficient stock for {self.name}: requested {quantity}, available {self.quantity}"
            )
        self.quantity -= quantity

    def restock(self, quantity: int) -> None:
        """Пополнение остатка (quantity > 0)"""
        if quantity <= 0:
            raise ValueError(f"quantity {quantity} must be positive")
        self.quantity += quantity

    def __str__(self) -> str:
        return f"{self.name}: ${self.price} ({self.quantity} in stock)"
