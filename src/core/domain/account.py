"""
Account — Модель аккаунта покупателя

Держатель баланса, из которого оплачиваются заказы.
Баланс изменяем только через проверяемые операции (deduct/deposit/withdraw)
либо через присваивание, которое валидируется (validate_assignment=True).

Присваивание отрицательного баланса — явная ошибка (ValidationError),
прежнее значение баланса сохраняется.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from .money import MoneyLike, to_money, validate_non_negative, validate_positive


# =============================================================================
# ACCOUNT MODEL
# =============================================================================


class Account(BaseModel):
    """
    Модель аккаунта.

    Инвариант: balance >= 0, списание возможно только при достаточном балансе.
    """

    # Идентификация
    email: str = Field(..., min_length=1, description="Email (уникален в ledger)")
    name: str = Field(..., min_length=1, description="Отображаемое имя")

    # Баланс
    balance: Decimal = Field(..., ge=0, description="Доступный баланс")

    model_config = {"validate_assignment": True}

    @field_validator("balance", mode="before")
    @classmethod
    def validate_balance(cls, v: MoneyLike) -> Decimal:
        """Нормализация баланса, отрицательные значения запрещены"""
        return validate_non_negative(v, "balance")

    def can_afford(self, amount: MoneyLike) -> bool:
        """
        Проверка достаточности баланса.

        Returns:
            True если balance >= amount (граница включительная)
        """
        return self.balance >= to_money(amount)

    def deduct(self, amount: MoneyLike) -> Decimal:
        """
        Списание суммы заказа.

        Args:
            amount: Сумма к списанию (>= 0)

        Returns:
            Новый баланс

        Raises:
            ValueError: Если сумма отрицательна или баланса недостаточно
        """
        value = validate_non_negative(amount, "amount")
        if not self.can_afford(value):
            raise ValueError(
                f"Insufficient balance for {self.email}: requested {value}, available {self.balance}"
            )
        self.balance = self.balance - value
        return self.balance

    def deposit(self, amount: MoneyLike) -> Decimal:
        """Пополнение баланса (amount > 0), возвращает новый баланс"""
        value = validate_positive(amount, "deposit")
        self.balance = self.balance + value
        return self.balance

    def withdraw(self, amount: MoneyLike) -> Decimal:
        """Снятие средств (0 < amount <= balance), возвращает новый баланс"""
        value = validate_positive(amount, "withdrawal")
        return self.deduct(value)

    def __str__(self) -> str:
        return f"{self.name} ({self.email}): ${self.balance}"
