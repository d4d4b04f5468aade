"""
Money — Централизованный модуль денежных величин

Единственный допустимый способ получения денежных значений для ledger:
- цены товаров (unit price)
- балансы аккаунтов (balance)
- суммы заказов (total = unit_price * quantity)

Все суммы хранятся как Decimal, квантованный до MONEY_PLACES знаков.
ЗАПРЕЩЕНО смешивать float и Decimal без конвертера из этого модуля.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final, Union


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================
# Количество знаков после запятой по умолчанию (центы)
MONEY_PLACES: Final[int] = 2

# Нулевая сумма
ZERO: Final[Decimal] = Decimal("0")

MoneyLike = Union[Decimal, int, float, str]


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def quantum(places: int = MONEY_PLACES) -> Decimal:
    """
    Шаг квантования для заданного количества знаков.

    Args:
        places: Количество знаков после запятой

    Returns:
        Decimal вида 0.01 для places=2
    """
    if places < 0:
        raise ValueError(f"places {places} must be non-negative")
    return Decimal(1).scaleb(-places)


def to_money(value: MoneyLike, places: int = MONEY_PLACES) -> Decimal:
    """
    Конверсия произвольного числа в денежный Decimal.

    float конвертируется через str(), чтобы 999.99 оставался ровно 999.99,
    а не двоичным приближением.

    Args:
        value: Сумма (Decimal, int, float или строка)
        places: Количество знаков после запятой

    Returns:
        Decimal, квантованный ROUND_HALF_UP

    Raises:
        ValueError: Если значение не является конечным числом или
            не помещается в точность Decimal после квантования
    """
    if isinstance(value, bool):
        raise ValueError(f"Money value must be numeric, got bool {value!r}")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Money value {value!r} is not a number") from e

    if not amount.is_finite():
        raise ValueError(f"Money value {value!r} must be finite")

    try:
        return amount.quantize(quantum(places), rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        # quantize требует не более prec значащих цифр (28 по умолчанию)
        raise ValueError(f"Money value {value!r} is too large to represent") from e


def line_total(unit_price: MoneyLike, quantity: int, places: int = MONEY_PLACES) -> Decimal:
    """
    Сумма позиции: unit_price * quantity.

    Args:
        unit_price: Цена за единицу
        quantity: Количество единиц
        places: Количество знаков после запятой

    Returns:
        Квантованная сумма

    Raises:
        ValueError: Если сумма слишком велика для представления
    """
    return to_money(to_money(unit_price, places) * quantity, places)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: MoneyLike, field_name: str = "amount") -> Decimal:
    """
    Проверка неотрицательной суммы (цена, баланс).

    Raises:
        ValueError: Если сумма отрицательна
    """
    amount = to_money(value)
    if amount < ZERO:
        raise ValueError(f"{field_name} {amount} cannot be negative")
    return amount


def validate_positive(value: MoneyLike, field_name: str = "amount") -> Decimal:
    """
    Проверка строго положительной суммы (пополнение, списание).

    Raises:
        ValueError: Если сумма <= 0
    """
    amount = to_money(value)
    if amount <= ZERO:
        raise ValueError(f"{field_name} {amount} must be positive")
    return amount


def format_money(value: MoneyLike, currency_symbol: str = "$") -> str:
    """Форматирование суммы для вывода: $999.99"""
    return f"{currency_symbol}{to_money(value)}"
