"""
Тесты для доменных моделей: Item, Account, Order

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Инварианты (остаток и баланс не уходят в минус)
3. Immutability заказа (frozen=True) и смену статуса через новый экземпляр
4. Плоское JSON-представление заказа
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Account,
    Item,
    LedgerError,
    LedgerErrorCode,
    LedgerResult,
    Order,
    OrderStatus,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def laptop() -> Item:
    return Item(name="Laptop", price=999.99, quantity=10)


@pytest.fixture
def john() -> Account:
    return Account(email="john@email.com", name="John Doe", balance=1500.00)


@pytest.fixture
def pending_order(john: Account, laptop: Item) -> Order:
    return Order.open(order_id="ORD1", sequence_no=1, account=john, item=laptop, quantity=1)


# =============================================================================
# ITEM TESTS
# =============================================================================


class TestItem:
    """Тесты для модели Item"""

    def test_item_creation(self, laptop: Item) -> None:
        assert laptop.name == "Laptop"
        assert laptop.price == Decimal("999.99")
        assert laptop.quantity == 10

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Item(name="Broken", price=-1, quantity=1)

    def test_negative_quantity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Item(name="Broken", price=1, quantity=-1)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Item(name="", price=1, quantity=1)

    def test_zero_price_allowed(self) -> None:
        """Цена 0 допустима (бесплатный товар)"""
        assert Item(name="Sticker", price=0, quantity=5).price == Decimal("0.00")

    def test_is_available_boundary(self, laptop: Item) -> None:
        """Граница включительная: весь остаток доступен"""
        assert laptop.is_available(10)
        assert not laptop.is_available(11)

    def test_reduce_stock(self, laptop: Item) -> None:
        laptop.reduce_stock(10)
        assert laptop.quantity == 0

    def test_reduce_stock_insufficient_unchanged(self, laptop: Item) -> None:
        with pytest.raises(ValueError, match="Insufficient stock"):
            laptop.reduce_stock(11)
        assert laptop.quantity == 10

    def test_reduce_stock_non_positive_rejected(self, laptop: Item) -> None:
        with pytest.raises(ValueError):
            laptop.reduce_stock(0)

    def test_negative_assignment_rejected(self, laptop: Item) -> None:
        """validate_assignment: остаток не уходит в минус и прямым присваиванием"""
        with pytest.raises(ValidationError):
            laptop.quantity = -1
        assert laptop.quantity == 10

    def test_restock(self, laptop: Item) -> None:
        laptop.restock(5)
        assert laptop.quantity == 15

    def test_total_price(self) -> None:
        mouse = Item(name="Mouse", price=25.99, quantity=50)
        assert mouse.total_price(3) == Decimal("77.97")

    def test_str(self, laptop: Item) -> None:
        assert str(laptop) == "Laptop: $999.99 (10 in stock)"


# =============================================================================
# ACCOUNT TESTS
# =============================================================================


class TestAccount:
    """Тесты для модели Account"""

    def test_account_creation(self, john: Account) -> None:
        assert john.email == "john@email.com"
        assert john.balance == Decimal("1500.00")

    def test_negative_balance_rejected_on_creation(self) -> None:
        with pytest.raises(ValidationError):
            Account(email="x@email.com", name="X", balance=-5)

    def test_negative_balance_assignment_is_explicit_error(self, john: Account) -> None:
        """
        Присваивание отрицательного баланса — явная ошибка, не тихий no-op.

        Прежнее значение сохраняется.
        """
        with pytest.raises(ValidationError):
            john.balance = Decimal("-100")
        assert john.balance == Decimal("1500.00")

    def test_can_afford_boundary(self, john: Account) -> None:
        assert john.can_afford("1500.00")
        assert not john.can_afford("1500.01")

    def test_deduct(self, john: Account) -> None:
        assert john.deduct("999.99") == Decimal("500.01")
        assert john.balance == Decimal("500.01")

    def test_deduct_insufficient_unchanged(self, john: Account) -> None:
        with pytest.raises(ValueError, match="Insufficient balance"):
            john.deduct("1500.01")
        assert john.balance == Decimal("1500.00")

    def test_deposit(self, john: Account) -> None:
        assert john.deposit(500) == Decimal("2000.00")

    def test_deposit_non_positive_rejected(self, john: Account) -> None:
        with pytest.raises(ValueError):
            john.deposit(0)
        assert john.balance == Decimal("1500.00")

    def test_withdraw(self, john: Account) -> None:
        assert john.withdraw(200) == Decimal("1300.00")
        with pytest.raises(ValueError):
            john.withdraw(-1)

    def test_str(self, john: Account) -> None:
        assert str(john) == "John Doe (john@email.com): $1500.00"


# =============================================================================
# ORDER TESTS
# =============================================================================


class TestOrder:
    """Тесты для модели Order"""

    def test_open_snapshots_total(self, pending_order: Order) -> None:
        assert pending_order.status == OrderStatus.PENDING
        assert pending_order.unit_price == Decimal("999.99")
        assert pending_order.total == Decimal("999.99")
        assert pending_order.rejection_reason is None
        assert pending_order.processed_at is None
        assert not pending_order.is_terminal()

    def test_open_does_not_mutate(self, pending_order: Order, john: Account, laptop: Item) -> None:
        assert laptop.quantity == 10
        assert john.balance == Decimal("1500.00")

    def test_entities_are_shared_references(
        self, pending_order: Order, john: Account, laptop: Item
    ) -> None:
        assert pending_order.account is john
        assert pending_order.item is laptop

    def test_total_not_renegotiated_after_price_change(
        self, pending_order: Order, laptop: Item
    ) -> None:
        laptop.price = Decimal("1200.00")
        assert pending_order.total == Decimal("999.99")

    def test_order_immutable(self, pending_order: Order) -> None:
        with pytest.raises(ValidationError):
            pending_order.status = OrderStatus.PROCESSED  # type: ignore[misc]

    def test_mark_processed_returns_new_instance(self, pending_order: Order) -> None:
        processed = pending_order.mark_processed()
        assert processed.status == OrderStatus.PROCESSED
        assert processed.processed_at is not None
        assert processed.is_terminal()
        assert pending_order.status == OrderStatus.PENDING
        assert processed.account is pending_order.account

    def test_mark_rejected(self, pending_order: Order) -> None:
        rejected = pending_order.mark_rejected(LedgerErrorCode.INSUFFICIENT_STOCK)
        assert rejected.status == OrderStatus.REJECTED
        assert rejected.rejection_reason == LedgerErrorCode.INSUFFICIENT_STOCK

    def test_zero_quantity_rejected(self, john: Account, laptop: Item) -> None:
        with pytest.raises(ValidationError):
            Order.open(order_id="ORD1", sequence_no=1, account=john, item=laptop, quantity=0)

    def test_total_mismatch_rejected(self, john: Account, laptop: Item) -> None:
        with pytest.raises(ValidationError):
            Order(
                order_id="ORD1",
                sequence_no=1,
                account=john,
                item=laptop,
                quantity=2,
                unit_price=Decimal("10.00"),
                total=Decimal("25.00"),
            )

    def test_to_record(self, pending_order: Order) -> None:
        record = pending_order.to_record()
        assert record["order_id"] == "ORD1"
        assert record["account_email"] == "john@email.com"
        assert record["item_name"] == "Laptop"
        assert record["total"] == "999.99"
        assert record["status"] == "pending"
        assert "account" not in record
        assert "item" not in record

    def test_str(self, pending_order: Order) -> None:
        assert str(pending_order) == "Order ORD1: John Doe ordered 1 x Laptop for $999.99"


# =============================================================================
# LEDGER RESULT TESTS
# =============================================================================


class TestLedgerResult:
    """Тесты LedgerResult.unwrap"""

    def test_unwrap_success(self, laptop: Item) -> None:
        assert LedgerResult.success(laptop).unwrap() is laptop

    def test_unwrap_failure_raises_with_code(self) -> None:
        result = LedgerResult.failure(LedgerErrorCode.ITEM_NOT_FOUND, "Item 'Mouse' not found")

        with pytest.raises(LedgerError) as exc_info:
            result.unwrap()

        assert exc_info.value.code == LedgerErrorCode.ITEM_NOT_FOUND
        assert not result

    def test_unwrap_failure_with_value_still_raises(self, pending_order: Order) -> None:
        """Отклонённый заказ в value не делает результат успешным"""
        rejected = pending_order.mark_rejected(LedgerErrorCode.INSUFFICIENT_STOCK)
        result = LedgerResult.failure(LedgerErrorCode.INSUFFICIENT_STOCK, value=rejected)

        with pytest.raises(LedgerError):
            result.unwrap()
