"""
OrderLedger — реестр товаров и аккаунтов с обработкой заказов.

Операции:
- add_item / add_account: регистрация сущностей (уникальность по name / email)
- find_item / find_account: поиск по идентификатору, None если не найдено
- create_order: создание заказа в статусе PENDING (без списаний)
- process_order: атомарное применение заказа (PROCESSED) или отказ (REJECTED)

Все операции возвращают LedgerResult, ошибки не выбрасываются.
Изменяющие операции сериализуются одним RLock на весь ledger, поэтому
проверка и списание в process_order атомарны и при общем доступе из потоков.
"""

import threading
from typing import List, Optional, Tuple

import structlog
from pydantic import ValidationError

from src.core.config import LedgerSettings, get_settings
from src.core.contracts import validate_ledger_snapshot
from src.core.domain import (
    Account,
    Item,
    LedgerErrorCode,
    LedgerResult,
    MoneyLike,
    Order,
    OrderStatus,
)
from src.ledger.lifecycle import OrderLifecycle
from src.ledger.order_log import OrderLog
from src.ledger.registry import account_registry, item_registry
from src.ledger.sequence import DEFAULT_SEQUENCE, OrderIdSequence


logger = structlog.get_logger(__name__)


def _describe_validation_error(error: ValidationError) -> str:
    """Краткое описание первой ошибки валидации pydantic."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", "")


class OrderLedger:
    """Ledger: владеет реестрами Item/Account и журналом заказов."""

    def __init__(
        self,
        settings: Optional[LedgerSettings] = None,
        sequence: Optional[OrderIdSequence] = None,
        lifecycle: Optional[OrderLifecycle] = None,
    ):
        """
        Args:
            settings: настройки ledger (по умолчанию get_settings())
            sequence: счётчик номеров заказов (по умолчанию общий на процесс)
            lifecycle: оценщик переходов статуса заказа
        """
        self.settings = settings or get_settings()
        self._sequence = sequence or DEFAULT_SEQUENCE
        self._lifecycle = lifecycle or OrderLifecycle()

        self._items = item_registry()
        self._accounts = account_registry()
        self._orders = OrderLog()

        self._lock = threading.RLock()

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def add_item(self, name: str, price: MoneyLike, quantity: int) -> LedgerResult[Item]:
        """
        Регистрация товара.

        При duplicate_policy="reject" повторное имя — DUPLICATE_IDENTIFIER.
        При "last_write_wins" существующий Item обновляется на месте,
        чтобы заказы сохраняли валидные ссылки.
        """
        with self._lock:
            try:
                candidate = Item(name=name, price=price, quantity=quantity)
            except ValidationError as e:
                return LedgerResult.failure(
                    LedgerErrorCode.INVALID_ARGUMENT, _describe_validation_error(e)
                )

            existing = self._items.get(name)
            if existing is None:
                self._items.add(candidate)
                logger.info(
                    "item_added", item=name, price=str(candidate.price), quantity=quantity
                )
                return LedgerResult.success(candidate)

            if self.settings.duplicate_policy == "reject":
                logger.warning("duplicate_rejected", kind="item", identifier=name)
                return LedgerResult.failure(
                    LedgerErrorCode.DUPLICATE_IDENTIFIER, f"Item '{name}' already exists"
                )

            existing.price = candidate.price
            existing.quantity = candidate.quantity
            logger.info(
                "item_replaced", item=name, price=str(existing.price), quantity=existing.quantity
            )
            return LedgerResult.success(existing, details="replaced")

    def add_account(self, name: str, email: str, balance: MoneyLike) -> LedgerResult[Account]:
        """Регистрация аккаунта, политика уникальности как у add_item (по email)."""
        with self._lock:
            try:
                candidate = Account(email=email, name=name, balance=balance)
            except ValidationError as e:
                return LedgerResult.failure(
                    LedgerErrorCode.INVALID_ARGUMENT, _describe_validation_error(e)
                )

            existing = self._accounts.get(email)
            if existing is None:
                self._accounts.add(candidate)
                logger.info("account_added", email=email, balance=str(candidate.balance))
                return LedgerResult.success(candidate)

            if self.settings.duplicate_policy == "reject":
                logger.warning("duplicate_rejected", kind="account", identifier=email)
                return LedgerResult.failure(
                    LedgerErrorCode.DUPLICATE_IDENTIFIER, f"Account '{email}' already exists"
                )

            existing.name = candidate.name
            existing.balance = candidate.balance
            logger.info("account_replaced", email=email, balance=str(existing.balance))
            return LedgerResult.success(existing, details="replaced")

    def deposit(self, email: str, amount: MoneyLike) -> LedgerResult[Account]:
        """Пополнение баланса аккаунта (например, перед повторным заказом)."""
        with self._lock:
            account = self._accounts.get(email)
            if account is None:
                return LedgerResult.failure(
                    LedgerErrorCode.ACCOUNT_NOT_FOUND, f"Account '{email}' not found"
                )
            try:
                balance = account.deposit(amount)
            except ValueError as e:
                return LedgerResult.failure(LedgerErrorCode.INVALID_ARGUMENT, str(e))

            logger.info("deposit_applied", email=email, amount=str(amount), balance=str(balance))
            return LedgerResult.success(account)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def find_item(self, name: str) -> Optional[Item]:
        """Товар по имени или None."""
        return self._items.get(name)

    def find_account(self, email: str) -> Optional[Account]:
        """Аккаунт по email или None."""
        return self._accounts.get(email)

    def find_order(self, order_id: str) -> Optional[Order]:
        """Актуальная версия заказа или None."""
        return self._orders.get(order_id)

    def items(self) -> List[Item]:
        return self._items.values()

    def accounts(self) -> List[Account]:
        return self._accounts.values()

    def orders(self, status: Optional[OrderStatus] = None) -> List[Order]:
        """Заказы в порядке создания, опционально с фильтром по статусу."""
        if status is None:
            return list(self._orders)
        return self._orders.by_status(status)

    # =========================================================================
    # ORDERS
    # =========================================================================

    def create_order(self, email: str, item_name: str, quantity: int) -> LedgerResult[Order]:
        """
        Создание заказа в статусе PENDING.

        Порядок проверок: аккаунт → товар → quantity > 0 → представимость
        суммы заказа. Остаток и баланс не изменяются; номер заказа
        выдаётся только при успешном создании.
        """
        with self._lock:
            account = self._accounts.get(email)
            if account is None:
                logger.info("order_create_failed", reason="account_not_found", email=email)
                return LedgerResult.failure(
                    LedgerErrorCode.ACCOUNT_NOT_FOUND, f"Account '{email}' not found"
                )

            item = self._items.get(item_name)
            if item is None:
                logger.info("order_create_failed", reason="item_not_found", item=item_name)
                return LedgerResult.failure(
                    LedgerErrorCode.ITEM_NOT_FOUND, f"Item '{item_name}' not found"
                )

            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                logger.info("order_create_failed", reason="invalid_quantity", quantity=quantity)
                return LedgerResult.failure(
                    LedgerErrorCode.INVALID_QUANTITY, f"Quantity {quantity!r} must be a positive integer"
                )

            try:
                item.total_price(quantity)
            except ValueError as e:
                logger.info("order_create_failed", reason="invalid_argument", quantity=quantity)
                return LedgerResult.failure(
                    LedgerErrorCode.INVALID_ARGUMENT,
                    f"Total for {quantity} x {item_name} cannot be represented: {e}",
                )

            number = self._sequence.next()
            order = Order.open(
                order_id=f"{self.settings.order_id_prefix}{number}",
                sequence_no=number,
                account=account,
                item=item,
                quantity=quantity,
            )
            self._orders.record(order)

            logger.info(
                "order_created",
                order_id=order.order_id,
                email=email,
                item=item_name,
                quantity=quantity,
                total=str(order.total),
            )
            return LedgerResult.success(order)

    def process_order(self, order: Order) -> LedgerResult[Order]:
        """
        Применение заказа.

        Проверки выполняются строго до списаний. Успех: остаток и баланс
        уменьшаются, заказ PROCESSED. Отказ: заказ REJECTED, сущности
        не изменены. Повторная обработка терминального заказа отклоняется
        с ORDER_ALREADY_FINALIZED, журнальная версия возвращается как есть.
        """
        with self._lock:
            current = self._orders.get(order.order_id)
            foreign = current is not None and (
                current.account is not order.account or current.item is not order.item
            )
            if current is None or foreign:
                logger.warning("order_unknown", order_id=order.order_id)
                return LedgerResult.failure(
                    LedgerErrorCode.UNKNOWN_ORDER,
                    f"Order {order.order_id} was not created by this ledger",
                )

            transition = self._lifecycle.evaluate_transition(current, current.item, current.account)

            if not transition.transition_occurred:
                logger.warning(
                    "order_reprocess_refused", order_id=current.order_id, status=current.status.value
                )
                return LedgerResult.failure(
                    LedgerErrorCode.ORDER_ALREADY_FINALIZED, transition.details, value=current
                )

            reason = transition.rejection_reason
            details = transition.details
            if reason is None:
                failure = self._apply(current)
                if failure is not None:
                    reason, details = failure

            if reason is None:
                updated = self._orders.replace(current.mark_processed())
                logger.info(
                    "order_processed",
                    order_id=updated.order_id,
                    item_quantity=updated.item.quantity,
                    balance=str(updated.account.balance),
                )
                return LedgerResult.success(updated, details=details)

            updated = self._orders.replace(current.mark_rejected(reason))
            logger.info(
                "order_rejected",
                order_id=updated.order_id,
                reason=reason.value,
                details=details,
            )
            return LedgerResult.failure(reason, details, value=updated)

    @staticmethod
    def _apply(order: Order) -> Optional[Tuple[LedgerErrorCode, str]]:
        """
        Списание остатка и баланса как одна операция.

        Если списание баланса не удалось, остаток возвращается.

        Returns:
            None при успехе, иначе (причина отказа, описание)
        """
        try:
            order.item.reduce_stock(order.quantity)
        except ValueError as e:
            return LedgerErrorCode.INSUFFICIENT_STOCK, str(e)

        try:
            order.account.deduct(order.total)
        except ValueError as e:
            order.item.restock(order.quantity)
            return LedgerErrorCode.INSUFFICIENT_BALANCE, str(e)

        return None

    # =========================================================================
    # SNAPSHOT
    # =========================================================================

    def snapshot(self, validate: bool = True) -> dict:
        """
        JSON-представление ledger (items, accounts, orders).

        Args:
            validate: проверить результат контрактом ledger_snapshot

        Raises:
            jsonschema.ValidationError: Если validate=True и снапшот не соответствует контракту
        """
        with self._lock:
            data = {
                "items": [item.model_dump(mode="json") for item in self._items],
                "accounts": [account.model_dump(mode="json") for account in self._accounts],
                "orders": [order.to_record() for order in self._orders],
            }
        if validate:
            validate_ledger_snapshot(data)
        return data
