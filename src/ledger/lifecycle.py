"""Order Lifecycle — оценка переходов статуса заказа.

Переходы:
- PENDING → PROCESSED: остатка и баланса достаточно
- PENDING → REJECTED: недостаточно остатка или баланса
- PROCESSED / REJECTED — терминальные, переходов нет

Оценка чистая: ни Item, ни Account не изменяются. Все проверки выполняются
строго до любых списаний, списания выполняет OrderLedger по результату.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain import Account, Item, LedgerErrorCode, Order, OrderStatus


@dataclass(frozen=True)
class OrderTransitionResult:
    """Результат оценки перехода заказа."""

    new_status: OrderStatus
    previous_status: OrderStatus
    rejection_reason: Optional[LedgerErrorCode]

    # Диагностика
    transition_occurred: bool
    transition_reason: str

    # Для отладки
    details: str

    @property
    def approved(self) -> bool:
        return self.transition_occurred and self.new_status == OrderStatus.PROCESSED


class OrderLifecycle:
    """Order lifecycle state machine.

    Порядок проверок для PENDING заказа:
    1. Остаток: item.quantity >= order.quantity (граница включительная)
    2. Баланс: account.balance >= order.total (граница включительная)

    Если не хватает и остатка, и баланса — причина INSUFFICIENT_STOCK.
    """

    def evaluate_transition(
        self,
        order: Order,
        item: Item,
        account: Account,
    ) -> OrderTransitionResult:
        """Оценка перехода для заказа.

        Args:
            order: актуальная версия заказа
            item: товар заказа (текущий остаток)
            account: аккаунт заказа (текущий баланс)

        Returns:
            OrderTransitionResult с новым статусом и причиной
        """
        # 1. Терминальные статусы не меняются
        if order.is_terminal():
            return OrderTransitionResult(
                new_status=order.status,
                previous_status=order.status,
                rejection_reason=LedgerErrorCode.ORDER_ALREADY_FINALIZED,
                transition_occurred=False,
                transition_reason="already_finalized",
                details=f"Order {order.order_id} is already {order.status.value}",
            )

        # 2. Проверка остатка
        if not item.is_available(order.quantity):
            return self._reject(
                order,
                LedgerErrorCode.INSUFFICIENT_STOCK,
                f"Requested {order.quantity} x {item.name}, available {item.quantity}",
            )

        # 3. Проверка баланса
        if not account.can_afford(order.total):
            return self._reject(
                order,
                LedgerErrorCode.INSUFFICIENT_BALANCE,
                f"Order total {order.total}, balance of {account.email} is {account.balance}",
            )

        # 4. Все проверки пройдены
        return OrderTransitionResult(
            new_status=OrderStatus.PROCESSED,
            previous_status=order.status,
            rejection_reason=None,
            transition_occurred=True,
            transition_reason="pending_to_processed",
            details=f"Order {order.order_id}: {order.quantity} x {item.name} for {order.total}",
        )

    def _reject(
        self,
        order: Order,
        reason: LedgerErrorCode,
        details: str,
    ) -> OrderTransitionResult:
        """Переход PENDING → REJECTED."""
        return OrderTransitionResult(
            new_status=OrderStatus.REJECTED,
            previous_status=order.status,
            rejection_reason=reason,
            transition_occurred=True,
            transition_reason=f"pending_to_rejected_{reason.value}",
            details=details,
        )
