"""
OrderLog — журнал заказов ledger.

Владеет заказами (по order_id, в порядке создания) и хранит их актуальную
версию: Order immutable, поэтому смена статуса заменяет запись.
На Account и Item журнал только ссылается.
"""

from typing import Dict, Iterator, List, Optional

from src.core.domain import Order, OrderStatus


class OrderLog:
    """Журнал заказов."""

    def __init__(self):
        self._orders: Dict[str, Order] = {}

    def record(self, order: Order) -> Order:
        """
        Запись нового заказа.

        Raises:
            KeyError: Если order_id уже записан
        """
        if order.order_id in self._orders:
            raise KeyError(order.order_id)
        self._orders[order.order_id] = order
        return order

    def replace(self, order: Order) -> Order:
        """
        Замена записи новой версией заказа (после смены статуса).

        Raises:
            KeyError: Если заказ не записан в журнале
        """
        if order.order_id not in self._orders:
            raise KeyError(order.order_id)
        self._orders[order.order_id] = order
        return order

    def get(self, order_id: str) -> Optional[Order]:
        """Актуальная версия заказа или None."""
        return self._orders.get(order_id)

    def by_status(self, status: OrderStatus) -> List[Order]:
        return [o for o in self._orders.values() if o.status == status]

    def for_account(self, email: str) -> List[Order]:
        return [o for o in self._orders.values() if o.account.email == email]

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._orders

    def __iter__(self) -> Iterator[Order]:
        return iter(list(self._orders.values()))

    def __len__(self) -> int:
        return len(self._orders)
