"""Ledger — реестры товаров и аккаунтов, журнал и обработка заказов.

- OrderLedger: create_order / process_order с атомарным применением
- OrderLifecycle: переходы PENDING → PROCESSED | REJECTED
- OrderIdSequence: монотонные номера заказов
"""

from .ledger import OrderLedger
from .lifecycle import OrderLifecycle, OrderTransitionResult
from .order_log import OrderLog
from .registry import Registry, account_registry, item_registry
from .sequence import DEFAULT_SEQUENCE, OrderIdSequence

__all__ = [
    "OrderLedger",
    "OrderLifecycle",
    "OrderTransitionResult",
    "OrderLog",
    "Registry",
    "item_registry",
    "account_registry",
    "OrderIdSequence",
    "DEFAULT_SEQUENCE",
]
