"""
Registry — реестр сущностей ledger с порядком вставки.

Хранит Item (ключ — name) и Account (ключ — email).
dict сохраняет порядок вставки, поэтому итерация идёт в порядке добавления,
а поиск по идентификатору — O(1) с семантикой "единственное совпадение".
"""

from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from src.core.domain import Account, Item


E = TypeVar("E")


class Registry(Generic[E]):
    """Реестр сущностей, ключ вычисляется функцией key."""

    def __init__(self, key: Callable[[E], str]):
        """
        Args:
            key: функция извлечения идентификатора из сущности
        """
        self._key = key
        self._entries: Dict[str, E] = {}

    def add(self, entity: E) -> E:
        """
        Добавление новой сущности.

        Raises:
            KeyError: Если идентификатор уже занят
        """
        identifier = self._key(entity)
        if identifier in self._entries:
            raise KeyError(identifier)
        self._entries[identifier] = entity
        return entity

    def get(self, identifier: str) -> Optional[E]:
        """Сущность по идентификатору или None."""
        return self._entries.get(identifier)

    def values(self) -> List[E]:
        """Снимок сущностей в порядке добавления."""
        return list(self._entries.values())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)


def item_registry() -> Registry[Item]:
    """Реестр товаров (ключ — name)."""
    return Registry(key=lambda item: item.name)


def account_registry() -> Registry[Account]:
    """Реестр аккаунтов (ключ — email)."""
    return Registry(key=lambda account: account.email)
