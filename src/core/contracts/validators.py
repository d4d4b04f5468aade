"""
JSON Schema Contract Validators

Модуль для валидации JSON-представлений сущностей ledger согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema (Draft 2020-12),
межсхемные ссылки ($ref на item.json и т.п.) разрешаются через referencing.

Схемы (src/core/contracts/schema/):
- item.json
- account.json
- order.json
- ledger_snapshot.json (ссылается на три схемы выше)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft202012Validator
from referencing import Registry, Resource


SCHEMA_NAMES = ("item", "account", "order", "ledger_snapshot")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Optional[Registry] = None

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'order')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    @property
    def registry(self) -> Registry:
        """Registry всех схем для разрешения межсхемных $ref."""
        if self._registry is None:
            resources = []
            for name in SCHEMA_NAMES:
                schema = self.load_schema(name)
                resources.append((schema.get("$id", f"{name}.json"), Resource.from_contents(schema)))
            self._registry = Registry().with_resources(resources)
        return self._registry


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema, registry=_SCHEMA_LOADER.registry)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Ошибки в виде "путь: сообщение", отсортированные по пути в документе."""
        messages = []
        for error in sorted(self.validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path))):
            path = "/".join(str(part) for part in error.absolute_path) or "<root>"
            messages.append(f"{path}: {error.message}")
        return messages


class ItemValidator(ContractValidator):
    """Валидатор для item контракта."""

    def __init__(self):
        super().__init__("item")


class AccountValidator(ContractValidator):
    """Валидатор для account контракта."""

    def __init__(self):
        super().__init__("account")


class OrderValidator(ContractValidator):
    """Валидатор для order контракта (Order.to_record())."""

    def __init__(self):
        super().__init__("order")


class LedgerSnapshotValidator(ContractValidator):
    """Валидатор для ledger_snapshot контракта (OrderLedger.snapshot())."""

    def __init__(self):
        super().__init__("ledger_snapshot")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_VALIDATOR_TYPES = {
    "item": ItemValidator,
    "account": AccountValidator,
    "order": OrderValidator,
    "ledger_snapshot": LedgerSnapshotValidator,
}


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Общий экземпляр валидатора для схемы (создаётся один раз)."""
    try:
        return _VALIDATOR_TYPES[schema_name]()
    except KeyError:
        raise ValueError(f"Unknown contract: {schema_name}") from None


def validate_item(data: Dict[str, Any]) -> None:
    """
    Валидация item данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("item").validate(data)


def validate_account(data: Dict[str, Any]) -> None:
    """
    Валидация account данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("account").validate(data)


def validate_order(data: Dict[str, Any]) -> None:
    """
    Валидация order данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("order").validate(data)


def validate_ledger_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация снапшота ledger.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("ledger_snapshot").validate(data)
