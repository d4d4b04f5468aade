"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (minimum/enum/pattern/условия по статусу)
- Разрешение межсхемных $ref в ledger_snapshot
- Интеграция с Pydantic моделями
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    AccountValidator,
    ItemValidator,
    LedgerSnapshotValidator,
    OrderValidator,
    SchemaLoader,
    get_validator,
    validate_account,
    validate_item,
    validate_ledger_snapshot,
    validate_order,
)
from src.core.domain import Account, Item, LedgerErrorCode, Order


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_item():
    return {"name": "Laptop", "price": "999.99", "quantity": 10}


@pytest.fixture
def valid_account():
    return {"email": "john@email.com", "name": "John Doe", "balance": "1500.00"}


@pytest.fixture
def pending_order() -> Order:
    return Order.open(
        order_id="ORD1",
        sequence_no=1,
        account=Account(email="john@email.com", name="John Doe", balance="1500.00"),
        item=Item(name="Laptop", price="999.99", quantity=10),
        quantity=1,
    )


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-validation схем"""

    @pytest.mark.parametrize("name", ["item", "account", "order", "ledger_snapshot"])
    def test_schemas_load(self, name):
        schema = SchemaLoader().load_schema(name)
        assert schema["title"] == name

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(RuntimeError):
            SchemaLoader(schema_dir=tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(schema_dir=tmp_path).load_schema("broken")


# =============================================================================
# ITEM / ACCOUNT
# =============================================================================


class TestItemContract:
    def test_valid_item(self, valid_item):
        validate_item(valid_item)
        assert ItemValidator().is_valid(valid_item)

    def test_negative_quantity(self, valid_item):
        valid_item["quantity"] = -1
        with pytest.raises(ValidationError):
            validate_item(valid_item)

    def test_price_must_be_decimal_string(self, valid_item):
        valid_item["price"] = 999.99
        assert not ItemValidator().is_valid(valid_item)

    def test_negative_price_string(self, valid_item):
        valid_item["price"] = "-1.00"
        assert not ItemValidator().is_valid(valid_item)

    def test_missing_field(self, valid_item):
        del valid_item["name"]
        errors = list(ItemValidator().iter_errors(valid_item))
        assert len(errors) == 1

    def test_model_dump_matches_contract(self):
        validate_item(Item(name="Mouse", price=25.99, quantity=50).model_dump(mode="json"))


class TestAccountContract:
    def test_valid_account(self, valid_account):
        validate_account(valid_account)

    def test_extra_field_rejected(self, valid_account):
        valid_account["password"] = "secret"
        assert not AccountValidator().is_valid(valid_account)

    def test_model_dump_matches_contract(self):
        account = Account(email="jane@email.com", name="Jane Smith", balance=800)
        validate_account(account.model_dump(mode="json"))


# =============================================================================
# ORDER
# =============================================================================


class TestOrderContract:
    def test_pending_record(self, pending_order):
        validate_order(pending_order.to_record())

    def test_processed_record(self, pending_order):
        validate_order(pending_order.mark_processed().to_record())

    def test_rejected_record(self, pending_order):
        record = pending_order.mark_rejected(LedgerErrorCode.INSUFFICIENT_BALANCE).to_record()
        validate_order(record)
        assert record["rejection_reason"] == "insufficient_balance"

    def test_rejected_without_reason_invalid(self, pending_order):
        record = pending_order.mark_processed().to_record()
        record["status"] = "rejected"
        assert not OrderValidator().is_valid(record)

    def test_pending_with_processed_at_invalid(self, pending_order):
        record = pending_order.to_record()
        record["processed_at"] = record["created_at"]
        assert not OrderValidator().is_valid(record)

    def test_unknown_status(self, pending_order):
        record = pending_order.to_record()
        record["status"] = "shipped"
        with pytest.raises(ValidationError):
            validate_order(record)


# =============================================================================
# LEDGER SNAPSHOT
# =============================================================================


class TestLedgerSnapshotContract:
    def test_empty_snapshot(self):
        validate_ledger_snapshot({"items": [], "accounts": [], "orders": []})

    def test_full_snapshot(self, valid_item, valid_account, pending_order):
        validate_ledger_snapshot(
            {"items": [valid_item], "accounts": [valid_account], "orders": [pending_order.to_record()]}
        )

    def test_nested_item_checked_through_ref(self, valid_item):
        valid_item["quantity"] = -5
        assert not LedgerSnapshotValidator().is_valid(
            {"items": [valid_item], "accounts": [], "orders": []}
        )

    def test_missing_section(self):
        with pytest.raises(ValidationError):
            validate_ledger_snapshot({"items": [], "accounts": []})


# =============================================================================
# SHARED VALIDATORS & ERROR MESSAGES
# =============================================================================


class TestSharedValidators:
    def test_same_instance_reused(self):
        assert get_validator("ledger_snapshot") is get_validator("ledger_snapshot")
        assert isinstance(get_validator("item"), ItemValidator)

    def test_unknown_contract(self):
        with pytest.raises(ValueError):
            get_validator("invoice")

    def test_error_messages_sorted_by_path(self, valid_item):
        valid_item["quantity"] = -5
        valid_item["price"] = "abc"

        messages = get_validator("item").error_messages(valid_item)

        assert len(messages) == 2
        assert messages[0].startswith("price: ")
        assert messages[1].startswith("quantity: ")

    def test_error_messages_root_level(self, valid_item):
        del valid_item["name"]
        assert get_validator("item").error_messages(valid_item) == [
            "<root>: 'name' is a required property"
        ]

    def test_no_errors_for_valid_data(self, valid_account):
        assert get_validator("account").error_messages(valid_account) == []
