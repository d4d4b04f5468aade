"""
Demo harness — консольный сценарий поверх OrderLedger.

Тонкий адаптер представления: вызывает операции ledger в фиксированном
порядке и форматирует их результаты (rich). Бизнес-логики здесь нет.

Запуск: python -m src.demo  (или console script order-ledger-demo)
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from src.core.config import LedgerSettings, get_settings
from src.core.domain import LedgerResult, Order
from src.core.log_config import configure_logging
from src.ledger import OrderIdSequence, OrderLedger
from src.showcase import AnimalFactory, Car, Circle, Duck, Eagle, Rectangle, ShapePricer, describe


# =============================================================================
# FORMATTING
# =============================================================================


def format_result(result: LedgerResult[Order]) -> str:
    """Одна строка о результате create/process."""
    if result.ok and result.value is not None:
        return f"[green]✓[/green] {result.value.order_id} {result.value.status.value}: {result.value}"
    order_id = result.value.order_id if result.value is not None else "-"
    return f"[red]✗[/red] {order_id} {result.error.value if result.error else 'error'}: {result.details}"


def inventory_table(ledger: OrderLedger) -> Table:
    table = Table(title="Inventory")
    table.add_column("Item")
    table.add_column("Price", justify="right")
    table.add_column("In stock", justify="right")
    for item in ledger.items():
        table.add_row(item.name, f"${item.price}", str(item.quantity))
    return table


def accounts_table(ledger: OrderLedger) -> Table:
    table = Table(title="Accounts")
    table.add_column("Name")
    table.add_column("Email")
    table.add_column("Balance", justify="right")
    for account in ledger.accounts():
        table.add_row(account.name, account.email, f"${account.balance}")
    return table


def orders_table(ledger: OrderLedger) -> Table:
    table = Table(title="Orders")
    table.add_column("Order")
    table.add_column("Account")
    table.add_column("Item")
    table.add_column("Qty", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Status")
    for order in ledger.orders():
        status = order.status.value
        if order.rejection_reason is not None:
            status = f"{status} ({order.rejection_reason.value})"
        table.add_row(
            order.order_id,
            order.account.email,
            order.item.name,
            str(order.quantity),
            f"${order.total}",
            status,
        )
    return table


# =============================================================================
# SCENARIOS
# =============================================================================


def build_ledger(settings: Optional[LedgerSettings] = None) -> OrderLedger:
    """Ledger с фиксированным набором товаров и аккаунтов."""
    ledger = OrderLedger(settings=settings, sequence=OrderIdSequence())
    ledger.add_item("Laptop", "999.99", 10)
    ledger.add_item("Mouse", "25.99", 50)
    ledger.add_account("John Doe", "john@email.com", "1500.00")
    ledger.add_account("Jane Smith", "jane@email.com", "800.00")
    return ledger


def run_order_scenario(console: Console, ledger: OrderLedger) -> None:
    console.print("[bold cyan]=== ORDER LEDGER ===[/bold cyan]")

    requests = [
        ("john@email.com", "Laptop", 1),
        ("jane@email.com", "Mouse", 2),
        ("john@email.com", "Mouse", 100),  # остатка не хватает
        ("john@email.com", "Keyboard", 1),  # товара нет
    ]
    for email, item_name, quantity in requests:
        created = ledger.create_order(email, item_name, quantity)
        if not created.ok:
            console.print(format_result(created))
            continue
        console.print(format_result(ledger.process_order(created.unwrap())))

    console.print(inventory_table(ledger))
    console.print(accounts_table(ledger))
    console.print(orders_table(ledger))


def run_showcase(console: Console) -> None:
    console.print("[bold cyan]=== SHOWCASE ===[/bold cyan]")

    pricer = ShapePricer()
    priced = [
        (Circle(radius=5.0, color="red"), 2.5),
        (Rectangle(width=4.0, height=6.0, color="blue"), 1.8),
    ]
    for shape, price in priced:
        quote = pricer.quote(shape, price)
        console.print(f"{describe(shape)}: area {quote.area:.2f}, total ${quote.total:.2f}")

    car = Car.build("Toyota Camry", 2023, "V6", 300)
    for line in car.start() + car.stop():
        console.print(line)

    factory = AnimalFactory()
    for tag, name in (("dog", "Buddy"), ("cat", "Whiskers"), ("bird", "Tweety")):
        console.print(factory.create(tag, name).make_sound())

    eagle = Eagle("Bald Eagle", 5)
    duck = Duck("Donald", 2)
    for line in (eagle.fly(), eagle.land(), duck.swim(), duck.fly(), duck.land()):
        console.print(line)


def run_demo(console: Optional[Console] = None, settings: Optional[LedgerSettings] = None) -> OrderLedger:
    """Полный сценарий: заказы + showcase. Возвращает ledger для инспекции."""
    console = console or Console()
    ledger = build_ledger(settings)
    run_order_scenario(console, ledger)
    run_showcase(console)
    return ledger


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    run_demo(settings=settings)


if __name__ == "__main__":
    main()
