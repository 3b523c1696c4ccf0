"""
Interactive checkout: pick a product, pick a payment method.

┌─────────────────────────────────────────────────────────────────────────┐
│  STEP         COMPONENT                                                 │
├─────────────────────────────────────────────────────────────────────────┤
│  list         Catalog.list                                              │
│  product id   Catalog.get  → halt on unknown id                         │
│  discount     pricing.percentage(settings.discount_percent)             │
│  order        Order + EmailNotifier + SmsNotifier                       │
│  payment      OrderPlacement.place → drained before exit                │
└─────────────────────────────────────────────────────────────────────────┘
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from storefront import notify as N
from storefront import pricing as P
from storefront._log import configure_logging, get_logger
from storefront._types import Emit
from storefront.catalog import Catalog
from storefront.config import Settings
from storefront.order import Order
from storefront.payment import format_amount
from storefront.placement import OrderPlacement

log = get_logger(__name__)

type Read = Callable[[str], str]


# ═══════════════════════════════════════════════════════════════════════════════
# Data Display
# ═══════════════════════════════════════════════════════════════════════════════

def print_products(catalog: Catalog, emit: Emit = print, currency: str = "₹") -> None:
    emit("\nAvailable Products:")
    emit("┌────────────────────────────────────────┐")
    for item in catalog.list():
        price = format_amount(item.price, currency)
        emit(f"│  [{item.id}] {item.name:18} {price:>14} │")
    emit("└────────────────────────────────────────┘")


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing
# ═══════════════════════════════════════════════════════════════════════════════

def parse_product_id(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


# ═══════════════════════════════════════════════════════════════════════════════
# Driver
# ═══════════════════════════════════════════════════════════════════════════════

def take_order(
    catalog: Catalog,
    settings: Settings,
    *,
    read: Read = input,
    emit: Emit = print,
) -> tuple[Order, str] | None:
    """
    Both prompts, answered before anything is scheduled.

    Returns the order and the payment tag, or None when the driver halted.
    """
    print_products(catalog, emit, settings.currency)

    try:
        raw_id = read("\nEnter Product ID: ")
    except EOFError:
        emit("\nBye!")
        return None

    product_id = parse_product_id(raw_id)
    item = catalog.get(product_id) if product_id is not None else None
    if item is None:
        log.info("cli.invalid_product", raw=raw_id)
        emit("Invalid Product")
        return None

    order = Order()
    order.add_item(item.priced(P.percentage(settings.discount_percent)))
    order.add_observer(N.EmailNotifier(emit))
    order.add_observer(N.SmsNotifier(emit))

    try:
        payment = read("Enter Payment Method (card/paypal): ")
    except EOFError:
        emit("\nBye!")
        return None

    return order, payment.strip()


async def place_order(order: Order, payment: str, placement: OrderPlacement) -> Order:
    """Schedule the checkout, then shut placement down (drains it)."""
    try:
        placement.place(order, payment)
    finally:
        await placement.shutdown()
    return order


def run_cli(
    catalog: Catalog | None = None,
    settings: Settings | None = None,
    *,
    read: Read = input,
    emit: Emit = print,
    placement: OrderPlacement | None = None,
) -> Order | None:
    """
    One checkout. Returns the placed order, or None when the driver halted.

    The prompts run before the event loop starts, so Ctrl-C at a prompt is a
    plain KeyboardInterrupt.
    """
    settings = settings or Settings()
    if catalog is None:
        catalog = Catalog.seeded()

    taken = take_order(catalog, settings, read=read, emit=emit)
    if taken is None:
        return None

    order, payment = taken
    if placement is None:
        placement = OrderPlacement(settings, emit=emit)
    return asyncio.run(place_order(order, payment, placement))


def main() -> int:
    settings = Settings()
    configure_logging(settings.log_level)
    try:
        run_cli(settings=settings)
    except KeyboardInterrupt:
        print("\nBye!")
        return 130
    return 0


__all__ = ("run_cli", "take_order", "place_order", "print_products", "parse_product_id", "main")
