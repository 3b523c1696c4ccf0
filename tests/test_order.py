"""Order totals and status broadcasts."""

import pytest

from storefront import notify as N
from storefront import pricing as P
from storefront.catalog import Item
from storefront.order import Order, COMPLETED


class StatusSpy:
    """Records the status it is told and what the order says at that moment."""

    def __init__(self, order: Order) -> None:
        self.order = order
        self.seen: list[tuple[str, str | None]] = []

    def update(self, status: str) -> None:
        self.seen.append((status, self.order.status))


def test_new_order_has_no_status():
    order = Order()
    assert order.status is None
    assert order.items == ()
    assert order.total() == 0


def test_total_is_sum_of_final_prices(catalog):
    order = Order()
    order.add_item(catalog.require(1).priced(P.percentage(10)))
    order.add_item(catalog.require(2))
    order.add_item(catalog.require(3).priced(P.percentage(50)))

    assert order.total() == pytest.approx(67500 + 1200 + 1250)


def test_single_discounted_laptop(catalog):
    order = Order()
    order.add_item(catalog.require(1).priced(P.percentage(10)))

    assert order.total() == pytest.approx(67500)


def test_same_item_twice_counts_twice():
    item = Item(9, "Sticker", 10)
    order = Order()
    order.add_item(item)
    order.add_item(item)

    assert order.total() == 20


def test_set_status_broadcasts_once_in_order(lines, emit):
    order = Order()
    order.add_observer(N.EmailNotifier(emit))
    order.add_observer(N.SmsNotifier(emit))

    order.set_status(COMPLETED)

    assert order.status == COMPLETED
    assert lines == [
        "Email Notification: Order COMPLETED",
        "SMS Notification: Order COMPLETED",
    ]


def test_status_is_stored_before_broadcast():
    order = Order()
    spy = StatusSpy(order)
    order.add_observer(spy)

    order.set_status("PAID")

    assert spy.seen == [("PAID", "PAID")]


def test_every_set_status_rebroadcasts():
    order = Order()
    spy = StatusSpy(order)
    order.add_observer(spy)

    order.set_status("PAID")
    order.set_status("PAID")
    order.set_status("SHIPPED")

    assert [status for status, _ in spy.seen] == ["PAID", "PAID", "SHIPPED"]


def test_late_observer_only_sees_later_transitions():
    order = Order()
    early = StatusSpy(order)
    late = StatusSpy(order)
    order.add_observer(early)
    order.set_status("PAID")
    order.add_observer(late)
    order.set_status(COMPLETED)

    assert len(early.seen) == 2
    assert late.seen == [(COMPLETED, COMPLETED)]


def test_order_ids_are_unique():
    assert Order().id != Order().id
    assert Order("ORD-CUSTOM").id == "ORD-CUSTOM"


def test_restore_status_is_silent(lines, emit):
    order = Order()
    order.add_observer(N.EmailNotifier(emit))
    order.set_status("PAID")

    order.restore_status(None)

    assert order.status is None
    assert lines == ["Email Notification: Order PAID"]
