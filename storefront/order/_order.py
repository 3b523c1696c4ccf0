"""
Order: items, observers, status.
"""

from __future__ import annotations

import itertools

from storefront.catalog import Item
from storefront.notify import Fanout, Observer

COMPLETED = "COMPLETED"

_order_counter = itertools.count(1)


class Order:
    """
    One checkout attempt.

    `set_status` stores the new status first, then broadcasts it once to
    every observer registered at that moment. No state machine: any string,
    any number of times.
    """

    def __init__(self, order_id: str | None = None) -> None:
        self.id = order_id or f"ORD-{next(_order_counter):04d}"
        self._items: list[Item] = []
        self._fanout = Fanout()
        self._status: str | None = None

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def add_observer(self, target: Observer) -> None:
        self._fanout.register(target)

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    @property
    def observers(self) -> tuple[Observer, ...]:
        return self._fanout.targets

    @property
    def status(self) -> str | None:
        return self._status

    def total(self) -> float:
        return sum((item.final_price() for item in self._items), 0.0)

    def set_status(self, status: str) -> None:
        self._status = status
        self._fanout.broadcast(status)

    def restore_status(self, status: str | None) -> None:
        """Put back an earlier status without telling observers."""
        self._status = status

    def __repr__(self) -> str:
        return f"Order(id={self.id!r}, items={len(self._items)}, status={self._status!r})"


__all__ = ("Order", "COMPLETED")
