"""
Catalog: fixed lookup table of items.

Built once by whoever composes the process and handed to every component that
needs lookups. Nothing mutates it afterwards, so workers can share it freely.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from storefront.catalog._types import Item
from storefront.errors import UnknownProduct

# ═══════════════════════════════════════════════════════════════════════════════
# Default Seed
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_ITEMS: tuple[Item, ...] = (
    Item(1, "Laptop", 75000),
    Item(2, "Mouse", 1200),
    Item(3, "Keyboard", 2500),
    Item(4, "Phone", 50000),
)

# ═══════════════════════════════════════════════════════════════════════════════
# Catalog
# ═══════════════════════════════════════════════════════════════════════════════


class Catalog:
    """Read-only id → Item mapping, iterated in insertion order."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Item]) -> None:
        table: dict[int, Item] = {}
        for item in items:
            if item.id in table:
                raise ValueError(f"Duplicate item id: {item.id}")
            table[item.id] = item
        self._items = MappingProxyType(table)

    @classmethod
    def seeded(cls) -> Catalog:
        return cls(DEFAULT_ITEMS)

    def get(self, item_id: int) -> Item | None:
        return self._items.get(item_id)

    def require(self, item_id: int) -> Item:
        item = self._items.get(item_id)
        if item is None:
            raise UnknownProduct(item_id)
        return item

    def list(self) -> tuple[Item, ...]:
        return tuple(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())


__all__ = ("Catalog", "DEFAULT_ITEMS")
