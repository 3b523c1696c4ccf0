"""
Catalog types.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.pricing import Adjustment, final_price


@dataclass(frozen=True, slots=True)
class Item:
    """A purchasable item. Immutable; `priced()` returns an adjusted copy."""

    id: int
    name: str
    price: float
    adjustment: Adjustment | None = None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Item {self.id}: price must be >= 0, got {self.price}")

    def priced(self, adjustment: Adjustment | None) -> Item:
        return replace(self, adjustment=adjustment)

    def final_price(self) -> float:
        return final_price(self.price, self.adjustment)


__all__ = ("Item",)
