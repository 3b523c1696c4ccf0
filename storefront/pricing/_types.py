"""
Pricing types: adjustments are pure functions of the base price.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from storefront.errors import InvalidDiscount


class Adjustment(Protocol):
    """Turns a base price into a final price."""

    def __call__(self, base: float, /) -> float: ...


@dataclass(frozen=True, slots=True)
class PercentageDiscount:
    """Take `percent` off the base price."""

    percent: float

    def __post_init__(self) -> None:
        if not 0 <= self.percent <= 100:
            raise InvalidDiscount(self.percent)

    def __call__(self, base: float, /) -> float:
        return base - (base * self.percent / 100)


__all__ = ("Adjustment", "PercentageDiscount")
