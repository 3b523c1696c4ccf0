"""
Pricing: pluggable price adjustments.

    from storefront import pricing as P

    item = item.priced(P.percentage(10))
    item.final_price()
"""

from __future__ import annotations

from storefront.pricing._types import Adjustment, PercentageDiscount
from storefront.pricing._ops import percentage, final_price

__all__ = (
    "Adjustment",
    "PercentageDiscount",
    "percentage",
    "final_price",
)
