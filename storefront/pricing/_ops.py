"""
Pricing operations.
"""

from __future__ import annotations

from storefront.pricing._types import Adjustment, PercentageDiscount


def percentage(percent: float) -> PercentageDiscount:
    """
    Percentage discount.

    Example:
        from storefront import pricing as P

        P.percentage(10)(75000)  # 67500.0

    Raises InvalidDiscount for values outside 0-100.
    """
    return PercentageDiscount(percent)


def final_price(base: float, adjustment: Adjustment | None = None) -> float:
    """Apply adjustment if present; otherwise the base price is final."""
    if adjustment is None:
        return base
    return adjustment(base)


__all__ = ("percentage", "final_price")
