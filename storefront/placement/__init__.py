"""
Placement: background checkout with an explicit drain.

    from storefront import placement as PL

    placement = PL.OrderPlacement(settings)
    placement.place(order, "card")
    await placement.shutdown()
"""

from __future__ import annotations

from storefront.placement._checkout import (
    Receipt,
    settle,
    charge_step,
    complete_step,
    checkout,
    run_checkout,
)
from storefront.placement._service import PlacementOutcome, OrderPlacement

__all__ = (
    "Receipt",
    "settle",
    "charge_step",
    "complete_step",
    "checkout",
    "run_checkout",
    "PlacementOutcome",
    "OrderPlacement",
)
