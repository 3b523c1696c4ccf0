"""
Order: aggregate of items whose status changes are observed.

    from storefront import order as O

    order = O.Order()
    order.add_item(item)
    order.add_observer(N.EmailNotifier())
    order.set_status(O.COMPLETED)
"""

from __future__ import annotations

from storefront.order._order import Order, COMPLETED

__all__ = ("Order", "COMPLETED")
