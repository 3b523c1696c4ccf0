"""
Notify: observers of order status changes.

    from storefront import notify as N

    fanout = N.Fanout()
    fanout.register(N.EmailNotifier())
    fanout.broadcast("COMPLETED")
"""

from __future__ import annotations

from storefront.notify._types import Observer, EmailNotifier, SmsNotifier
from storefront.notify._fanout import Fanout

__all__ = ("Observer", "EmailNotifier", "SmsNotifier", "Fanout")
