"""
Payment: handler factory keyed by a type tag.

    from storefront import payment as P

    result = await P.dispatch("card", 67500)
"""

from __future__ import annotations

from storefront.payment._types import (
    PaymentKind,
    Confirmation,
    format_amount,
    CardHandler,
    PayPalHandler,
    PaymentHandler,
)
from storefront.payment._dispatch import parse_kind, resolve, dispatch

__all__ = (
    "PaymentKind",
    "Confirmation",
    "format_amount",
    "CardHandler",
    "PayPalHandler",
    "PaymentHandler",
    "parse_kind",
    "resolve",
    "dispatch",
)
