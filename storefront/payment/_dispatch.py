"""
Payment dispatch: pick a handler by tag, then charge.
"""

from __future__ import annotations

from kungfu import Result, Ok, Error, LazyCoroResult

from storefront._types import Emit, Lazy
from storefront.errors import CheckoutError, UnsupportedPaymentType
from storefront.payment._types import (
    PaymentKind,
    PaymentHandler,
    CardHandler,
    PayPalHandler,
    Confirmation,
)

_HANDLERS: dict[PaymentKind, type[CardHandler] | type[PayPalHandler]] = {
    PaymentKind.CARD: CardHandler,
    PaymentKind.PAYPAL: PayPalHandler,
}


def parse_kind(tag: str) -> Result[PaymentKind, UnsupportedPaymentType]:
    """Case-insensitive tag → PaymentKind."""
    normalized = tag.strip().lower()
    for kind in PaymentKind:
        if kind.value == normalized:
            return Ok(kind)
    return Error(UnsupportedPaymentType(tag))


def resolve(
    tag: str,
    *,
    emit: Emit = print,
    currency: str = "₹",
) -> Result[PaymentHandler, UnsupportedPaymentType]:
    """
    Handler for `tag`.

    Example:
        match P.resolve("Card"):
            case Ok(handler):
                await handler.charge(100)
            case Error(e):
                print(e.message)
    """
    return parse_kind(tag).map(lambda kind: _HANDLERS[kind](emit=emit, currency=currency))


def dispatch(
    tag: str,
    amount: float,
    *,
    emit: Emit = print,
    currency: str = "₹",
) -> Lazy[Confirmation, CheckoutError]:
    """
    Lazily resolve the handler and charge `amount`.

    Nothing is emitted when the tag is unknown.
    """
    async def impl() -> Result[Confirmation, CheckoutError]:
        match resolve(tag, emit=emit, currency=currency):
            case Ok(handler):
                try:
                    return Ok(await handler.charge(amount))
                except Exception as exc:
                    return Error(CheckoutError.wrap(exc))
            case Error(e):
                return Error(e)

    return LazyCoroResult(impl)


__all__ = ("parse_kind", "resolve", "dispatch")
