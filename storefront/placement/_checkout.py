"""
Checkout workflow: settle → charge → complete.

Uses storefront.workflow so a payment is voided when a later step fails:
1. Wait the simulated processing time, compute the total
2. Resolve the payment handler and charge the total
3. Mark the order COMPLETED (observers are notified)
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from kungfu import Result, Ok, Error

from storefront import payment as P
from storefront import workflow as W
from storefront._types import Emit
from storefront.errors import CheckoutError, WorkflowInterrupted
from storefront.order import Order, COMPLETED


@dataclass(frozen=True, slots=True)
class Receipt:
    """Value of a completed checkout."""

    order_id: str
    total: float
    confirmation: P.Confirmation


async def settle(order: Order, delay: float) -> float:
    """Simulated processing time, then the order total."""
    try:
        await asyncio.sleep(delay)
    except asyncio.CancelledError as exc:
        raise WorkflowInterrupted(order.id) from exc
    return order.total()


def charge_step(
    tag: str,
    total: float,
    *,
    emit: Emit,
    currency: str,
) -> W.Step[P.Confirmation, CheckoutError]:
    """Charge step; its compensator voids the charge with the same handler."""
    async def void(confirmation: P.Confirmation) -> None:
        match P.resolve(confirmation.kind.value, emit=emit, currency=currency):
            case Ok(handler):
                await handler.void(confirmation)
            case Error(e):
                raise e

    return W.step(
        action=P.dispatch(tag, total, emit=emit, currency=currency),
        compensate=void,
    )


def complete_step(order: Order, confirmation: P.Confirmation) -> W.Step[Receipt, CheckoutError]:
    """
    Mark the order COMPLETED.

    A failing observer fails this step; the earlier status is put back so an
    order whose charge gets voided never reads COMPLETED.
    """
    async def impl() -> Receipt:
        previous = order.status
        try:
            order.set_status(COMPLETED)
        except Exception:
            order.restore_status(previous)
            raise
        return Receipt(order.id, confirmation.amount, confirmation)

    return W.from_async(impl, on_error=CheckoutError.wrap)


def checkout(
    order: Order,
    tag: str,
    *,
    delay: float,
    emit: Emit = print,
    currency: str = "₹",
) -> W.Then[P.Confirmation, Receipt, CheckoutError, CheckoutError]:
    """
    Build (not run) the checkout chain for one order.

    Example:
        match await W.run_chain(checkout(order, "card", delay=0)):
            case Ok(r):
                print(r.value.total)
            case Error(e):
                print(e.error.message)
    """
    return (
        W.from_async(lambda: settle(order, delay), on_error=CheckoutError.wrap)
        .then(lambda total: charge_step(tag, total, emit=emit, currency=currency))
        .then(lambda confirmation: complete_step(order, confirmation))
    )


async def run_checkout(
    order: Order,
    tag: str,
    *,
    delay: float,
    emit: Emit = print,
    currency: str = "₹",
) -> Result[W.WorkflowResult[Receipt], W.WorkflowError[CheckoutError]]:
    return await W.run_chain(checkout(order, tag, delay=delay, emit=emit, currency=currency))


__all__ = ("Receipt", "settle", "charge_step", "complete_step", "checkout", "run_checkout")
