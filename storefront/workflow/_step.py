"""
Building checkout steps.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable
from kungfu import LazyCoroResult
from combinators import lift as L

from storefront.workflow._types import Step, Compensator

# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def step[T, E](
    action: LazyCoroResult[T, E],
    compensate: Compensator[T] | None = None,
) -> Step[T, E]:
    """
    Wrap an action that already reports failure as a Result.

    The charge step is built this way: `payment.dispatch` returns
    `Error(UnsupportedPaymentType)` itself, and the compensator voids the
    Confirmation it produced.

        W.step(P.dispatch(tag, total), compensate=void)
    """
    return Step(action=action, compensate=compensate)


def from_async[T, E](
    action: Callable[[], Awaitable[T]],
    on_error: Callable[[Exception], E],
    compensate: Compensator[T] | None = None,
) -> Step[T, E]:
    """
    Wrap a plain coroutine that signals failure by raising.

    Exceptions become `Error(on_error(exc))`; checkout passes
    `CheckoutError.wrap` so an observer blowing up during
    `set_status` lands as an UNEXPECTED CheckoutError.
    """
    return Step(
        action=L.catching_async(action, on_error=on_error),
        compensate=compensate,
    )


__all__ = ("step", "from_async")
