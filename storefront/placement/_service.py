"""
Order placement: run checkouts in the background on a small pool.

`place()` never blocks and never reports back; what happened to each order is
captured at the task boundary as a `PlacementOutcome` and logged. `drain()`
is the only way to wait for it.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from kungfu import Result, Ok, Error

from storefront import workflow as W
from storefront._log import get_logger
from storefront._types import Emit
from storefront.config import Settings
from storefront.errors import CheckoutError, WorkflowInterrupted
from storefront.order import Order
from storefront.placement._checkout import Receipt, run_checkout

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PlacementOutcome:
    order_id: str
    payment: str
    result: Result[W.WorkflowResult[Receipt], W.WorkflowError[CheckoutError]]

    @property
    def succeeded(self) -> bool:
        return isinstance(self.result, Ok)


class OrderPlacement:
    """
    Fire-and-forget checkout scheduler.

    At most `settings.pool_size` workflows run at once; the rest wait for a
    slot. Each order must not be touched by the caller while its workflow runs.
    """

    def __init__(self, settings: Settings | None = None, *, emit: Emit = print) -> None:
        self._settings = settings or Settings()
        self._emit = emit
        self._slots = asyncio.Semaphore(self._settings.pool_size)
        self._tasks: set[asyncio.Task[None]] = set()
        self._outcomes: list[PlacementOutcome] = []
        self._running = 0
        self._closed = False

    # ─────────────────────────────────────────────────────────────────────────
    # Scheduling
    # ─────────────────────────────────────────────────────────────────────────

    def place(self, order: Order, payment: str) -> None:
        """Schedule checkout of `order`; requires a running event loop."""
        if self._closed:
            raise RuntimeError("OrderPlacement is shut down")
        task = asyncio.get_running_loop().create_task(
            self._place(order, payment),
            name=f"place-{order.id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        log.info("order.scheduled", order_id=order.id, payment=payment)

    async def _place(self, order: Order, payment: str) -> None:
        try:
            async with self._slots:
                self._running += 1
                try:
                    result = await self._checkout(order, payment)
                finally:
                    self._running -= 1
        except asyncio.CancelledError:
            self._record(order, payment, Error(W.WorkflowError(
                error=WorkflowInterrupted(order.id),
                step_failed=0,
                compensators_run=0,
                compensators_failed=0,
                rollback_complete=True,
            )))
            raise
        self._record(order, payment, result)

    async def _checkout(
        self,
        order: Order,
        payment: str,
    ) -> Result[W.WorkflowResult[Receipt], W.WorkflowError[CheckoutError]]:
        self._emit("Processing order...")
        return await run_checkout(
            order,
            payment,
            delay=self._settings.processing_delay,
            emit=self._emit,
            currency=self._settings.currency,
        )

    def _record(
        self,
        order: Order,
        payment: str,
        result: Result[W.WorkflowResult[Receipt], W.WorkflowError[CheckoutError]],
    ) -> None:
        outcome = PlacementOutcome(order.id, payment, result)
        self._outcomes.append(outcome)

        match result:
            case Ok(r):
                self._emit("Order placed successfully!")
                log.info(
                    "order.completed",
                    order_id=outcome.order_id,
                    payment=outcome.payment,
                    total=r.value.total,
                    reference=r.value.confirmation.reference,
                )
            case Error(e):
                self._emit(f"Order failed: {e.error.message}")
                log.warning(
                    "order.failed",
                    order_id=outcome.order_id,
                    payment=outcome.payment,
                    code=e.error.code,
                    error=e.error.message,
                    step=e.step_failed,
                    compensated=e.compensators_run,
                    rollback_complete=e.rollback_complete,
                )

    # ─────────────────────────────────────────────────────────────────────────
    # Draining
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def pending(self) -> int:
        """Scheduled workflows that have not finished yet."""
        return len(self._tasks)

    @property
    def running(self) -> int:
        """Workflows currently holding a pool slot."""
        return self._running

    @property
    def outcomes(self) -> tuple[PlacementOutcome, ...]:
        return tuple(self._outcomes)

    async def drain(self, timeout: float | None = None) -> tuple[PlacementOutcome, ...]:
        """Wait for in-flight workflows (at most `timeout` seconds)."""
        if self._tasks:
            await asyncio.wait(set(self._tasks), timeout=timeout)
        log.info("placement.drained", pending=self.pending, finished=len(self._outcomes))
        return self.outcomes

    async def shutdown(self) -> tuple[PlacementOutcome, ...]:
        """Refuse new work, drain, then cancel whatever is still running."""
        self._closed = True
        await self.drain(self._settings.drain_timeout)
        leftover = set(self._tasks)
        if leftover:
            log.warning("placement.cancelled", count=len(leftover))
            for task in leftover:
                task.cancel()
            await asyncio.gather(*leftover, return_exceptions=True)
        return self.outcomes


__all__ = ("PlacementOutcome", "OrderPlacement")
