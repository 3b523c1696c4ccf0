"""
Workflow execution with automatic rollback.
"""

from __future__ import annotations

from kungfu import Result, Ok, Error

from storefront._log import get_logger
from storefront.workflow._types import (
    Step,
    Flow,
    WorkflowResult,
    WorkflowError,
    Compensator,
)

log = get_logger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Recorded Compensator
# ═══════════════════════════════════════════════════════════════════════════════

type RecordedCompensator[T] = tuple[T, Compensator[T]]

# ═══════════════════════════════════════════════════════════════════════════════
# run_step(): Execute single step
# ═══════════════════════════════════════════════════════════════════════════════

async def run_step[T, E](
    step: Step[T, E],
    compensators: list[RecordedCompensator[T]],
) -> Result[T, E]:
    """Execute single step, recording compensator on success."""
    result = await step.action
    match result:
        case Ok(value):
            if step.compensate is not None:
                compensators.append((value, step.compensate))
            return Ok(value)
        case Error(e):
            return Error(e)


# ═══════════════════════════════════════════════════════════════════════════════
# run_compensators(): Rollback
# ═══════════════════════════════════════════════════════════════════════════════

async def run_compensators[T](
    compensators: list[RecordedCompensator[T]],
) -> tuple[int, int]:
    """Run compensators in reverse. Returns (run, failed)."""
    comp_run = 0
    comp_failed = 0

    for value, comp in reversed(compensators):
        try:
            await comp(value)
            comp_run += 1
        except Exception as exc:
            comp_failed += 1
            log.warning("workflow.compensation_failed", error=str(exc), exc_type=type(exc).__name__)

    return comp_run, comp_failed


async def _rollback[E](
    error: E,
    step_failed: int,
    compensators: list[RecordedCompensator[object]],
) -> Error[WorkflowError[E]]:
    comp_run, comp_failed = await run_compensators(compensators)
    return Error(WorkflowError(
        error=error,
        step_failed=step_failed,
        compensators_run=comp_run,
        compensators_failed=comp_failed,
        rollback_complete=comp_failed == 0,
    ))


# ═══════════════════════════════════════════════════════════════════════════════
# run_chain(): Execute a flow
# ═══════════════════════════════════════════════════════════════════════════════

async def run_chain[T, E](
    chain: Flow[T, E],
) -> Result[WorkflowResult[T], WorkflowError[E]]:
    """
    Execute a lone step or a chain of steps in order.

    Each continuation receives the previous step's value and returns the
    next step. On any failure, compensators of the steps that already
    succeeded run in reverse.

    Example:
        from storefront import workflow as W

        flow = (
            W.from_async(lambda: settle(order), on_error=CheckoutError.wrap)
            .then(lambda total: W.step(P.dispatch(tag, total), compensate=void))
            .then(lambda _: W.from_async(complete, on_error=CheckoutError.wrap))
        )

        match await W.run_chain(flow):
            case Ok(r):
                print(f"Done in {r.steps_executed} steps")
            case Error(e):
                print(f"Failed at step {e.step_failed}")
    """
    first, continuations = chain.flatten()
    compensators: list[RecordedCompensator[object]] = []
    steps = 1

    result = await run_step(first, compensators)

    for f in continuations:
        match result:
            case Ok(value):
                result = await run_step(f(value), compensators)
                steps += 1
            case Error(_):
                break

    match result:
        case Ok(final_value):
            return Ok(WorkflowResult(
                value=final_value,
                steps_executed=steps,
                compensators_recorded=len(compensators),
            ))

        case Error(e):
            return await _rollback(e, steps, compensators)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("run_chain", "run_step", "run_compensators")
