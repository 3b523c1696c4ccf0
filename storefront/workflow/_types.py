"""
Workflow types.

A checkout is a chain of steps: settle the order, charge it, mark it
COMPLETED. A step that has side effects (a charge) carries the coroutine that
takes them back (a void).
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Callable, Awaitable
from kungfu import LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Compensator
# ═══════════════════════════════════════════════════════════════════════════════

type Compensator[T] = Callable[[T], Awaitable[None]]
"""Takes back a step, given what it produced (e.g. voids a Confirmation)."""

type Continuation[T, U, E] = Callable[[T], Step[U, E]]
"""Builds the next step from the previous step's value."""

# ═══════════════════════════════════════════════════════════════════════════════
# Step
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Step[T, E]:
    """
    One unit of checkout work.

    `action` is not started until the runner awaits it. `compensate` is only
    remembered once the action has produced a value, and only called if a
    later step fails.
    """

    action: LazyCoroResult[T, E]
    compensate: Compensator[T] | None

    def then[U, E2](self, f: Continuation[T, U, E2]) -> Then[T, U, E, E2]:
        return Then(self, f)

    def flatten(self) -> tuple[Step[T, E], list[Continuation[object, object, object]]]:
        return self, []


# ═══════════════════════════════════════════════════════════════════════════════
# Then
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Then[T, U, E, E2]:
    """
    A step followed by a continuation.

    `inner` may itself be a Then, so settle → charge → complete is
    Then(Then(settle, charge), complete).
    """

    inner: Step[T, E] | Then[object, T, object, E]
    f: Continuation[T, U, E2]

    def then[V, E3](self, g: Continuation[U, V, E3]) -> Then[U, V, E2, E3]:
        return Then(self, g)

    def flatten(self) -> tuple[Step[object, object], list[Continuation[object, object, object]]]:
        """First step plus the continuations, in execution order."""
        continuations: list[Continuation[object, object, object]] = []
        node: Step[object, object] | Then[object, object, object, object] = self
        while isinstance(node, Then):
            continuations.append(node.f)
            node = node.inner
        continuations.reverse()
        return node, continuations


type Flow[T, E] = Step[T, E] | Then[object, T, object, E]
"""Anything the runner accepts: a lone step or a chain ending in T."""

# ═══════════════════════════════════════════════════════════════════════════════
# Outcomes
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class WorkflowResult[T]:
    value: T
    steps_executed: int
    compensators_recorded: int


@dataclass(frozen=True, slots=True)
class WorkflowError[E]:
    """
    Why a flow stopped and how much of it was taken back.

    `step_failed` is 1-based; 0 means the flow never started.
    `rollback_complete` is False when any compensator itself raised.
    """

    error: E
    step_failed: int
    compensators_run: int
    compensators_failed: int
    rollback_complete: bool


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Compensator",
    "Continuation",
    "Step",
    "Then",
    "Flow",
    "WorkflowResult",
    "WorkflowError",
)
