"""
Workflow: sequential steps with compensation.

    from storefront import workflow as W

    flow = W.step(action, compensate).then(lambda v: W.step(action2, compensate2))
    result = await W.run_chain(flow)
"""

from __future__ import annotations

from storefront.workflow._types import (
    Compensator,
    Step,
    Then,
    Continuation,
    Flow,
    WorkflowResult,
    WorkflowError,
)
from storefront.workflow._step import step, from_async
from storefront.workflow._run import run_chain

__all__ = (
    "Compensator",
    "Step",
    "Then",
    "Continuation",
    "Flow",
    "WorkflowResult",
    "WorkflowError",
    "step",
    "from_async",
    "run_chain",
)
