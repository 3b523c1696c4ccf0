"""
Core types for storefront.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Callable

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Lazy Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Lazy[T, E] = LazyCoroResult[T, E]
"""Lazy async computation that may fail."""

# ═══════════════════════════════════════════════════════════════════════════════
# Output Sink
# ═══════════════════════════════════════════════════════════════════════════════

type Emit = Callable[[str], None]
"""Where user-facing lines go. `print` in the CLI, a list in tests."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Type aliases
    "Lazy",
    "Emit",
)
