"""
Fan-out: broadcast one status to every registered observer.
"""

from __future__ import annotations

from storefront.notify._types import Observer


class Fanout:
    """
    Ordered list of observers.

    `broadcast` is synchronous and does not isolate targets: the first
    observer that raises stops the broadcast and the exception propagates.
    """

    __slots__ = ("_targets",)

    def __init__(self) -> None:
        self._targets: list[Observer] = []

    def register(self, target: Observer) -> None:
        self._targets.append(target)

    def broadcast(self, status: str) -> None:
        for target in tuple(self._targets):
            target.update(status)

    @property
    def targets(self) -> tuple[Observer, ...]:
        return tuple(self._targets)

    def __len__(self) -> int:
        return len(self._targets)


__all__ = ("Fanout",)
