"""
Notification targets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from storefront._types import Emit


class Observer(Protocol):
    def update(self, status: str) -> None: ...


@dataclass(frozen=True, slots=True)
class EmailNotifier:
    emit: Emit = field(default=print)

    def update(self, status: str) -> None:
        self.emit(f"Email Notification: Order {status}")


@dataclass(frozen=True, slots=True)
class SmsNotifier:
    emit: Emit = field(default=print)

    def update(self, status: str) -> None:
        self.emit(f"SMS Notification: Order {status}")


__all__ = ("Observer", "EmailNotifier", "SmsNotifier")
