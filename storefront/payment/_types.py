"""
Payment types: a closed set of handlers selected by tag.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from storefront._types import Emit


class PaymentKind(Enum):
    CARD = "card"
    PAYPAL = "paypal"


@dataclass(frozen=True, slots=True)
class Confirmation:
    kind: PaymentKind
    amount: float
    reference: str


def format_amount(amount: float, currency: str = "₹") -> str:
    return f"{currency}{amount:.2f}"


_references = itertools.count(1)

# ═══════════════════════════════════════════════════════════════════════════════
# Handlers
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class _Handler:
    """Simulated processor: prints a confirmation, never talks to a network."""

    emit: Emit = field(default=print)
    currency: str = "₹"

    kind: ClassVar[PaymentKind]
    label: ClassVar[str]
    prefix: ClassVar[str]

    async def charge(self, amount: float) -> Confirmation:
        self.emit(f"{self.label} Payment Successful: {format_amount(amount, self.currency)}")
        return Confirmation(self.kind, amount, f"{self.prefix}-{next(_references):04d}")

    async def void(self, confirmation: Confirmation) -> None:
        """Compensation for `charge`."""
        self.emit(
            f"{self.label} Payment Voided: {format_amount(confirmation.amount, self.currency)}"
            f" ({confirmation.reference})"
        )


@dataclass(frozen=True, slots=True)
class CardHandler(_Handler):
    kind: ClassVar[PaymentKind] = PaymentKind.CARD
    label: ClassVar[str] = "Credit Card"
    prefix: ClassVar[str] = "CARD"


@dataclass(frozen=True, slots=True)
class PayPalHandler(_Handler):
    kind: ClassVar[PaymentKind] = PaymentKind.PAYPAL
    label: ClassVar[str] = "PayPal"
    prefix: ClassVar[str] = "PP"


type PaymentHandler = CardHandler | PayPalHandler


__all__ = (
    "PaymentKind",
    "Confirmation",
    "format_amount",
    "CardHandler",
    "PayPalHandler",
    "PaymentHandler",
)
