"""
Checkout errors.

Every failure carries a stable `code` and a human `message`. Inside workflows
they travel as `Error(...)` values; in the driver they are raised.
"""

from __future__ import annotations


class CheckoutError(Exception):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @classmethod
    def wrap(cls, exc: Exception) -> CheckoutError:
        """Pass checkout errors through, wrap anything else as UNEXPECTED."""
        if isinstance(exc, CheckoutError):
            return exc
        return CheckoutError("UNEXPECTED", f"{type(exc).__name__}: {exc}")


class UnknownProduct(CheckoutError):
    def __init__(self, product_id: object) -> None:
        super().__init__("PRODUCT_NOT_FOUND", f"Product {product_id} not found")
        self.product_id = product_id


class UnsupportedPaymentType(CheckoutError):
    def __init__(self, tag: str) -> None:
        super().__init__("UNSUPPORTED_PAYMENT", f"Invalid payment type: {tag!r}")
        self.tag = tag


class WorkflowInterrupted(CheckoutError):
    def __init__(self, order_id: str) -> None:
        super().__init__("INTERRUPTED", f"Order {order_id} interrupted while processing")
        self.order_id = order_id


class InvalidDiscount(CheckoutError):
    def __init__(self, percent: float) -> None:
        super().__init__("INVALID_DISCOUNT", f"Discount must be within 0-100%, got {percent}")
        self.percent = percent


__all__ = (
    "CheckoutError",
    "UnknownProduct",
    "UnsupportedPaymentType",
    "WorkflowInterrupted",
    "InvalidDiscount",
)
