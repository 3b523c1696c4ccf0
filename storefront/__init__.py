"""
storefront: design patterns wired into a console checkout.

    from storefront import catalog as K    # Shared item lookup
    from storefront import pricing as P    # Price adjustments
    from storefront import payment as PM   # Handler factory
    from storefront import notify as N     # Status observers
    from storefront import workflow as W   # Steps with compensation
    from storefront import placement as PL # Background checkout
"""

from storefront import catalog
from storefront import pricing
from storefront import payment
from storefront import notify
from storefront import order
from storefront import workflow
from storefront import placement
from storefront.config import Settings
from storefront.errors import (
    CheckoutError,
    UnknownProduct,
    UnsupportedPaymentType,
    WorkflowInterrupted,
    InvalidDiscount,
)

__version__ = "0.1.0"

__all__ = (
    "catalog",
    "pricing",
    "payment",
    "notify",
    "order",
    "workflow",
    "placement",
    "Settings",
    "CheckoutError",
    "UnknownProduct",
    "UnsupportedPaymentType",
    "WorkflowInterrupted",
    "InvalidDiscount",
)
