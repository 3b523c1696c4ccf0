"""
Catalog: the static set of purchasable items.

    from storefront import catalog as K

    catalog = K.Catalog.seeded()
    laptop = catalog.require(1)
"""

from __future__ import annotations

from storefront.catalog._types import Item
from storefront.catalog._catalog import Catalog, DEFAULT_ITEMS

__all__ = ("Item", "Catalog", "DEFAULT_ITEMS")
