"""Inventory store: the catalog and ledger that live for the life of the process."""

import threading
from dataclasses import dataclass, field

from inventory.adjustment.ledger import AdjustmentLedger
from inventory.product.catalog import ProductCatalog


class ProductLocks:
    """One mutex per product id, created on first use."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def for_product(self, product_id) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(str(product_id), threading.Lock())


@dataclass
class Inventory:
    """Owns one product catalog, one adjustment ledger and the per-product write locks.

    Build one per process (or per test) and hand it to the services.
    """

    catalog: ProductCatalog = field(default_factory=ProductCatalog)
    ledger: AdjustmentLedger = field(default_factory=AdjustmentLedger)
    locks: ProductLocks = field(default_factory=ProductLocks)


def build_inventory(products=()) -> Inventory:
    return Inventory(catalog=ProductCatalog(products))
