"""Product catalog: the in-memory collection that owns every product's stock level.

Products are kept in insertion order. The catalog keeps its own copies: what
goes in on ``add`` and what comes out of a lookup or search are detached
snapshots, so no caller can reach a stored product. Stock changes replace the
stored copy under the catalog lock.
"""

import threading
from dataclasses import dataclass
from enum import Enum

from protean.exceptions import ObjectNotFoundError, ValidationError

from inventory.product.product import Product


def _plain(value):
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class SearchFilter:
    """Criteria for narrowing the catalog. Every supplied field must match."""

    text: str | None = None
    category: str | None = None
    status: str | None = None
    min_stock: int | None = None
    max_stock: int | None = None

    def matches(self, product: Product) -> bool:
        if self.text:
            needle = self.text.lower()
            haystacks = (product.name, product.sku, product.description or "")
            if not any(needle in haystack.lower() for haystack in haystacks):
                return False

        if self.category and product.category != _plain(self.category):
            return False

        if self.status and product.status != _plain(self.status):
            return False

        if self.min_stock is not None and product.current_stock < self.min_stock:
            return False

        if self.max_stock is not None and product.current_stock > self.max_stock:
            return False

        return True


class ProductCatalog:
    """Insertion-ordered store of products, keyed by id with a case-insensitive SKU index."""

    def __init__(self, products=()):
        self._lock = threading.RLock()
        self._products: dict[str, Product] = {}
        self._ids_by_sku: dict[str, str] = {}

        for product in products:
            self.add(product)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __iter__(self):
        with self._lock:
            return iter([product.snapshot() for product in self._products.values()])

    def __contains__(self, product_id) -> bool:
        with self._lock:
            return str(product_id) in self._products

    def add(self, product: Product) -> Product:
        product_id = str(product.id)
        sku_key = product.sku.lower()

        with self._lock:
            if product_id in self._products:
                raise ValidationError({"id": [f"Product {product_id} is already registered"]})
            if sku_key in self._ids_by_sku:
                raise ValidationError({"sku": [f"SKU {product.sku} is already registered"]})

            self._products[product_id] = product.snapshot()
            self._ids_by_sku[sku_key] = product_id

        return product

    def _stored(self, product_id) -> Product:
        product = self._products.get(str(product_id))
        if product is None:
            raise ObjectNotFoundError({"_entity": f"Product with id {product_id} does not exist"})
        return product

    def find_by_id(self, product_id) -> Product:
        with self._lock:
            return self._stored(product_id).snapshot()

    def find_by_sku(self, sku: str) -> Product:
        with self._lock:
            product_id = self._ids_by_sku.get(sku.lower())
            if product_id is None:
                raise ObjectNotFoundError({"_entity": f"Product with SKU {sku} does not exist"})
            return self._products[product_id].snapshot()

    def search(self, search_filter: SearchFilter | None = None) -> list[Product]:
        search_filter = search_filter or SearchFilter()
        with self._lock:
            return [product.snapshot() for product in self._products.values() if search_filter.matches(product)]

    def apply_stock_change(self, product_id, new_stock: int, changed_at=None) -> Product:
        """Set a product's stock, re-deriving its status. The only way stock is changed."""
        with self._lock:
            current = self._stored(product_id)

            updated = current.snapshot()
            updated.apply_stock_change(new_stock, changed_at=changed_at)

            self._products[str(current.id)] = updated
            return updated.snapshot()
