"""Read-side access to products and their adjustment history."""

from inventory.adjustment.adjustment import Adjustment
from inventory.product.catalog import SearchFilter
from inventory.product.product import Product
from inventory.store import Inventory


class QueryService:
    """Looks things up against live state; nothing is cached."""

    def __init__(self, inventory: Inventory):
        self.inventory = inventory

    def search(self, search_filter: SearchFilter | None = None) -> list[Product]:
        return self.inventory.catalog.search(search_filter)

    def get_by_id(self, product_id) -> Product:
        return self.inventory.catalog.find_by_id(product_id)

    def get_by_sku(self, sku: str) -> Product:
        return self.inventory.catalog.find_by_sku(sku)

    def history(self, product_id) -> list[Adjustment]:
        """Adjustments for a product, most recent first. Unknown ids have no history."""
        return self.inventory.ledger.history_for(product_id)
