"""Availability status of a product, derived from its stock counters."""

from enum import Enum


class ProductStatus(Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    DISCONTINUED = "discontinued"


def derive_status(current_stock: int, min_stock: int) -> ProductStatus:
    """Classify a stock snapshot.

    Empty shelves are out of stock, anything at or below the minimum is low,
    everything else is in stock. ``DISCONTINUED`` is never derived; it is
    assigned from outside and left alone by stock changes.
    """
    if current_stock == 0:
        return ProductStatus.OUT_OF_STOCK
    if current_stock <= min_stock:
        return ProductStatus.LOW_STOCK
    return ProductStatus.IN_STOCK
