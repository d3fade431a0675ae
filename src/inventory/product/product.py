"""Product aggregate: a stocked item and its availability status.

Stock Level Model:
    current_stock: units physically on hand (single source of truth)
    min_stock:     at or below this the product is reported as low on stock
    max_stock:     informational ceiling, never enforced
    status:        derived from current_stock and min_stock; see ``derive_status``
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text, ValueObject

from inventory.domain import inventory
from inventory.product.status import ProductStatus, derive_status


class ProductCategory(Enum):
    ELECTRONICS = "electronics"
    FURNITURE = "furniture"
    CLOTHING = "clothing"
    FOOD = "food"
    TOOLS = "tools"
    PACKAGING = "packaging"
    OTHER = "other"


class StockUnit(Enum):
    PIECES = "pieces"
    BOXES = "boxes"
    PALLETS = "pallets"
    KG = "kg"
    LITERS = "liters"


@inventory.value_object(part_of="Product")
class StorageLocation:
    """Where a product sits: zone, aisle, rack and shelf codes."""

    zone = String(required=True, max_length=20)
    aisle = String(required=True, max_length=20)
    rack = String(required=True, max_length=20)
    shelf = String(required=True, max_length=20)


@inventory.aggregate
class Product:
    """A product held in the warehouse."""

    sku = String(required=True, max_length=50)
    name = String(required=True, max_length=255)
    description = Text()
    category = String(choices=ProductCategory, default=ProductCategory.OTHER.value)
    unit = String(choices=StockUnit, default=StockUnit.PIECES.value)
    current_stock = Integer(default=0, min_value=0)
    min_stock = Integer(default=0, min_value=0)
    max_stock = Integer(default=0, min_value=0)
    location = ValueObject(StorageLocation)
    price = Float(default=0.0, min_value=0.0)
    status = String(choices=ProductStatus, default=ProductStatus.OUT_OF_STOCK.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def status_must_reflect_stock_level(self):
        if self.status == ProductStatus.DISCONTINUED.value:
            return

        expected = derive_status(self.current_stock, self.min_stock).value
        if self.status != expected:
            raise ValidationError(
                {"status": [f"Status '{self.status}' does not match stock level {self.current_stock} (expected '{expected}')"]}
            )

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        sku,
        name,
        description=None,
        category=ProductCategory.OTHER.value,
        unit=StockUnit.PIECES.value,
        current_stock=0,
        min_stock=0,
        max_stock=0,
        location=None,
        price=0.0,
        discontinued=False,
        product_id=None,
        created_at=None,
    ):
        """Register a new product with a status derived from its opening stock.

        ``discontinued`` lets the caller bring in a product that is no longer
        sold; that status then survives every later stock change.
        """
        now = created_at or datetime.now(UTC)
        if discontinued:
            status = ProductStatus.DISCONTINUED.value
        else:
            status = derive_status(current_stock, min_stock).value

        attributes = dict(
            sku=sku,
            name=name,
            description=description,
            category=category,
            unit=unit,
            current_stock=current_stock,
            min_stock=min_stock,
            max_stock=max_stock,
            location=StorageLocation(**location) if isinstance(location, dict) else location,
            price=price,
            status=status,
            created_at=now,
            updated_at=now,
        )
        if product_id is not None:
            attributes["id"] = str(product_id)

        return cls(**attributes)

    # -------------------------------------------------------------------
    # Stock level
    # -------------------------------------------------------------------
    def apply_stock_change(self, new_stock, changed_at=None):
        """Set the on-hand quantity and re-derive the status alongside it.

        A discontinued product keeps its status. Setting the same quantity
        again is allowed and still refreshes ``updated_at``.
        """
        with atomic_change(self):
            self.current_stock = new_stock
            if self.status != ProductStatus.DISCONTINUED.value:
                self.status = derive_status(new_stock, self.min_stock).value
            self.updated_at = changed_at or datetime.now(UTC)

    def snapshot(self):
        """Detached copy carrying the same identity and field values."""
        return Product(
            id=self.id,
            sku=self.sku,
            name=self.name,
            description=self.description,
            category=self.category,
            unit=self.unit,
            current_stock=self.current_stock,
            min_stock=self.min_stock,
            max_stock=self.max_stock,
            location=self.location,
            price=self.price,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
