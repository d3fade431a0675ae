"""Pydantic request/response schemas for the Inventory API.

These are external contracts (anti-corruption layer), separate from the
Protean aggregates behind them.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from inventory.adjustment.adjustment import Adjustment, AdjustmentReason, AdjustmentType
from inventory.product.product import Product, ProductCategory, StockUnit
from inventory.product.status import ProductStatus


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class LocationSchema(BaseModel):
    zone: str
    aisle: str
    rack: str
    shelf: str


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AdjustStockRequest(BaseModel):
    new_stock: int = Field(ge=0)
    adjustment_type: AdjustmentType
    reason: AdjustmentReason
    notes: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ProductResponse(BaseModel):
    id: str
    sku: str
    name: str
    description: str | None = None
    category: ProductCategory
    unit: StockUnit
    current_stock: int
    min_stock: int
    max_stock: int
    location: LocationSchema | None = None
    price: float
    status: ProductStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        location = None
        if product.location:
            location = LocationSchema(
                zone=product.location.zone,
                aisle=product.location.aisle,
                rack=product.location.rack,
                shelf=product.location.shelf,
            )
        return cls(
            id=str(product.id),
            sku=product.sku,
            name=product.name,
            description=product.description,
            category=product.category,
            unit=product.unit,
            current_stock=product.current_stock,
            min_stock=product.min_stock,
            max_stock=product.max_stock,
            location=location,
            price=product.price,
            status=product.status,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class AdjustmentResponse(BaseModel):
    id: str
    product_id: str
    product_sku: str
    product_name: str
    previous_stock: int
    new_stock: int
    adjustment_type: AdjustmentType
    reason: AdjustmentReason
    notes: str | None = None
    adjusted_by: str
    adjusted_at: datetime

    @classmethod
    def from_adjustment(cls, adjustment: Adjustment) -> "AdjustmentResponse":
        return cls(
            id=str(adjustment.id),
            product_id=str(adjustment.product_id),
            product_sku=adjustment.product_sku,
            product_name=adjustment.product_name,
            previous_stock=adjustment.previous_stock,
            new_stock=adjustment.new_stock,
            adjustment_type=adjustment.adjustment_type,
            reason=adjustment.reason,
            notes=adjustment.notes,
            adjusted_by=adjustment.adjusted_by,
            adjusted_at=adjustment.adjusted_at,
        )
