"""Adjustment aggregate: one immutable record of a change to a product's stock.

The product's id, SKU and name are copied onto the record when it is written,
so the history stays readable after the product is renamed or removed.
"""

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean.fields import DateTime, Identifier, Integer, String, Text

from inventory.domain import inventory

UNKNOWN_ACTOR = "unknown"


class AdjustmentType(Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    CORRECTION = "correction"
    TRANSFER_IN = "transfer_in"
    TRANSFER_OUT = "transfer_out"


class AdjustmentReason(Enum):
    RECEIVED_SHIPMENT = "received_shipment"
    SOLD = "sold"
    DAMAGED = "damaged"
    LOST = "lost"
    RETURNED = "returned"
    INVENTORY_COUNT = "inventory_count"
    TRANSFER = "transfer"
    OTHER = "other"


@inventory.aggregate
class Adjustment:
    """What happened to a product's stock, why, and who did it."""

    product_id = Identifier(required=True)
    product_sku = String(required=True, max_length=50)
    product_name = String(required=True, max_length=255)
    previous_stock = Integer(required=True, min_value=0)
    new_stock = Integer(required=True, min_value=0)
    adjustment_type = String(required=True, choices=AdjustmentType)
    reason = String(required=True, choices=AdjustmentReason)
    notes = Text()
    adjusted_by = Text(default=UNKNOWN_ACTOR)
    adjusted_at = DateTime(required=True)

    @classmethod
    def record(
        cls,
        product,
        new_stock,
        adjustment_type,
        reason,
        notes=None,
        adjusted_by=None,
        adjusted_at=None,
    ):
        """Write down a change against ``product`` as it looks before the change."""
        return cls(
            id=str(uuid4()),
            product_id=str(product.id),
            product_sku=product.sku,
            product_name=product.name,
            previous_stock=product.current_stock,
            new_stock=new_stock,
            adjustment_type=adjustment_type.value if isinstance(adjustment_type, AdjustmentType) else adjustment_type,
            reason=reason.value if isinstance(reason, AdjustmentReason) else reason,
            notes=notes,
            adjusted_by=adjusted_by or UNKNOWN_ACTOR,
            adjusted_at=adjusted_at or datetime.now(UTC),
        )

    @property
    def quantity_change(self) -> int:
        return self.new_stock - self.previous_stock

    def snapshot(self):
        """Detached copy with the same identity and field values."""
        return Adjustment(
            id=self.id,
            product_id=self.product_id,
            product_sku=self.product_sku,
            product_name=self.product_name,
            previous_stock=self.previous_stock,
            new_stock=self.new_stock,
            adjustment_type=self.adjustment_type,
            reason=self.reason,
            notes=self.notes,
            adjusted_by=self.adjusted_by,
            adjusted_at=self.adjusted_at,
        )
