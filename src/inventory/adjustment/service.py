"""Stock adjustment: applies one change to a product's stock and records it."""

from collections.abc import Callable
from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError

from identity.port import ActorIdentity
from inventory.adjustment.adjustment import UNKNOWN_ACTOR, Adjustment
from inventory.store import Inventory
from inventory.utils.logging import get_logger

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _actor_name(actor) -> str:
    if isinstance(actor, ActorIdentity):
        return actor.email or UNKNOWN_ACTOR
    return actor or UNKNOWN_ACTOR


class AdjustmentService:
    """Changes stock levels.

    Every call runs under the product's lock, so the captured previous stock,
    the catalog update and the ledger entry of one adjustment never interleave
    with another adjustment of the same product.
    """

    def __init__(self, inventory: Inventory, clock: Callable[[], datetime] = _utcnow):
        self.inventory = inventory
        self._clock = clock

    def adjust_stock(
        self,
        product_id,
        new_stock: int,
        adjustment_type,
        reason,
        notes: str | None = None,
        actor: ActorIdentity | str | None = None,
    ) -> Adjustment:
        catalog = self.inventory.catalog

        try:
            catalog.find_by_id(product_id)
        except ObjectNotFoundError:
            logger.warning("stock_adjustment_rejected", product_id=str(product_id), cause="product_not_found")
            raise

        with self.inventory.locks.for_product(product_id):
            product = catalog.find_by_id(product_id)
            now = self._clock()

            adjustment = Adjustment.record(
                product,
                new_stock=new_stock,
                adjustment_type=adjustment_type,
                reason=reason,
                notes=notes,
                adjusted_by=_actor_name(actor),
                adjusted_at=now,
            )
            product = catalog.apply_stock_change(product_id, new_stock, changed_at=now)
            self.inventory.ledger.append(adjustment)

        logger.info(
            "stock_adjusted",
            product_id=adjustment.product_id,
            sku=adjustment.product_sku,
            previous_stock=adjustment.previous_stock,
            new_stock=adjustment.new_stock,
            status=product.status,
            adjustment_type=adjustment.adjustment_type,
            reason=adjustment.reason,
            adjusted_by=adjustment.adjusted_by,
        )
        return adjustment
