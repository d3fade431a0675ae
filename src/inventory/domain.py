"""Inventory bounded context: product stock levels and their adjustment ledger.

Tracks how many units of each product sit in the warehouse, classifies each
product's availability, and keeps an append-only audit trail of every stock
change together with the actor who made it.
"""

from protean.domain import Domain

from inventory.utils.logging import configure_logging, get_logger

configure_logging(log_dir="logs", log_file_prefix="warehouse")

logger = get_logger(__name__)

# Domain Composition Root
inventory = Domain(name="inventory")
