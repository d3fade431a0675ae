"""Adjustment ledger: append-only audit trail of stock changes."""

import threading
from collections import defaultdict

from inventory.adjustment.adjustment import Adjustment


class AdjustmentLedger:
    """Keeps every adjustment in the order it was written.

    Entries are never edited or removed. The ledger stores its own copy of
    each appended adjustment and hands out copies, never the stored record.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: list[Adjustment] = []
        self._entries_by_product: dict[str, list[Adjustment]] = defaultdict(list)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def append(self, adjustment: Adjustment) -> None:
        with self._lock:
            entry = adjustment.snapshot()
            self._entries.append(entry)
            self._entries_by_product[str(entry.product_id)].append(entry)

    def history_for(self, product_id) -> list[Adjustment]:
        """Adjustments for one product, most recent first.

        Entries sharing a timestamp stay in the order they were appended.
        """
        with self._lock:
            entries = [entry.snapshot() for entry in self._entries_by_product.get(str(product_id), ())]

        # sorted() is stable, reverse=True included
        return sorted(entries, key=lambda entry: entry.adjusted_at, reverse=True)
