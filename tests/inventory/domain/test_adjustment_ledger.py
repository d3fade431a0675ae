"""Tests for the append-only adjustment ledger."""

from datetime import UTC, datetime, timedelta

from inventory.adjustment.adjustment import Adjustment, AdjustmentReason, AdjustmentType
from inventory.adjustment.ledger import AdjustmentLedger

T0 = datetime(2024, 6, 10, 12, 0, tzinfo=UTC)


def _entry(product, new_stock, adjusted_at, notes=None):
    return Adjustment.record(
        product,
        new_stock=new_stock,
        adjustment_type=AdjustmentType.CORRECTION,
        reason=AdjustmentReason.INVENTORY_COUNT,
        notes=notes,
        adjusted_at=adjusted_at,
    )


class TestAdjustmentLedger:
    def test_starts_empty(self):
        ledger = AdjustmentLedger()
        assert len(ledger) == 0
        assert ledger.history_for("1") == []

    def test_append_counts_entries(self, make_product):
        ledger = AdjustmentLedger()
        product = make_product(product_id="1")
        ledger.append(_entry(product, 10, T0))
        ledger.append(_entry(product, 20, T0 + timedelta(seconds=1)))
        assert len(ledger) == 2

    def test_history_is_newest_first(self, make_product):
        ledger = AdjustmentLedger()
        product = make_product(product_id="1")
        for offset, stock in enumerate([140, 130, 120]):
            ledger.append(_entry(product, stock, T0 + timedelta(minutes=offset)))

        assert [entry.new_stock for entry in ledger.history_for("1")] == [120, 130, 140]

    def test_history_sorted_even_when_appended_out_of_order(self, make_product):
        ledger = AdjustmentLedger()
        product = make_product(product_id="1")
        ledger.append(_entry(product, 1, T0 + timedelta(minutes=5)))
        ledger.append(_entry(product, 2, T0))
        ledger.append(_entry(product, 3, T0 + timedelta(minutes=10)))

        assert [entry.new_stock for entry in ledger.history_for("1")] == [3, 1, 2]

    def test_equal_timestamps_keep_append_order(self, make_product):
        ledger = AdjustmentLedger()
        product = make_product(product_id="1")
        for note in ("first", "second", "third"):
            ledger.append(_entry(product, 5, T0, notes=note))

        assert [entry.notes for entry in ledger.history_for("1")] == ["first", "second", "third"]

    def test_history_scoped_to_product(self, make_product):
        ledger = AdjustmentLedger()
        keyboard = make_product(product_id="1", sku="ELEC-001")
        chair = make_product(product_id="2", sku="FURN-042")
        ledger.append(_entry(keyboard, 10, T0))
        ledger.append(_entry(chair, 20, T0))
        ledger.append(_entry(keyboard, 30, T0 + timedelta(seconds=1)))

        assert [entry.new_stock for entry in ledger.history_for("1")] == [30, 10]
        assert [entry.new_stock for entry in ledger.history_for(2)] == [20]

    def test_history_is_a_copy(self, make_product):
        ledger = AdjustmentLedger()
        ledger.append(_entry(make_product(product_id="1"), 10, T0))

        history = ledger.history_for("1")
        history.clear()
        assert len(ledger.history_for("1")) == 1

    def test_editing_a_history_entry_leaves_ledger_alone(self, make_product):
        ledger = AdjustmentLedger()
        ledger.append(_entry(make_product(product_id="1"), 10, T0))

        entry = ledger.history_for("1")[0]
        entry.adjusted_by = "someone-else"
        entry.new_stock = 999

        stored = ledger.history_for("1")[0]
        assert stored.adjusted_by == "unknown"
        assert stored.new_stock == 10

    def test_editing_the_appended_adjustment_leaves_ledger_alone(self, make_product):
        ledger = AdjustmentLedger()
        adjustment = _entry(make_product(product_id="1"), 10, T0)
        ledger.append(adjustment)

        adjustment.notes = "rewritten"

        assert ledger.history_for("1")[0].notes is None
