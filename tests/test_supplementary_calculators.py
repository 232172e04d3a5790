"""Tests for packaging handling, quotation scaling, and cost history."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from hanuram_costing.costs import (
    ItemChangeType,
    PackagingHandlingCalculator,
    PackagingHandlingInputs,
    QuotationScaler,
    RecipeCostSnapshot,
    compare_snapshots,
    latest_two,
    latest_vendor_prices,
)
from hanuram_costing.models import Recipe, RecipeItem, VendorPrice


@pytest.fixture
def handling_inputs():
    """Consumable rates for a 10 kg shipper."""
    return PackagingHandlingInputs(
        shipper_box_cost=50,
        shipper_box_qty=10,
        hygiene_cost_per_unit=2,
        hygiene_qty_per_kg=0.5,
        scavenger_cost_per_unit=1,
        scavenger_qty_per_kg=2,
        map_cost_per_kg=3,
        smaller_size_packaging_cost=1.5,
        mono_carton_cost_per_unit=4,
        mono_carton_qty_per_kg=1,
        sticker_cost_per_unit=0.5,
        sticker_qty_per_kg=2,
        butter_paper_cost_per_kg=100,
        butter_paper_qty_per_kg=0.01,
        excess_weight_per_kg=0.02,
        rmc_cost_per_kg=200,
        wastage_percentage=10,
    )


def _snapshot(total, prices, captured_at):
    return RecipeCostSnapshot(
        recipe_id="REC1",
        captured_at=captured_at,
        total_raw_material_cost=total,
        items=[
            RecipeItem(raw_material_id=rm_id, quantity=1, price=price)
            for rm_id, price in prices.items()
        ],
    )


class TestPackagingHandlingCalculator:
    """Tests for PackagingHandlingCalculator."""

    def test_components(self, handling_inputs):
        result = PackagingHandlingCalculator().calculate(handling_inputs)

        assert result.shipper_box_cost_per_kg == pytest.approx(5.0)
        assert result.hygiene_cost_per_kg == pytest.approx(1.0)
        assert result.scavenger_cost_per_kg == pytest.approx(2.0)
        assert result.map_cost_per_kg == pytest.approx(3.0)
        assert result.smaller_size_packaging_cost_per_kg == pytest.approx(1.5)
        assert result.mono_carton_cost_per_kg == pytest.approx(4.0)
        assert result.sticker_cost_per_kg == pytest.approx(1.0)
        assert result.butter_paper_cost_per_kg == pytest.approx(1.0)
        assert result.excess_stock_cost_per_kg == pytest.approx(4.0)

    def test_wastage_applies_to_consumables_only(self, handling_inputs):
        """10% of (5 + 1 + 2 + 4 + 1 + 1); MAP, small packs and excess excluded."""
        result = PackagingHandlingCalculator().calculate(handling_inputs)
        assert result.material_wastage_cost_per_kg == pytest.approx(1.4)

    def test_total(self, handling_inputs):
        result = PackagingHandlingCalculator().calculate(handling_inputs)
        assert result.total_packaging_handling_cost == pytest.approx(23.9)

    def test_zero_shipper_quantity(self, handling_inputs):
        """A box holding 0 kg contributes nothing rather than dividing by zero."""
        inputs = handling_inputs.model_copy(update={"shipper_box_qty": 0})
        result = PackagingHandlingCalculator().calculate(inputs)
        assert result.shipper_box_cost_per_kg == 0
        assert result.total_packaging_handling_cost == pytest.approx(18.4)

    def test_empty_inputs(self):
        result = PackagingHandlingCalculator().calculate(PackagingHandlingInputs())
        assert result.total_packaging_handling_cost == 0

    def test_rounded(self):
        inputs = PackagingHandlingInputs(shipper_box_cost=10, shipper_box_qty=3)
        result = PackagingHandlingCalculator().calculate(inputs).rounded()
        assert result.shipper_box_cost_per_kg == 3.33
        assert result.total_packaging_handling_cost == 3.33

    def test_wastage_above_hundred_rejected(self):
        with pytest.raises(ValidationError):
            PackagingHandlingInputs(wastage_percentage=120)


class TestQuotationScaler:
    """Tests for QuotationScaler."""

    def test_scale_to_required_quantity(self, recipe):
        quotation = QuotationScaler().scale(recipe, required_quantity=250)

        assert quotation.scaling_factor == pytest.approx(2.5)
        assert [line.calculated_quantity for line in quotation.lines] == [
            pytest.approx(150.0),
            pytest.approx(100.0),
        ]
        assert quotation.lines[0].master_quantity == 60.0
        assert quotation.total_recipe_cost == 23750.0
        assert quotation.per_unit_cost == 95.0

    def test_price_override(self, recipe):
        """An overridden line uses the quoted price; others keep the recipe price."""
        quotation = QuotationScaler().scale(recipe, 250, price_overrides={"RM2": 90.0})
        assert quotation.lines[0].unit_price == 100.0
        assert quotation.lines[1].unit_price == 90.0
        assert quotation.total_recipe_cost == 24000.0
        assert quotation.per_unit_cost == 96.0

    def test_zero_required_quantity(self, recipe):
        quotation = QuotationScaler().scale(recipe, 0)
        assert quotation.lines == []
        assert quotation.total_recipe_cost == 0
        assert quotation.per_unit_cost == 0

    def test_zero_batch_size(self):
        recipe = Recipe(
            name="Draft",
            batch_size=0,
            items=[RecipeItem(raw_material_id="RM1", quantity=1, price=10)],
        )
        quotation = QuotationScaler().scale(recipe, 50)
        assert quotation.lines == []
        assert quotation.required_quantity == 50


class TestLatestVendorPrices:
    """Tests for latest_vendor_prices."""

    def test_most_recent_price_wins(self):
        prices = [
            VendorPrice(raw_material_id="RM1", vendor_id="V1", price=100, added_on=datetime(2025, 1, 5)),
            VendorPrice(raw_material_id="RM1", vendor_id="V2", price=104, added_on=datetime(2025, 3, 1)),
            VendorPrice(raw_material_id="RM1", vendor_id="V3", price=98, added_on=datetime(2025, 2, 1)),
            VendorPrice(raw_material_id="RM2", vendor_id="V1", price=80),
        ]
        assert latest_vendor_prices(prices) == {"RM1": 104, "RM2": 80}

    def test_dated_price_beats_undated(self):
        prices = [
            VendorPrice(raw_material_id="RM1", vendor_id="V1", price=100, added_on=datetime(2025, 1, 5)),
            VendorPrice(raw_material_id="RM1", vendor_id="V2", price=90),
        ]
        assert latest_vendor_prices(prices) == {"RM1": 100}

    def test_empty(self):
        assert latest_vendor_prices([]) == {}


class TestPriceHistory:
    """Tests for recipe cost snapshots."""

    def test_compare_snapshots(self):
        previous = _snapshot(1000.0, {"RM1": 10.0, "RM2": 5.0}, datetime(2025, 1, 1))
        current = _snapshot(1100.0, {"RM1": 11.0, "RM2": 5.0}, datetime(2025, 2, 1))

        comparison = compare_snapshots(previous, current)
        assert comparison.cost_change == 100.0
        assert comparison.percent_change == 10.0
        assert comparison.increased is True
        assert len(comparison.item_changes) == 1
        assert comparison.item_changes[0].raw_material_id == "RM1"
        assert comparison.item_changes[0].change_type == ItemChangeType.PRICE
        assert comparison.item_changes[0].change == 1.0

    def test_added_and_removed_items(self):
        previous = _snapshot(500.0, {"RM1": 10.0, "RM2": 6.0}, datetime(2025, 1, 1))
        current = _snapshot(450.0, {"RM1": 10.0, "RM3": 4.0}, datetime(2025, 2, 1))

        comparison = compare_snapshots(previous, current)
        assert comparison.cost_change == -50.0
        assert comparison.increased is False
        assert [(c.raw_material_id, c.change_type) for c in comparison.item_changes] == [
            ("RM2", ItemChangeType.REMOVED),
            ("RM3", ItemChangeType.ADDED),
        ]

    def test_quantity_and_vendor_changes(self):
        previous = RecipeCostSnapshot(
            captured_at=datetime(2025, 1, 1),
            items=[RecipeItem(raw_material_id="RM1", quantity=10, price=8.0, vendor_name="Gupta Traders")],
        )
        current = RecipeCostSnapshot(
            captured_at=datetime(2025, 2, 1),
            items=[
                RecipeItem(raw_material_id="RM1", quantity=20, price=8.0, vendor_name="Shree Agro"),
                RecipeItem(raw_material_id="RM9", raw_material_name="Cardamom", quantity=0.5, price=2400),
            ],
        )

        comparison = compare_snapshots(previous, current)
        quantity = comparison.changes_of(ItemChangeType.QUANTITY)
        vendor = comparison.changes_of(ItemChangeType.VENDOR)
        added = comparison.changes_of(ItemChangeType.ADDED)

        assert len(quantity) == 1
        assert quantity[0].old_value == 10
        assert quantity[0].new_value == 20
        assert quantity[0].change == 10.0
        assert len(vendor) == 1
        assert (vendor[0].old_value, vendor[0].new_value) == ("Gupta Traders", "Shree Agro")
        assert [c.raw_material_name for c in added] == ["Cardamom"]
        assert comparison.changes_of(ItemChangeType.PRICE) == []

    def test_zero_previous_total(self):
        previous = _snapshot(0.0, {}, datetime(2025, 1, 1))
        current = _snapshot(250.0, {}, datetime(2025, 2, 1))
        assert compare_snapshots(previous, current).percent_change == 0

    def test_latest_two_orders_by_capture_time(self):
        oldest = _snapshot(900.0, {}, datetime(2025, 1, 1))
        newest = _snapshot(1200.0, {}, datetime(2025, 3, 1))
        middle = _snapshot(1000.0, {}, datetime(2025, 2, 1))

        comparison = latest_two([newest, oldest, middle])
        assert comparison.previous_total == 1000.0
        assert comparison.current_total == 1200.0
        assert comparison.cost_change == 200.0

    def test_latest_two_needs_two(self):
        assert latest_two([]) is None
        assert latest_two([_snapshot(1.0, {}, datetime(2025, 1, 1))]) is None

    def test_snapshot_of_recipe(self, recipe):
        snapshot = RecipeCostSnapshot.of(recipe, captured_at=datetime(2025, 4, 1))
        assert snapshot.recipe_id == "REC1"
        assert snapshot.captured_at == datetime(2025, 4, 1)
        assert len(snapshot.items) == 2
