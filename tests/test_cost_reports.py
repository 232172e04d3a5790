"""Tests for tabular cost reports."""

import pandas as pd
import pytest

from hanuram_costing.analysis import cost_breakdown_table, op_cost_summary_table, recipe_items_table
from hanuram_costing.costs import CostBreakdownAggregator
from hanuram_costing.models import OpCostEntry, RawMaterial


class TestCostBreakdownTable:
    """Tests for cost_breakdown_table."""

    def test_rows_and_grand_total(self, recipe, production_labour, packing_labour, packaging_costs):
        breakdown = CostBreakdownAggregator().compute_for_recipe(
            recipe, production_labour + packing_labour, packaging_costs
        )
        df = cost_breakdown_table(breakdown)

        assert list(df.columns) == ["component", "total", "cost_per_unit"]
        assert len(df) == 5
        assert df["cost_per_unit"].tolist() == [100.0, 6.0, 2.0, 1.0, 109.0]

        grand = df.iloc[-1]
        assert grand["component"] == "Grand Total"
        assert grand["total"] == 10355.0


class TestOpCostSummaryTable:
    """Tests for op_cost_summary_table."""

    def test_sorted_most_recent_first(self, op_cost_entry):
        january = OpCostEntry(month="January", year=2025)
        december = op_cost_entry.model_copy(update={"month": "December", "year": 2024})
        df = op_cost_summary_table([december, op_cost_entry, january])

        assert df["period"].tolist() == ["March 2025", "January 2025", "December 2024"]

    def test_effective_cost_and_mode(self, op_cost_entry):
        manual = op_cost_entry.model_copy(update={
            "month": "April",
            "use_manual_op_cost": True,
            "manual_op_cost_per_kg": 35.0,
        })
        df = op_cost_summary_table([op_cost_entry, manual])
        by_period = df.set_index("period")

        assert by_period.loc["March 2025", "total_cost"] == 60000.0
        assert by_period.loc["March 2025", "total_production"] == 1500.0
        assert by_period.loc["March 2025", "effective_cost_per_kg"] == 40.0
        assert by_period.loc["March 2025", "mode"] == "auto"
        assert by_period.loc["April 2025", "auto_cost_per_kg"] == 40.0
        assert by_period.loc["April 2025", "effective_cost_per_kg"] == 35.0
        assert by_period.loc["April 2025", "mode"] == "manual"

    def test_empty(self):
        df = op_cost_summary_table([])
        assert df.empty
        assert "effective_cost_per_kg" in df.columns


class TestRecipeItemsTable:
    """Tests for recipe_items_table."""

    def test_names_from_raw_material_list(self, recipe):
        materials = [RawMaterial(id="RM1", code="RM001", name="Cashew W320")]
        df = recipe_items_table(recipe, materials)

        assert df["code"].tolist() == ["RM001", ""]
        assert df["name"].tolist() == ["Cashew W320", "Sugar"]
        assert df["total_price"].sum() == pytest.approx(9500.0)

    def test_empty_recipe(self, recipe):
        df = recipe_items_table(recipe.model_copy(update={"items": []}))
        assert isinstance(df, pd.DataFrame)
        assert df.empty
