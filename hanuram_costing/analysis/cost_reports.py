"""Tabular cost reports.

Turns cost results into pandas DataFrames for display or export by the
presentation layer.
"""

from typing import Dict, Iterable, Optional

import pandas as pd

from hanuram_costing.costs.cost_breakdown import CostBreakdown
from hanuram_costing.costs.operational_cost_allocator import OperationalCostAllocator
from hanuram_costing.models.op_cost import OpCostEntry
from hanuram_costing.models.raw_material import RawMaterial
from hanuram_costing.models.recipe import Recipe

BREAKDOWN_COLUMNS = ["component", "total", "cost_per_unit"]

OP_COST_COLUMNS = [
    "period",
    "year",
    "month",
    "total_cost",
    "total_production",
    "auto_cost_per_kg",
    "manual_cost_per_kg",
    "effective_cost_per_kg",
    "mode",
]


def cost_breakdown_table(breakdown: CostBreakdown) -> pd.DataFrame:
    """
    One row per cost component plus a grand total row.

    Args:
        breakdown: Computed cost breakdown

    Returns:
        DataFrame with columns component, total, cost_per_unit
    """
    rows = [
        {"component": label, "total": total, "cost_per_unit": per_unit}
        for label, total, per_unit in breakdown.components()
    ]
    rows.append({
        "component": "Grand Total",
        "total": breakdown.total_batch_cost,
        "cost_per_unit": breakdown.grand_total_cost_per_unit,
    })
    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def op_cost_summary_table(
    entries: Iterable[OpCostEntry],
    allocator: Optional[OperationalCostAllocator] = None
) -> pd.DataFrame:
    """
    Monthly operational cost summary, most recent month first.

    Args:
        entries: Monthly cost entries
        allocator: Allocator to use (default configuration if None)

    Returns:
        DataFrame with one row per entry
    """
    allocator = allocator or OperationalCostAllocator()

    rows = []
    for entry in entries:
        total_cost = allocator.total_monthly_cost(entry.costs)
        total_production = allocator.total_production(entry.production)
        rows.append({
            "period": entry.period_label,
            "year": entry.year,
            "month": entry.month_number,
            "total_cost": total_cost,
            "total_production": total_production,
            "auto_cost_per_kg": allocator.auto_cost_per_unit(total_cost, total_production),
            "manual_cost_per_kg": entry.manual_op_cost_per_kg,
            "effective_cost_per_kg": allocator.effective_cost_per_unit(entry),
            "mode": allocator.mode(entry).value,
        })

    df = pd.DataFrame(rows, columns=OP_COST_COLUMNS)
    if df.empty:
        return df
    return df.sort_values(["year", "month"], ascending=False).reset_index(drop=True)


def recipe_items_table(
    recipe: Recipe,
    raw_materials: Optional[Iterable[RawMaterial]] = None
) -> pd.DataFrame:
    """
    Recipe lines with raw material codes and names.

    Names come from the raw material list when given, otherwise from the
    line's own raw_material_name.
    """
    lookup: Dict[str, RawMaterial] = {rm.id: rm for rm in raw_materials or []}

    rows = []
    for item in recipe.items:
        material = lookup.get(item.raw_material_id)
        rows.append({
            "raw_material_id": item.raw_material_id,
            "code": material.code if material else "",
            "name": material.name if material else (item.raw_material_name or ""),
            "quantity": item.quantity,
            "unit_id": item.unit_id,
            "price": item.price,
            "total_price": item.total_price,
        })

    return pd.DataFrame(
        rows,
        columns=["raw_material_id", "code", "name", "quantity", "unit_id", "price", "total_price"],
    )
