"""Cost breakdown data model.

Derived per-unit figures for one recipe; recomputed from source data on
every request and never persisted.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from hanuram_costing.constants import COST_COMPONENT_LABELS, CURRENCY_DECIMAL_PLACES, CURRENCY_SYMBOL
from hanuram_costing.rounding import round_currency


@dataclass
class CostBreakdown:
    """
    Landed cost per output unit for a recipe.

    Per-unit components are each rounded to 2 decimals; the grand total is the
    rounded sum of those rounded components.

    Attributes:
        raw_material_cost_per_unit: Raw material cost / output quantity
        production_labour_cost_per_unit: Production labour / output quantity
        packing_labour_cost_per_unit: Packing labour / output quantity
        packaging_cost_per_unit: Packaging and handling / output quantity
        grand_total_cost_per_unit: Sum of the four components
        raw_material_total: Raw material cost per batch
        production_labour_total: Production labour cost per batch
        packing_labour_total: Packing labour cost per batch
        packaging_total: Packaging cost per batch
        output_quantity: Divisor used for the per-unit figures
        unit_name: Output unit name for display
        decimal_places: Rounding precision for derived totals
        currency_symbol: Symbol used by __str__
    """
    raw_material_cost_per_unit: float = 0.0
    production_labour_cost_per_unit: float = 0.0
    packing_labour_cost_per_unit: float = 0.0
    packaging_cost_per_unit: float = 0.0
    grand_total_cost_per_unit: float = 0.0
    raw_material_total: float = 0.0
    production_labour_total: float = 0.0
    packing_labour_total: float = 0.0
    packaging_total: float = 0.0
    output_quantity: float = 0.0
    unit_name: str = ""
    decimal_places: int = CURRENCY_DECIMAL_PLACES
    currency_symbol: str = CURRENCY_SYMBOL

    @property
    def total_batch_cost(self) -> float:
        """Sum of the component totals for one batch."""
        return round_currency(
            self.raw_material_total
            + self.production_labour_total
            + self.packing_labour_total
            + self.packaging_total,
            self.decimal_places
        )

    def components(self) -> List[Tuple[str, float, float]]:
        """
        Components in display order.

        Returns:
            List of (label, batch total, cost per unit)
        """
        return [
            (COST_COMPONENT_LABELS["raw_material"], self.raw_material_total, self.raw_material_cost_per_unit),
            (COST_COMPONENT_LABELS["production_labour"], self.production_labour_total, self.production_labour_cost_per_unit),
            (COST_COMPONENT_LABELS["packing_labour"], self.packing_labour_total, self.packing_labour_cost_per_unit),
            (COST_COMPONENT_LABELS["packaging"], self.packaging_total, self.packaging_cost_per_unit),
        ]

    def landed_cost_with_overhead(self, op_cost_per_unit: float) -> float:
        """
        Grand total plus an operational cost per unit.

        The grand total itself excludes overhead; this combines the two
        for screens that show a fully loaded figure.

        Args:
            op_cost_per_unit: Effective operating cost per unit for a month

        Returns:
            Rounded landed cost including overhead
        """
        return round_currency(
            self.grand_total_cost_per_unit + (op_cost_per_unit or 0.0),
            self.decimal_places
        )

    def get_cost_proportions(self) -> Dict[str, float]:
        """
        Get proportion of each component in the grand total.

        Returns:
            Dictionary mapping component name to proportion (0.0 to 1.0)
        """
        if self.grand_total_cost_per_unit == 0:
            return {"raw_material": 0.0, "production_labour": 0.0, "packing_labour": 0.0, "packaging": 0.0}

        return {
            "raw_material": self.raw_material_cost_per_unit / self.grand_total_cost_per_unit,
            "production_labour": self.production_labour_cost_per_unit / self.grand_total_cost_per_unit,
            "packing_labour": self.packing_labour_cost_per_unit / self.grand_total_cost_per_unit,
            "packaging": self.packaging_cost_per_unit / self.grand_total_cost_per_unit,
        }

    def __str__(self) -> str:
        """String representation."""
        unit = self.unit_name or "unit"
        lines = [f"Cost Breakdown (per {unit}):"]
        for label, _, per_unit in self.components():
            lines.append(f"  {label}: {self.currency_symbol}{per_unit:,.{self.decimal_places}f}")
        lines.append(f"  Grand Total: {self.currency_symbol}{self.grand_total_cost_per_unit:,.{self.decimal_places}f}")
        return "\n".join(lines)
