"""Cost breakdown aggregator.

Combines the recipe cost components into a landed cost per output unit:
- Raw material cost
- Production labour cost
- Packing labour cost
- Packaging and handling cost

Operational overhead is allocated per month by OperationalCostAllocator and
is not part of the grand total.
"""

import logging
from typing import Iterable, Optional

from hanuram_costing.config import CostingConfig
from hanuram_costing.models.labour import LabourPhase, RecipeLabour
from hanuram_costing.models.packaging import PackagingCost
from hanuram_costing.models.recipe import Recipe, RecipeItem
from hanuram_costing.rounding import is_number, round_currency
from .cost_breakdown import CostBreakdown
from .labour_coster import LabourCoster
from .packaging_coster import PackagingCoster
from .recipe_item_coster import RecipeItemCoster

logger = logging.getLogger(__name__)


class CostBreakdownAggregator:
    """
    Aggregates raw material, labour, and packaging costs per output unit.

    Coordinates the component costers:
    - RecipeItemCoster: raw material cost from line items
    - LabourCoster: production and packing labour
    - PackagingCoster: packaging and handling entries

    Missing or empty inputs contribute zero; a breakdown is always returned.

    Example:
        aggregator = CostBreakdownAggregator()
        breakdown = aggregator.compute(
            batch_size=100,
            output_quantity=95,
            unit_name="Kg",
            raw_material_items=recipe.items,
            production_labour=production,
            packing_labour=packing,
            packaging_costs=packaging,
        )
        print(breakdown)
    """

    def __init__(self, config: Optional[CostingConfig] = None):
        """
        Initialize aggregator.

        Args:
            config: Costing options shared with the component costers
        """
        self.config = config or CostingConfig()

        # Initialize component costers
        self.item_coster = RecipeItemCoster(self.config)
        self.labour_coster = LabourCoster(self.config)
        self.packaging_coster = PackagingCoster(self.config)

    def compute(
        self,
        batch_size: float,
        output_quantity: Optional[float],
        unit_name: str = "",
        raw_material_items: Optional[Iterable[RecipeItem]] = None,
        production_labour: Optional[Iterable[RecipeLabour]] = None,
        packing_labour: Optional[Iterable[RecipeLabour]] = None,
        packaging_costs: Optional[Iterable[PackagingCost]] = None,
        total_raw_material_cost: Optional[float] = None
    ) -> CostBreakdown:
        """
        Calculate the landed cost breakdown per output unit.

        Steps:
        1. Raw material total: the supplied total, or the sum of line items
           when the supplied total is zero or absent
        2. Labour totals, one per phase
        3. Packaging total
        4. Each total divided by output quantity and rounded
        5. Grand total = rounded sum of the rounded components

        Args:
            batch_size: Raw material input per batch
            output_quantity: Finished output per batch (None uses batch_size)
            unit_name: Output unit name for display
            raw_material_items: Recipe lines
            production_labour: Production phase assignments
            packing_labour: Packing phase assignments
            packaging_costs: Packaging and handling entries
            total_raw_material_cost: Stored raw material total, if known

        Returns:
            Complete cost breakdown
        """
        items = list(raw_material_items or [])
        divisor = self._resolve_output_quantity(batch_size, output_quantity)

        breakdown = CostBreakdown(
            output_quantity=divisor,
            unit_name=unit_name or "",
            decimal_places=self.config.decimal_places,
            currency_symbol=self.config.currency_symbol,
        )

        # Raw material cost
        breakdown.raw_material_total = self._raw_material_total(items, total_raw_material_cost)
        breakdown.raw_material_cost_per_unit = self.item_coster.cost_per_unit(
            breakdown.raw_material_total, divisor
        )

        # Labour costs, one call per phase
        breakdown.production_labour_total = self.labour_coster.aggregate_by_phase(
            production_labour or [], LabourPhase.PRODUCTION
        )
        breakdown.production_labour_cost_per_unit = self.labour_coster.cost_per_unit(
            breakdown.production_labour_total, divisor
        )
        breakdown.packing_labour_total = self.labour_coster.aggregate_by_phase(
            packing_labour or [], LabourPhase.PACKING
        )
        breakdown.packing_labour_cost_per_unit = self.labour_coster.cost_per_unit(
            breakdown.packing_labour_total, divisor
        )

        # Packaging cost
        breakdown.packaging_total = self.packaging_coster.aggregate(packaging_costs or [])
        breakdown.packaging_cost_per_unit = self.packaging_coster.cost_per_unit(
            breakdown.packaging_total, divisor
        )

        # Grand total from the rounded components
        breakdown.grand_total_cost_per_unit = round_currency(
            breakdown.raw_material_cost_per_unit
            + breakdown.production_labour_cost_per_unit
            + breakdown.packing_labour_cost_per_unit
            + breakdown.packaging_cost_per_unit,
            self.config.decimal_places
        )

        logger.debug(
            f"Cost breakdown over {divisor:g} {unit_name or 'units'}: "
            f"grand total {breakdown.grand_total_cost_per_unit:.2f}/unit"
        )

        return breakdown

    def compute_for_recipe(
        self,
        recipe: Recipe,
        recipe_labour: Optional[Iterable[RecipeLabour]] = None,
        packaging_costs: Optional[Iterable[PackagingCost]] = None
    ) -> CostBreakdown:
        """
        Calculate the breakdown for a loaded recipe.

        Args:
            recipe: Recipe with items and stored raw material total
            recipe_labour: Assignments of both phases
            packaging_costs: Packaging and handling entries

        Returns:
            Complete cost breakdown
        """
        by_phase = LabourCoster.split_by_phase(recipe_labour or [])
        return self.compute(
            batch_size=recipe.batch_size,
            output_quantity=recipe.yield_quantity,
            unit_name=recipe.unit_name,
            raw_material_items=recipe.items,
            production_labour=by_phase[LabourPhase.PRODUCTION],
            packing_labour=by_phase[LabourPhase.PACKING],
            packaging_costs=packaging_costs,
            total_raw_material_cost=recipe.total_raw_material_cost,
        )

    def _resolve_output_quantity(self, batch_size: float, output_quantity: Optional[float]) -> float:
        if output_quantity is not None:
            return output_quantity
        if self.config.default_output_to_batch_size:
            return batch_size or 0.0
        return 0.0

    def _raw_material_total(
        self,
        items: list,
        total_raw_material_cost: Optional[float]
    ) -> float:
        if is_number(total_raw_material_cost) and total_raw_material_cost != 0:
            return round_currency(total_raw_material_cost, self.config.decimal_places)

        from_items = self.item_coster.aggregate(items)
        if total_raw_material_cost is not None and from_items != 0:
            logger.warning(
                f"Stored raw material cost is {total_raw_material_cost:g} but {len(items)} line items sum to "
                f"{from_items:.2f}; using the line item total"
            )
        return from_items
