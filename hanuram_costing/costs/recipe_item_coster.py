"""Raw material cost calculator.

Calculates recipe raw material costs:
- Extended cost per line (quantity × unit price)
- Total raw material cost per batch
- Raw material cost per output unit
"""

import logging
from typing import Iterable, Optional

from hanuram_costing.config import CostingConfig
from hanuram_costing.exceptions import InvalidInput
from hanuram_costing.models.recipe import Recipe, RecipeItem
from hanuram_costing.rounding import decimal_sum, round_currency, safe_divide, to_decimal

logger = logging.getLogger(__name__)


class RecipeItemCoster:
    """
    Calculates raw material costs from recipe line items.

    Line totals are rounded individually (they are stored per line); the
    recipe total sums the stored line totals and rounds once.

    Example:
        coster = RecipeItemCoster()
        total = coster.aggregate(recipe.items)
        per_kg = coster.cost_per_unit(total, recipe.output_quantity)
    """

    def __init__(self, config: Optional[CostingConfig] = None):
        """
        Initialize raw material coster.

        Args:
            config: Costing options (rounding precision)
        """
        self.config = config or CostingConfig()

    def line_total(self, quantity: float, unit_price: float) -> float:
        """
        Calculate the extended cost of one line.

        Args:
            quantity: Quantity consumed
            unit_price: Price per unit

        Returns:
            quantity × unit_price rounded half-up

        Raises:
            InvalidInput: If quantity or unit_price is negative
        """
        if quantity < 0:
            raise InvalidInput(f"Quantity must be non-negative, got {quantity}")
        if unit_price < 0:
            raise InvalidInput(f"Unit price must be non-negative, got {unit_price}")
        return round_currency(to_decimal(quantity) * to_decimal(unit_price), self.config.decimal_places)

    def aggregate(self, items: Iterable[RecipeItem]) -> float:
        """
        Sum line totals into the recipe's raw material cost.

        Args:
            items: Recipe lines (empty gives 0)

        Returns:
            Rounded sum of total_price
        """
        return round_currency(
            decimal_sum(item.total_price for item in items or ()),
            self.config.decimal_places
        )

    def cost_per_unit(self, total_raw_material_cost: float, output_quantity: float) -> float:
        """Raw material cost per output unit, 0 when output is not positive."""
        return safe_divide(total_raw_material_cost, output_quantity, self.config.decimal_places)

    def price_recipe(self, recipe: Recipe) -> Recipe:
        """
        Recompute a recipe's line totals and stored cost figures.

        Args:
            recipe: Recipe with quantities and prices

        Returns:
            Copy of the recipe with total_price, total_raw_material_cost and
            price_per_unit consistent with its lines
        """
        items = [
            item.model_copy(update={"total_price": self.line_total(item.quantity, item.price)})
            for item in recipe.items
        ]
        total = self.aggregate(items)
        per_unit = self.cost_per_unit(total, recipe.output_quantity)

        logger.debug(
            f"Priced recipe {recipe.code or recipe.id}: {len(items)} items, "
            f"total {total:.2f}, per unit {per_unit:.2f}"
        )

        return recipe.model_copy(update={
            "items": items,
            "total_raw_material_cost": total,
            "price_per_unit": per_unit,
        })
