"""Packaging cost calculator."""

from typing import Iterable, Optional

from hanuram_costing.config import CostingConfig
from hanuram_costing.models.packaging import PackagingCost
from hanuram_costing.rounding import decimal_sum, round_currency, safe_divide


class PackagingCoster:
    """
    Totals packaging and handling entries for a recipe.

    Each entry's cost is already a total amount, so entries are summed
    directly rather than multiplied by their quantity.
    """

    def __init__(self, config: Optional[CostingConfig] = None):
        self.config = config or CostingConfig()

    def aggregate(self, entries: Iterable[PackagingCost]) -> float:
        """Rounded sum of entry costs (0 for no entries)."""
        return round_currency(
            decimal_sum(entry.cost for entry in entries or ()),
            self.config.decimal_places
        )

    def cost_per_unit(self, total: float, output_quantity: float) -> float:
        """Packaging cost per output unit, 0 when output is not positive."""
        return safe_divide(total, output_quantity, self.config.decimal_places)
