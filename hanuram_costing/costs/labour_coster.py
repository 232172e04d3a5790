"""Labour cost calculator.

Aggregates the daily salaries of labour assigned to a recipe, split by
phase (production vs packing).

Cost basis is one day of labour per batch: the salary total of a phase is
attributed in full to one batch's output, with no scaling by days worked.
"""

from typing import Dict, Iterable, List, Optional, Union

from hanuram_costing.config import CostingConfig
from hanuram_costing.models.labour import LabourPhase, RecipeLabour
from hanuram_costing.rounding import decimal_sum, round_currency, safe_divide


class LabourCoster:
    """
    Calculates labour costs from recipe labour assignments.

    Example:
        coster = LabourCoster()
        production_total = coster.aggregate_by_phase(entries, LabourPhase.PRODUCTION)
        per_kg = coster.cost_per_unit(production_total, recipe.output_quantity)
    """

    def __init__(self, config: Optional[CostingConfig] = None):
        """
        Initialize labour coster.

        Args:
            config: Costing options (rounding precision)
        """
        self.config = config or CostingConfig()

    def aggregate_by_phase(
        self,
        entries: Iterable[RecipeLabour],
        phase: Union[LabourPhase, str]
    ) -> float:
        """
        Sum daily salaries of entries in one phase.

        Args:
            entries: Recipe labour assignments (any phase)
            phase: Phase to total

        Returns:
            Rounded salary total for the phase (0 for no entries)
        """
        phase = LabourPhase(phase)
        return round_currency(
            decimal_sum(entry.salary_per_day for entry in entries or () if entry.type == phase),
            self.config.decimal_places
        )

    def cost_per_unit(self, phase_total: float, output_quantity: float) -> float:
        """Phase labour cost per output unit, 0 when output is not positive."""
        return safe_divide(phase_total, output_quantity, self.config.decimal_places)

    @staticmethod
    def split_by_phase(entries: Iterable[RecipeLabour]) -> Dict[LabourPhase, List[RecipeLabour]]:
        """Group assignments by phase; both phases are always present."""
        grouped: Dict[LabourPhase, List[RecipeLabour]] = {phase: [] for phase in LabourPhase}
        for entry in entries or ():
            grouped[entry.type].append(entry)
        return grouped
