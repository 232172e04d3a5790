"""Operational cost allocator.

Allocates a month's fixed operating expenses across the month's total
production to give an operating cost per kg:
- Automatic: total expenses / (mithai + namkeen production)
- Manual: an override entered by the user, used only when actually set
"""

import logging
from typing import Optional

from hanuram_costing.config import CostingConfig
from hanuram_costing.constants import OP_COST_FIELDS, PRODUCTION_LINES
from hanuram_costing.models.op_cost import (
    MonthlyCosts,
    MonthlyProduction,
    OpCostEntry,
    OpCostMode,
)
from hanuram_costing.rounding import decimal_sum, is_number, safe_divide

logger = logging.getLogger(__name__)


class OperationalCostAllocator:
    """
    Calculates operating cost per kg for monthly cost entries.

    An entry is always in exactly one mode: manual when the override flag is
    set and a manual value exists, auto otherwise.

    Example:
        allocator = OperationalCostAllocator()
        entry = allocator.build_entry("March", 2025, costs, production)
        per_kg = allocator.effective_cost_per_unit(entry)
    """

    def __init__(self, config: Optional[CostingConfig] = None):
        """
        Initialize allocator.

        Args:
            config: Costing options (rounding precision)
        """
        self.config = config or CostingConfig()

    def total_monthly_cost(self, costs: Optional[MonthlyCosts]) -> float:
        """Sum every expense category (a missing costs object counts as 0)."""
        if costs is None:
            return 0.0
        return float(decimal_sum(getattr(costs, name) for name in OP_COST_FIELDS))

    def total_production(self, production: Optional[MonthlyProduction]) -> float:
        """Sum of mithai and namkeen production."""
        if production is None:
            return 0.0
        return float(decimal_sum(getattr(production, name) for name in PRODUCTION_LINES))

    def auto_cost_per_unit(self, total_cost: float, total_production: float) -> float:
        """Operating cost per kg, 0 when nothing was produced."""
        return safe_divide(total_cost, total_production, self.config.decimal_places)

    def entry_auto_cost_per_unit(self, entry: OpCostEntry) -> float:
        """Automatic cost per kg recomputed from an entry's costs and production."""
        return self.auto_cost_per_unit(
            self.total_monthly_cost(entry.costs),
            self.total_production(entry.production)
        )

    def mode(self, entry: OpCostEntry) -> OpCostMode:
        """Resolve which cost source applies to an entry."""
        if entry.use_manual_op_cost and is_number(entry.manual_op_cost_per_kg):
            return OpCostMode.MANUAL
        return OpCostMode.AUTO

    def effective_cost_per_unit(self, entry: OpCostEntry) -> float:
        """
        Operating cost per kg used for the month.

        Args:
            entry: Monthly cost entry

        Returns:
            The manual override when selected and present, otherwise the
            automatic cost per kg
        """
        if self.mode(entry) == OpCostMode.MANUAL:
            return entry.manual_op_cost_per_kg

        if entry.use_manual_op_cost:
            logger.warning(
                f"OP cost {entry.period_label} is set to manual but has no manual value; "
                f"using automatic cost per kg"
            )
        return self.entry_auto_cost_per_unit(entry)

    def build_entry(
        self,
        month: str,
        year: int,
        costs: MonthlyCosts,
        production: MonthlyProduction,
        entry_id: Optional[str] = None
    ) -> OpCostEntry:
        """
        Create a new monthly entry with its automatic cost computed.

        New entries start in auto mode with no manual value.
        """
        entry = OpCostEntry(
            id=entry_id,
            month=month,
            year=year,
            costs=costs,
            production=production,
        )
        return self.recompute(entry)

    def recompute(self, entry: OpCostEntry) -> OpCostEntry:
        """Return a copy with auto_op_cost_per_kg refreshed; overrides are kept."""
        auto = self.entry_auto_cost_per_unit(entry)
        logger.debug(f"OP cost {entry.period_label}: auto {auto:.2f}/kg")
        return entry.model_copy(update={"auto_op_cost_per_kg": auto})

    def apply_override(
        self,
        entry: OpCostEntry,
        manual_op_cost_per_kg: Optional[float],
        use_manual_op_cost: bool
    ) -> OpCostEntry:
        """
        Return a copy with the manual override settings replaced.

        Args:
            entry: Entry to update
            manual_op_cost_per_kg: Manual cost per kg (None clears it)
            use_manual_op_cost: Whether the manual value is selected
        """
        return entry.model_copy(update={
            "manual_op_cost_per_kg": manual_op_cost_per_kg,
            "use_manual_op_cost": bool(use_manual_op_cost),
        })
