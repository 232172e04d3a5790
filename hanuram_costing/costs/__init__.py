"""Cost calculation module.

This module provides recipe and overhead cost calculation:
- Unit conversion between units of measure
- Raw material costs (line totals, recipe totals, cost per unit)
- Labour costs by phase (production, packing)
- Packaging and handling costs
- Operational cost allocation per kg of monthly production
- Landed cost aggregation per output unit

Key components:
- CostBreakdown: Derived per-unit cost figures for a recipe
- UnitConverter: Convert quantities using directional factors
- RecipeItemCoster: Raw material costs from recipe lines
- LabourCoster: Labour costs from recipe labour assignments
- PackagingCoster: Packaging costs from packaging entries
- OperationalCostAllocator: Monthly operating cost per kg
- CostBreakdownAggregator: Combine the recipe components
- PackagingHandlingCalculator: Packaging cost per kg from consumables
- QuotationScaler: Scale a recipe to a requested quantity
"""

from .cost_breakdown import CostBreakdown
from .unit_converter import ConversionResult, UnitConverter
from .recipe_item_coster import RecipeItemCoster
from .labour_coster import LabourCoster
from .packaging_coster import PackagingCoster
from .operational_cost_allocator import OperationalCostAllocator
from .cost_breakdown_aggregator import CostBreakdownAggregator
from .packaging_handling_calculator import (
    PackagingHandlingCalculator,
    PackagingHandlingInputs,
    PackagingHandlingResult,
)
from .quotation_scaler import Quotation, QuotationLine, QuotationScaler, latest_vendor_prices
from .price_history import (
    ItemChange,
    ItemChangeType,
    RecipeCostSnapshot,
    SnapshotComparison,
    compare_snapshots,
    latest_two,
)

__all__ = [
    "CostBreakdown",
    "ConversionResult",
    "UnitConverter",
    "RecipeItemCoster",
    "LabourCoster",
    "PackagingCoster",
    "OperationalCostAllocator",
    "CostBreakdownAggregator",
    "PackagingHandlingCalculator",
    "PackagingHandlingInputs",
    "PackagingHandlingResult",
    "Quotation",
    "QuotationLine",
    "QuotationScaler",
    "latest_vendor_prices",
    "ItemChange",
    "ItemChangeType",
    "RecipeCostSnapshot",
    "SnapshotComparison",
    "compare_snapshots",
    "latest_two",
]
