"""Pre-flight checks for costing data.

Costing never fails on incomplete data: a zero yield or a missing override
silently becomes a zero or fallback figure. This module finds those cases
up front so they can be shown next to the numbers they affect.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from hanuram_costing.config import CostingConfig
from hanuram_costing.costs.operational_cost_allocator import OperationalCostAllocator
from hanuram_costing.costs.recipe_item_coster import RecipeItemCoster
from hanuram_costing.costs.unit_converter import UnitConverter
from hanuram_costing.models import (
    OpCostEntry,
    PackagingCost,
    Recipe,
    RecipeLabour,
    UnitConversion,
)
from hanuram_costing.rounding import is_number

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationIssue:
    """Represents a single validation issue.

    Attributes:
        id: Identifier of the issue type
        category: Category of validation (e.g. "Recipe", "Labour")
        severity: Severity level
        title: Short title describing the issue
        description: Detailed description with the affected record
        metadata: Additional data about the issue
    """
    id: str
    category: str
    severity: ValidationSeverity
    title: str
    description: str
    metadata: Optional[Dict[str, Any]] = None


class CostingDataValidator:
    """Checks recipe and overhead data before costing.

    Validates:
    - Recipe: yield, batch size, stored line totals and raw material total
    - Units: item units convertible to the recipe unit
    - Labour and packaging: entries belong to the recipe
    - Operational costs: production present, manual overrides complete
    """

    def __init__(
        self,
        recipe: Optional[Recipe] = None,
        recipe_labour: Optional[List[RecipeLabour]] = None,
        packaging_costs: Optional[List[PackagingCost]] = None,
        conversions: Optional[List[UnitConversion]] = None,
        op_cost_entries: Optional[List[OpCostEntry]] = None,
        config: Optional[CostingConfig] = None,
    ):
        self.recipe = recipe
        self.recipe_labour = recipe_labour or []
        self.packaging_costs = packaging_costs or []
        self.conversions = conversions
        self.op_cost_entries = op_cost_entries or []
        self.config = config or CostingConfig()
        self.issues: List[ValidationIssue] = []

        self._item_coster = RecipeItemCoster(self.config)
        self._allocator = OperationalCostAllocator(self.config)

    def validate_all(self) -> List[ValidationIssue]:
        """Run all checks and return the issues found."""
        self.issues = []

        if self.recipe is not None:
            self.check_recipe_quantities()
            self.check_recipe_totals()
            self.check_unit_conversions()
            self.check_ownership()
        self.check_op_costs()

        if self.issues:
            logger.info(f"Costing data validation found {len(self.issues)} issue(s)")
        return self.issues

    def has_errors(self) -> bool:
        return any(issue.severity == ValidationSeverity.ERROR for issue in self.issues)

    def check_recipe_quantities(self):
        """Validate batch size and yield."""
        recipe = self.recipe

        if recipe.batch_size <= 0:
            self.issues.append(ValidationIssue(
                id="RCP_001",
                category="Recipe",
                severity=ValidationSeverity.ERROR,
                title="Batch size is zero",
                description=f"Recipe '{recipe.name}' has no batch size; quotations cannot be scaled.",
            ))

        if recipe.output_quantity <= 0:
            self.issues.append(ValidationIssue(
                id="RCP_002",
                category="Recipe",
                severity=ValidationSeverity.WARNING,
                title="Output quantity is zero",
                description=f"Recipe '{recipe.name}' has no yield; every per-unit cost will show 0.",
            ))
        elif recipe.output_quantity > recipe.batch_size > 0:
            self.issues.append(ValidationIssue(
                id="RCP_003",
                category="Recipe",
                severity=ValidationSeverity.WARNING,
                title="Yield exceeds batch size",
                description=(
                    f"Recipe '{recipe.name}' yields {recipe.output_quantity:g} "
                    f"from a batch of {recipe.batch_size:g}."
                ),
                metadata={"yield": recipe.output_quantity, "batch_size": recipe.batch_size},
            ))

        if not recipe.items:
            self.issues.append(ValidationIssue(
                id="RCP_004",
                category="Recipe",
                severity=ValidationSeverity.INFO,
                title="Recipe has no raw materials",
                description=f"Recipe '{recipe.name}' has no line items; raw material cost is 0.",
            ))

    def check_recipe_totals(self):
        """Validate stored line totals and the stored recipe total."""
        recipe = self.recipe

        for item in recipe.items:
            expected = self._item_coster.line_total(item.quantity, item.price)
            if item.total_price != expected:
                self.issues.append(ValidationIssue(
                    id="RCP_010",
                    category="Recipe",
                    severity=ValidationSeverity.WARNING,
                    title="Line total does not match quantity × price",
                    description=(
                        f"{item.raw_material_name or item.raw_material_id}: stored "
                        f"{item.total_price:.2f}, expected {expected:.2f}."
                    ),
                    metadata={"raw_material_id": item.raw_material_id, "expected": expected},
                ))

        expected_total = self._item_coster.aggregate(recipe.items)
        if recipe.total_raw_material_cost != expected_total:
            self.issues.append(ValidationIssue(
                id="RCP_011",
                category="Recipe",
                severity=ValidationSeverity.WARNING,
                title="Stored raw material cost is stale",
                description=(
                    f"Recipe '{recipe.name}' stores {recipe.total_raw_material_cost:.2f} "
                    f"but its lines sum to {expected_total:.2f}."
                ),
                metadata={"expected": expected_total},
            ))

    def check_unit_conversions(self):
        """Validate each item's unit converts to the recipe unit."""
        recipe = self.recipe
        if self.conversions is None or not recipe.unit_id:
            return

        missing = sorted({
            item.unit_id
            for item in recipe.items
            if item.unit_id
            and item.unit_id != recipe.unit_id
            and UnitConverter.find_factor(item.unit_id, recipe.unit_id, self.conversions) is None
        })
        for unit_id in missing:
            self.issues.append(ValidationIssue(
                id="UNIT_001",
                category="Units",
                severity=ValidationSeverity.WARNING,
                title="Missing unit conversion",
                description=(
                    f"No conversion from '{unit_id}' to recipe unit '{recipe.unit_id}'; "
                    f"quantities will be used unconverted."
                ),
                metadata={"from_unit_id": unit_id, "to_unit_id": recipe.unit_id},
            ))

    def check_ownership(self):
        """Validate labour and packaging entries belong to the recipe."""
        recipe_id = self.recipe.id
        if recipe_id is None:
            return

        foreign_labour = [e for e in self.recipe_labour if e.recipe_id and e.recipe_id != recipe_id]
        foreign_packaging = [e for e in self.packaging_costs if e.recipe_id and e.recipe_id != recipe_id]

        if foreign_labour:
            self.issues.append(ValidationIssue(
                id="OWN_001",
                category="Labour",
                severity=ValidationSeverity.ERROR,
                title="Labour from another recipe",
                description=f"{len(foreign_labour)} labour assignment(s) belong to a different recipe.",
                metadata={"labour_ids": [e.labour_id for e in foreign_labour]},
            ))
        if foreign_packaging:
            self.issues.append(ValidationIssue(
                id="OWN_002",
                category="Packaging",
                severity=ValidationSeverity.ERROR,
                title="Packaging from another recipe",
                description=f"{len(foreign_packaging)} packaging entr(ies) belong to a different recipe.",
            ))

    def check_op_costs(self):
        """Validate monthly entries: production present, overrides complete, one per month."""
        seen = set()
        for entry in self.op_cost_entries:
            period = (entry.year, entry.month_number)
            if period in seen:
                self.issues.append(ValidationIssue(
                    id="OPC_003",
                    category="Operational Costs",
                    severity=ValidationSeverity.ERROR,
                    title="Duplicate month",
                    description=f"More than one OP cost entry for {entry.period_label}.",
                ))
            seen.add(period)

            if self._allocator.total_production(entry.production) <= 0:
                self.issues.append(ValidationIssue(
                    id="OPC_001",
                    category="Operational Costs",
                    severity=ValidationSeverity.WARNING,
                    title="No production recorded",
                    description=f"{entry.period_label} has no production; OP cost per kg is 0.",
                ))

            if entry.use_manual_op_cost and not is_number(entry.manual_op_cost_per_kg):
                self.issues.append(ValidationIssue(
                    id="OPC_002",
                    category="Operational Costs",
                    severity=ValidationSeverity.WARNING,
                    title="Manual OP cost without a value",
                    description=(
                        f"{entry.period_label} is set to manual but has no manual value; "
                        f"the automatic cost is used."
                    ),
                ))
