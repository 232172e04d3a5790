"""Quotation scaling.

Scales a recipe's raw material lines from its batch size to a quantity
requested by a customer and prices the result.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from hanuram_costing.config import CostingConfig
from hanuram_costing.models.raw_material import VendorPrice
from hanuram_costing.models.recipe import Recipe
from hanuram_costing.rounding import decimal_sum, round_currency, safe_divide, to_decimal


@dataclass
class QuotationLine:
    """A recipe line scaled to the required quantity."""
    raw_material_id: str
    raw_material_name: Optional[str]
    master_quantity: float
    calculated_quantity: float
    unit_price: float
    calculated_total: float


@dataclass
class Quotation:
    """
    Priced raw material requirement for a requested quantity.

    Attributes:
        required_quantity: Output quantity requested
        scaling_factor: required_quantity / batch size
        lines: Scaled recipe lines
        total_recipe_cost: Rounded sum of scaled line totals
        per_unit_cost: total_recipe_cost / required_quantity
    """
    required_quantity: float = 0.0
    scaling_factor: float = 0.0
    lines: List[QuotationLine] = field(default_factory=list)
    total_recipe_cost: float = 0.0
    per_unit_cost: float = 0.0


def latest_vendor_prices(vendor_prices: Iterable[VendorPrice]) -> Dict[str, float]:
    """
    Most recent vendor price per raw material.

    Prices without a timestamp rank below dated ones; among equals the last
    one seen wins.
    """
    chosen: Dict[str, VendorPrice] = {}
    for price in vendor_prices:
        current = chosen.get(price.raw_material_id)
        if current is None:
            chosen[price.raw_material_id] = price
            continue
        if price.added_on is None:
            if current.added_on is None:
                chosen[price.raw_material_id] = price
            continue
        if current.added_on is None or price.added_on >= current.added_on:
            chosen[price.raw_material_id] = price
    return {rm_id: vp.price for rm_id, vp in chosen.items()}


class QuotationScaler:
    """
    Scales recipes to a requested quantity for customer quotations.

    Example:
        quotation = QuotationScaler().scale(recipe, required_quantity=250)
        print(f"{quotation.per_unit_cost:.2f}/kg")
    """

    def __init__(self, config: Optional[CostingConfig] = None):
        self.config = config or CostingConfig()

    def scale(
        self,
        recipe: Recipe,
        required_quantity: float,
        price_overrides: Optional[Dict[str, float]] = None
    ) -> Quotation:
        """
        Scale and price a recipe for a required quantity.

        Args:
            recipe: Recipe to scale (quantities are per batch_size)
            required_quantity: Quantity requested
            price_overrides: Optional raw_material_id -> price for this quote
                (e.g. a chosen vendor's price); other lines keep the recipe price

        Returns:
            Quotation; an empty one with zero totals when required_quantity
            or the recipe batch size is not positive
        """
        if required_quantity <= 0 or recipe.batch_size <= 0:
            return Quotation(required_quantity=max(required_quantity, 0.0))

        overrides = price_overrides or {}
        factor = to_decimal(required_quantity) / to_decimal(recipe.batch_size)

        lines = []
        totals = []
        for item in recipe.items:
            unit_price = overrides.get(item.raw_material_id, item.price)
            quantity = to_decimal(item.quantity) * factor
            line_total = quantity * to_decimal(unit_price)
            totals.append(line_total)
            lines.append(QuotationLine(
                raw_material_id=item.raw_material_id,
                raw_material_name=item.raw_material_name,
                master_quantity=item.quantity,
                calculated_quantity=float(quantity),
                unit_price=unit_price,
                calculated_total=float(line_total),
            ))

        total = decimal_sum(totals)
        return Quotation(
            required_quantity=required_quantity,
            scaling_factor=float(factor),
            lines=lines,
            total_recipe_cost=round_currency(total, self.config.decimal_places),
            per_unit_cost=safe_divide(total, required_quantity, self.config.decimal_places),
        )
