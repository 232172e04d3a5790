"""Packaging and handling cost calculator.

Works out the packaging and handling cost per kg of finished product from
consumable prices and usage rates:
- Shipper boxes (box cost spread over the kg a box holds)
- Hygiene items, oxygen scavengers, mono cartons, stickers, butter paper
  (unit cost × units per kg)
- MAP (modified atmosphere packing) and smaller-size packaging (already per kg)
- Excess stock (extra fill weight per kg × raw material cost per kg)
- Material wastage (a percentage of the six consumable components)
"""

from dataclasses import dataclass, fields
from decimal import Decimal

from pydantic import BaseModel, Field

from hanuram_costing.rounding import round_currency, to_decimal


class PackagingHandlingInputs(BaseModel):
    """
    Consumable prices and usage rates for one product.

    Attributes:
        shipper_box_cost: Cost of one shipper box
        shipper_box_qty: Kg of product one shipper box holds
        hygiene_cost_per_unit: Cost of one hygiene item
        hygiene_qty_per_kg: Hygiene items used per kg
        scavenger_cost_per_unit: Cost of one oxygen scavenger
        scavenger_qty_per_kg: Scavengers used per kg
        map_cost_per_kg: MAP cost per kg
        smaller_size_packaging_cost: Small-pack packaging cost per kg
        mono_carton_cost_per_unit: Cost of one mono carton
        mono_carton_qty_per_kg: Mono cartons used per kg
        sticker_cost_per_unit: Cost of one sticker
        sticker_qty_per_kg: Stickers used per kg
        butter_paper_cost_per_kg: Butter paper cost per kg of paper
        butter_paper_qty_per_kg: Kg of butter paper per kg of product
        excess_weight_per_kg: Extra fill weight per kg of product
        rmc_cost_per_kg: Raw material cost per kg (prices the excess weight)
        wastage_percentage: Consumable wastage, percent
    """
    shipper_box_cost: float = Field(default=0.0, ge=0)
    shipper_box_qty: float = Field(default=0.0, ge=0)
    hygiene_cost_per_unit: float = Field(default=0.0, ge=0)
    hygiene_qty_per_kg: float = Field(default=0.0, ge=0)
    scavenger_cost_per_unit: float = Field(default=0.0, ge=0)
    scavenger_qty_per_kg: float = Field(default=0.0, ge=0)
    map_cost_per_kg: float = Field(default=0.0, ge=0)
    smaller_size_packaging_cost: float = Field(default=0.0, ge=0)
    mono_carton_cost_per_unit: float = Field(default=0.0, ge=0)
    mono_carton_qty_per_kg: float = Field(default=0.0, ge=0)
    sticker_cost_per_unit: float = Field(default=0.0, ge=0)
    sticker_qty_per_kg: float = Field(default=0.0, ge=0)
    butter_paper_cost_per_kg: float = Field(default=0.0, ge=0)
    butter_paper_qty_per_kg: float = Field(default=0.0, ge=0)
    excess_weight_per_kg: float = Field(default=0.0, ge=0)
    rmc_cost_per_kg: float = Field(default=0.0, ge=0)
    wastage_percentage: float = Field(default=0.0, ge=0, le=100)


@dataclass
class PackagingHandlingResult:
    """Per-kg packaging and handling components (unrounded)."""
    shipper_box_cost_per_kg: float = 0.0
    hygiene_cost_per_kg: float = 0.0
    scavenger_cost_per_kg: float = 0.0
    map_cost_per_kg: float = 0.0
    smaller_size_packaging_cost_per_kg: float = 0.0
    mono_carton_cost_per_kg: float = 0.0
    sticker_cost_per_kg: float = 0.0
    butter_paper_cost_per_kg: float = 0.0
    excess_stock_cost_per_kg: float = 0.0
    material_wastage_cost_per_kg: float = 0.0
    total_packaging_handling_cost: float = 0.0

    def rounded(self) -> "PackagingHandlingResult":
        """Copy with every figure rounded for display."""
        return PackagingHandlingResult(**{
            f.name: round_currency(getattr(self, f.name)) for f in fields(self)
        })


class PackagingHandlingCalculator:
    """
    Calculates packaging and handling cost per kg.

    Example:
        result = PackagingHandlingCalculator().calculate(inputs)
        print(f"Packaging: {result.total_packaging_handling_cost:.2f}/kg")
    """

    def calculate(self, inputs: PackagingHandlingInputs) -> PackagingHandlingResult:
        """
        Calculate every per-kg component and their total.

        Args:
            inputs: Consumable prices and usage rates

        Returns:
            Per-kg components; a shipper box holding 0 kg contributes 0
        """
        d = to_decimal

        shipper_box = (
            d(inputs.shipper_box_cost) / d(inputs.shipper_box_qty)
            if inputs.shipper_box_qty > 0
            else Decimal(0)
        )
        hygiene = d(inputs.hygiene_cost_per_unit) * d(inputs.hygiene_qty_per_kg)
        scavenger = d(inputs.scavenger_cost_per_unit) * d(inputs.scavenger_qty_per_kg)
        map_cost = d(inputs.map_cost_per_kg)
        smaller_size = d(inputs.smaller_size_packaging_cost)
        mono_carton = d(inputs.mono_carton_cost_per_unit) * d(inputs.mono_carton_qty_per_kg)
        sticker = d(inputs.sticker_cost_per_unit) * d(inputs.sticker_qty_per_kg)
        butter_paper = d(inputs.butter_paper_cost_per_kg) * d(inputs.butter_paper_qty_per_kg)
        excess_stock = d(inputs.excess_weight_per_kg) * d(inputs.rmc_cost_per_kg)

        # MAP, small packs and excess stock are not wasted consumables
        wastage_base = shipper_box + hygiene + scavenger + mono_carton + sticker + butter_paper
        wastage = wastage_base * d(inputs.wastage_percentage) / 100

        total = (
            shipper_box + hygiene + scavenger + map_cost + smaller_size
            + mono_carton + sticker + butter_paper + excess_stock + wastage
        )

        return PackagingHandlingResult(
            shipper_box_cost_per_kg=float(shipper_box),
            hygiene_cost_per_kg=float(hygiene),
            scavenger_cost_per_kg=float(scavenger),
            map_cost_per_kg=float(map_cost),
            smaller_size_packaging_cost_per_kg=float(smaller_size),
            mono_carton_cost_per_kg=float(mono_carton),
            sticker_cost_per_kg=float(sticker),
            butter_paper_cost_per_kg=float(butter_paper),
            excess_stock_cost_per_kg=float(excess_stock),
            material_wastage_cost_per_kg=float(wastage),
            total_packaging_handling_cost=float(total),
        )
