"""Data models for recipe and overhead costing."""

from .unit import Unit, UnitConversion
from .raw_material import RawMaterial, VendorPrice
from .recipe import Recipe, RecipeItem
from .labour import Labour, LabourPhase, RecipeLabour
from .packaging import PackagingCost
from .op_cost import MonthlyCosts, MonthlyProduction, OpCostEntry, OpCostMode

__all__ = [
    # Units
    "Unit",
    "UnitConversion",
    # Materials and recipes
    "RawMaterial",
    "VendorPrice",
    "Recipe",
    "RecipeItem",
    # Labour
    "Labour",
    "LabourPhase",
    "RecipeLabour",
    # Packaging
    "PackagingCost",
    # Operational costs
    "MonthlyCosts",
    "MonthlyProduction",
    "OpCostEntry",
    "OpCostMode",
]
