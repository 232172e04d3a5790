"""Recipe (bill of materials) data models."""

from typing import List, Optional

from pydantic import AliasChoices, Field, model_validator

from hanuram_costing.rounding import round_currency, to_decimal
from .base import ApiModel, record_id


class RecipeItem(ApiModel):
    """
    One raw material line of a recipe.

    Business Rules:
    - total_price = quantity × price, rounded to 2 decimals
    - When total_price is not supplied it is derived on construction

    Attributes:
        raw_material_id: Raw material consumed
        quantity: Quantity consumed per batch
        unit_id: Unit the quantity is expressed in
        price: Price per unit
        total_price: Extended line cost
        raw_material_name: Display name (optional, from the API join)
        vendor_name: Vendor the price was taken from (optional)
    """
    raw_material_id: str = Field(..., description="Raw material ID")
    quantity: float = Field(..., description="Quantity per batch", gt=0)
    unit_id: Optional[str] = Field(None, description="Quantity unit ID")
    price: float = Field(..., description="Price per unit", ge=0)
    total_price: Optional[float] = Field(None, description="quantity × price")
    raw_material_name: Optional[str] = Field(None, description="Raw material name")
    vendor_name: Optional[str] = Field(None, description="Vendor of the line price")

    @model_validator(mode="after")
    def derive_total_price(self) -> "RecipeItem":
        """Fill total_price from quantity and price when missing."""
        if self.total_price is None:
            self.total_price = round_currency(to_decimal(self.quantity) * to_decimal(self.price))
        return self

    def __str__(self) -> str:
        """String representation."""
        label = self.raw_material_name or self.raw_material_id
        return f"{label}: {self.quantity:g} @ {self.price:.2f} = {self.total_price:.2f}"


class Recipe(ApiModel):
    """
    A recipe with its raw material lines and stored cost totals.

    batch_size is the raw material input of one production run; yield_quantity
    is the finished output after process loss and is the divisor for all
    per-unit costs. Recipes without a recorded yield use the batch size.

    Attributes:
        id: Unique recipe identifier
        code: Business code
        name: Recipe name
        batch_size: Input quantity per batch
        unit_id: Output unit ID
        unit_name: Output unit display name (e.g. "Kg")
        yield_quantity: Output quantity per batch
        items: Raw material lines
        total_raw_material_cost: Stored sum of line totals
        price_per_unit: Stored raw material cost per output unit
    """
    id: Optional[str] = record_id(description="Recipe identifier")
    code: str = Field(default="", description="Recipe code")
    name: str = Field(..., description="Recipe name")
    batch_size: float = Field(default=0.0, description="Input quantity per batch", ge=0)
    unit_id: Optional[str] = Field(None, description="Output unit ID")
    unit_name: str = Field(default="", description="Output unit name")
    yield_quantity: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("yieldQuantity", "yield_quantity", "yield"),
        description="Output quantity per batch after losses",
        ge=0
    )
    items: List[RecipeItem] = Field(default_factory=list, description="Raw material lines")
    total_raw_material_cost: float = Field(default=0.0, description="Sum of line totals")
    price_per_unit: float = Field(default=0.0, description="Raw material cost per output unit")

    @property
    def output_quantity(self) -> float:
        """Quantity the per-unit costs are divided by."""
        if self.yield_quantity is None:
            return self.batch_size
        return self.yield_quantity

    @property
    def process_loss(self) -> float:
        """Input quantity lost in production (batch size minus yield)."""
        return max(0.0, self.batch_size - self.output_quantity)

    def __str__(self) -> str:
        """String representation."""
        return (
            f"Recipe {self.code or self.id} '{self.name}': "
            f"{len(self.items)} items, batch {self.batch_size:g}, "
            f"RM cost {self.total_raw_material_cost:,.2f}"
        )
