"""Packaging and handling cost entries."""

from typing import Optional

from pydantic import Field

from .base import ApiModel, record_id


class PackagingCost(ApiModel):
    """
    Packaging or handling cost recorded against a recipe.

    cost is the entry's total amount, already computed upstream; it is not
    a unit price to be multiplied by quantity.

    Attributes:
        id: Entry identifier
        recipe_id: Owning recipe
        type: Packaging type (e.g. "shipper box", "sticker")
        cost: Total cost of the entry
        quantity: Quantity the cost covers (informational)
    """
    id: Optional[str] = record_id(description="Packaging cost identifier")
    recipe_id: Optional[str] = Field(None, description="Recipe ID")
    type: str = Field(default="", description="Packaging type")
    cost: float = Field(default=0.0, description="Total cost of the entry", ge=0)
    quantity: float = Field(default=0.0, description="Quantity covered", ge=0)
