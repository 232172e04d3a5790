"""Raw material master data and vendor price observations."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel, record_id


class RawMaterial(ApiModel):
    """
    Raw material purchased from vendors and consumed by recipes.

    Attributes:
        id: Unique raw material identifier
        code: Business code (e.g. "RM001")
        name: Material name
        unit_id: Unit the material is priced in
        last_added_price: Most recent vendor price, used only as a default suggestion
        last_vendor_name: Vendor of the most recent price
    """
    id: str = record_id(required=True, description="Raw material identifier")
    code: str = Field(default="", description="Raw material code")
    name: str = Field(..., description="Raw material name")
    unit_id: Optional[str] = Field(None, description="Pricing unit ID")
    last_added_price: Optional[float] = Field(
        None,
        description="Latest observed vendor price",
        ge=0
    )
    last_vendor_name: Optional[str] = Field(None, description="Vendor of latest price")

    def __str__(self) -> str:
        """String representation."""
        return f"{self.code} {self.name}".strip()


class VendorPrice(ApiModel):
    """
    A price quoted by a vendor for a raw material.

    Attributes:
        raw_material_id: Material being priced
        vendor_id: Vendor quoting the price
        vendor_name: Vendor display name
        price: Price per unit of the material
        added_on: When the price was recorded
    """
    raw_material_id: str = Field(..., description="Raw material ID")
    vendor_id: str = Field(..., description="Vendor ID")
    vendor_name: Optional[str] = Field(None, description="Vendor name")
    price: float = Field(..., description="Price per unit", ge=0)
    added_on: Optional[datetime] = Field(None, description="Time the price was recorded")
