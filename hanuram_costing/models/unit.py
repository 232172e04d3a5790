"""Units of measure and directional conversion factors."""

from pydantic import Field

from .base import ApiModel, record_id


class Unit(ApiModel):
    """
    Unit of measure reference data (e.g. kg, g, litre, piece).

    Attributes:
        id: Unique unit identifier
        name: Display name
        short_code: Abbreviation shown next to quantities
    """
    id: str = record_id(required=True, description="Unit identifier")
    name: str = Field(..., description="Unit name")
    short_code: str = Field(default="", description="Abbreviation, e.g. 'kg'")

    def __str__(self) -> str:
        """String representation."""
        return self.short_code or self.name


class UnitConversion(ApiModel):
    """
    Conversion factor from one unit to another.

    Directional: a kg -> g entry does not imply a g -> kg entry exists.

    Attributes:
        from_unit_id: Source unit
        to_unit_id: Target unit
        conversion_factor: Multiplier applied to a source quantity
    """
    from_unit_id: str = Field(..., description="Source unit ID")
    to_unit_id: str = Field(..., description="Target unit ID")
    conversion_factor: float = Field(..., description="Target units per source unit", gt=0)

    def __str__(self) -> str:
        """String representation."""
        return f"1 {self.from_unit_id} = {self.conversion_factor:g} {self.to_unit_id}"
