"""Labour master data and recipe labour assignments."""

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import ApiModel, record_id


class LabourPhase(str, Enum):
    """Cost bucket a recipe's assigned labour falls into."""
    PRODUCTION = "production"
    PACKING = "packing"


class Labour(ApiModel):
    """
    A worker (or crew) paid a daily salary.

    Attributes:
        id: Unique labour identifier
        code: Business code
        name: Worker name
        department: Department
        salary_per_day: Daily salary
    """
    id: str = record_id(required=True, description="Labour identifier")
    code: str = Field(default="", description="Labour code")
    name: str = Field(..., description="Worker name")
    department: str = Field(default="", description="Department")
    salary_per_day: float = Field(..., description="Daily salary", ge=0)


class RecipeLabour(ApiModel):
    """
    Labour attached to a recipe for one phase.

    salary_per_day is copied from the Labour record when attached, so later
    salary revisions leave historical recipe costs unchanged.

    Attributes:
        id: Assignment identifier
        recipe_id: Owning recipe
        labour_id: Assigned labour record
        type: Production or packing phase
        salary_per_day: Salary snapshot at attach time
        labour_name: Worker name (optional, from the API join)
        department: Department (optional, from the API join)
    """
    id: Optional[str] = record_id(description="Assignment identifier")
    recipe_id: Optional[str] = Field(None, description="Recipe ID")
    labour_id: str = Field(..., description="Labour ID")
    type: LabourPhase = Field(..., description="Labour phase")
    salary_per_day: float = Field(..., description="Daily salary snapshot", ge=0)
    labour_name: Optional[str] = Field(None, description="Worker name")
    department: Optional[str] = Field(None, description="Department")

    @classmethod
    def attach(
        cls,
        recipe_id: str,
        labour: Labour,
        phase: LabourPhase,
        assignment_id: Optional[str] = None
    ) -> "RecipeLabour":
        """
        Attach a labour record to a recipe, snapshotting its salary.

        Args:
            recipe_id: Recipe the labour works on
            labour: Labour record to attach
            phase: Production or packing
            assignment_id: Optional identifier for the assignment

        Returns:
            New RecipeLabour carrying the current salary
        """
        return cls(
            id=assignment_id,
            recipe_id=recipe_id,
            labour_id=labour.id,
            type=LabourPhase(phase),
            salary_per_day=labour.salary_per_day,
            labour_name=labour.name,
            department=labour.department,
        )
