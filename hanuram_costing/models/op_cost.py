"""Monthly operational (overhead) cost data models."""

from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from hanuram_costing.constants import MONTH_NAMES
from .base import ApiModel, record_id


def _blank_as_zero(value: Any) -> Any:
    if value is None:
        return 0.0
    if isinstance(value, str) and not value.strip():
        return 0.0
    return value


class OpCostMode(str, Enum):
    """Where an entry's operating cost per kg comes from."""
    AUTO = "auto"
    MANUAL = "manual"


class MonthlyCosts(ApiModel):
    """
    Fixed operating expenses for one month.

    Every category defaults to 0; null or blank values from the form are
    read as 0 so they never reach the arithmetic.
    """
    rent: float = Field(default=0.0, ge=0)
    fixed_salary: float = Field(default=0.0, ge=0)
    electricity: float = Field(default=0.0, ge=0)
    marketing: float = Field(default=0.0, ge=0)
    logistics: float = Field(default=0.0, ge=0)
    insurance: float = Field(default=0.0, ge=0)
    vehicle_installments: float = Field(default=0.0, ge=0)
    travel_cost: float = Field(default=0.0, ge=0)
    miscellaneous: float = Field(default=0.0, ge=0)
    other_costs: float = Field(default=0.0, ge=0)
    equipment_maintenance: float = Field(default=0.0, ge=0)
    internet_charges: float = Field(default=0.0, ge=0)
    telephone_bills: float = Field(default=0.0, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_zero(cls, v: Any) -> Any:
        return _blank_as_zero(v)


class MonthlyProduction(ApiModel):
    """Kilograms produced in a month per production line."""
    mithai_production: float = Field(default=0.0, description="Mithai output (kg)", ge=0)
    namkeen_production: float = Field(default=0.0, description="Namkeen output (kg)", ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_zero(cls, v: Any) -> Any:
        return _blank_as_zero(v)


class OpCostEntry(ApiModel):
    """
    Operational costs and production for one (month, year).

    Business Rules:
    - auto_op_cost_per_kg = total costs / total production (0 without production)
    - use_manual_op_cost selects manual_op_cost_per_kg, but only when a manual
      value is actually present; otherwise the automatic figure applies

    Attributes:
        id: Entry identifier
        month: Month name (e.g. "March")
        year: Calendar year
        costs: Fixed expenses for the month
        production: Production for the month
        auto_op_cost_per_kg: Stored automatic cost per kg
        manual_op_cost_per_kg: Optional manual override
        use_manual_op_cost: Whether the override is selected
    """
    id: Optional[str] = record_id(description="Entry identifier")
    month: str = Field(..., description="Month name")
    year: int = Field(..., description="Calendar year", ge=1900)
    costs: MonthlyCosts = Field(default_factory=MonthlyCosts)
    production: MonthlyProduction = Field(default_factory=MonthlyProduction)
    auto_op_cost_per_kg: float = Field(default=0.0, description="Automatic cost per kg")
    manual_op_cost_per_kg: Optional[float] = Field(None, description="Manual cost per kg")
    use_manual_op_cost: bool = Field(default=False, description="Use manual cost per kg")

    @field_validator("month", mode="before")
    @classmethod
    def normalize_month(cls, v: Any) -> Any:
        """Accept month numbers 1-12 or any casing of the month name."""
        if isinstance(v, int) and not isinstance(v, bool):
            if 1 <= v <= 12:
                return MONTH_NAMES[v - 1]
            raise ValueError(f"Month number must be between 1 and 12, got {v}")
        if isinstance(v, str):
            name = v.strip().title()
            if name not in MONTH_NAMES:
                raise ValueError(f"Unknown month '{v}'")
            return name
        return v

    @property
    def month_number(self) -> int:
        """Month as 1-12."""
        return MONTH_NAMES.index(self.month) + 1

    @property
    def period_label(self) -> str:
        """Display label, e.g. 'March 2025'."""
        return f"{self.month} {self.year}"

    def __str__(self) -> str:
        """String representation."""
        mode = "manual" if self.use_manual_op_cost else "auto"
        return f"OP Cost {self.period_label} ({mode}): auto {self.auto_op_cost_per_kg:.2f}/kg"
