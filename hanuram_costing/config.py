"""Runtime options for the cost calculators."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hanuram_costing.constants import CURRENCY_DECIMAL_PLACES, CURRENCY_SYMBOL


class CostingConfig(BaseSettings):
    """
    Options shared by all calculators.

    Values not passed explicitly are read from HANURAM_* environment
    variables (HANURAM_DECIMAL_PLACES, HANURAM_CURRENCY_SYMBOL,
    HANURAM_STRICT_CONVERSIONS, HANURAM_DEFAULT_OUTPUT_TO_BATCH_SIZE),
    falling back to the defaults below.

    Attributes:
        decimal_places: Rounding precision for monetary results
        currency_symbol: Symbol used in string representations and reports
        strict_conversions: Raise UnitConversionError when a unit pair has no
            conversion instead of passing the quantity through with a warning
        default_output_to_batch_size: Use the batch size as output quantity
            when a recipe has no yield recorded
    """
    model_config = SettingsConfigDict(env_prefix="HANURAM_", case_sensitive=False)

    decimal_places: int = Field(
        default=CURRENCY_DECIMAL_PLACES,
        description="Decimal places for monetary rounding",
        ge=0,
        le=6
    )
    currency_symbol: str = Field(
        default=CURRENCY_SYMBOL,
        description="Currency symbol for display"
    )
    strict_conversions: bool = Field(
        default=False,
        description="Raise on missing unit conversions instead of warning"
    )
    default_output_to_batch_size: bool = Field(
        default=True,
        description="Fall back to batch size when output quantity is missing"
    )

    def format_amount(self, amount: float) -> str:
        """Format an amount with the configured symbol and precision."""
        return f"{self.currency_symbol}{amount:,.{self.decimal_places}f}"
