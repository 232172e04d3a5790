"""Unit of measure conversion.

Looks up a directional conversion factor and applies it. A pair without a
conversion passes the quantity through unchanged; that case is logged and
warned about once per pair, or raised in strict mode.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Iterable, Optional, Set, Tuple

from hanuram_costing.config import CostingConfig
from hanuram_costing.exceptions import UnitConversionError
from hanuram_costing.models.unit import UnitConversion

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Converted quantity and whether a conversion was actually applied."""
    quantity: float
    converted: bool


class UnitConverter:
    """
    Converts quantities between units using pairwise factors.

    Only exact-direction entries are used: no reverse factor inference and
    no chaining through an intermediate unit.

    Example:
        converter = UnitConverter()
        grams = converter.convert(2, "kg", "g", conversions)
    """

    def __init__(self, config: Optional[CostingConfig] = None):
        """
        Initialize unit converter.

        Args:
            config: Costing options (strict_conversions selects raise vs warn)
        """
        self.config = config or CostingConfig()
        self._missing_pairs_logged: Set[Tuple[str, str]] = set()

    def convert(
        self,
        quantity: float,
        from_unit_id: str,
        to_unit_id: str,
        conversions: Iterable[UnitConversion]
    ) -> float:
        """
        Convert a quantity from one unit to another.

        Args:
            quantity: Quantity in the source unit
            from_unit_id: Source unit
            to_unit_id: Target unit
            conversions: Available conversion factors

        Returns:
            Quantity in the target unit, or the unchanged quantity when no
            conversion exists

        Raises:
            UnitConversionError: If strict_conversions is set and no conversion exists
        """
        return self.convert_with_status(quantity, from_unit_id, to_unit_id, conversions).quantity

    def convert_with_status(
        self,
        quantity: float,
        from_unit_id: str,
        to_unit_id: str,
        conversions: Iterable[UnitConversion]
    ) -> ConversionResult:
        """Convert and report whether the result is in the target unit."""
        if from_unit_id == to_unit_id:
            return ConversionResult(quantity=quantity, converted=True)

        factor = self.find_factor(from_unit_id, to_unit_id, conversions)
        if factor is None:
            if self.config.strict_conversions:
                raise UnitConversionError(from_unit_id, to_unit_id)
            self._report_missing(from_unit_id, to_unit_id)
            return ConversionResult(quantity=quantity, converted=False)

        return ConversionResult(quantity=quantity * factor, converted=True)

    @staticmethod
    def find_factor(
        from_unit_id: str,
        to_unit_id: str,
        conversions: Iterable[UnitConversion]
    ) -> Optional[float]:
        """Return the factor for the exact (from, to) pair, or None."""
        for conversion in conversions or ():
            if conversion.from_unit_id == from_unit_id and conversion.to_unit_id == to_unit_id:
                return conversion.conversion_factor
        return None

    def _report_missing(self, from_unit_id: str, to_unit_id: str) -> None:
        pair = (from_unit_id, to_unit_id)
        if pair in self._missing_pairs_logged:
            return
        self._missing_pairs_logged.add(pair)
        message = (
            f"No unit conversion from '{from_unit_id}' to '{to_unit_id}'. "
            f"Quantity passed through unconverted; add the conversion to avoid costing errors."
        )
        logger.warning(message)
        warnings.warn(message, UserWarning)
