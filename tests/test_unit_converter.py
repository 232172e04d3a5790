"""Tests for unit conversion."""

import logging
import warnings

import pytest

from hanuram_costing.config import CostingConfig
from hanuram_costing.costs import UnitConverter
from hanuram_costing.exceptions import UnitConversionError
from hanuram_costing.validation import parse_unit_conversions


class TestUnitConverter:
    """Tests for UnitConverter."""

    def test_identity_conversion(self, conversions):
        """Same unit returns the quantity without lookup."""
        converter = UnitConverter()
        assert converter.convert(7.25, "kg", "kg", conversions) == 7.25
        assert converter.convert(7.25, "pcs", "pcs", []) == 7.25

    def test_known_conversion_applies_factor(self, conversions):
        """kg -> g multiplies by 1000."""
        converter = UnitConverter()
        assert converter.convert(2, "kg", "g", conversions) == 2000

    def test_reverse_direction_uses_its_own_entry(self, conversions):
        """g -> kg uses the g -> kg factor, not an inverted kg -> g."""
        converter = UnitConverter()
        assert converter.convert(500, "g", "kg", conversions) == pytest.approx(0.5)

    def test_unknown_conversion_is_noop(self):
        """Missing pair passes the quantity through with a warning."""
        converter = UnitConverter()
        with pytest.warns(UserWarning, match="No unit conversion"):
            assert converter.convert(5, "kg", "lb", []) == 5

    def test_no_reverse_inference(self, conversions):
        """ml -> ltr is not inferred from ltr -> ml."""
        converter = UnitConverter()
        with pytest.warns(UserWarning):
            result = converter.convert_with_status(250, "ml", "ltr", conversions)
        assert result.quantity == 250
        assert result.converted is False

    def test_no_transitive_chaining(self):
        """kg -> g -> mg is not chained."""
        chain = [
            {"fromUnitId": "kg", "toUnitId": "g", "conversionFactor": 1000},
            {"fromUnitId": "g", "toUnitId": "mg", "conversionFactor": 1000},
        ]
        converter = UnitConverter()
        with pytest.warns(UserWarning):
            assert converter.convert(1, "kg", "mg", parse_unit_conversions(chain)) == 1

    def test_missing_pair_warned_once(self, caplog):
        """Repeated misses for the same pair are reported once."""
        converter = UnitConverter()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            with caplog.at_level(logging.WARNING):
                converter.convert(1, "box", "kg", [])
                converter.convert(2, "box", "kg", [])
        assert len(caught) == 1
        assert len([r for r in caplog.records if "box" in r.getMessage()]) == 1

    def test_strict_mode_raises(self):
        """strict_conversions turns the fallback into an error."""
        converter = UnitConverter(CostingConfig(strict_conversions=True))
        with pytest.raises(UnitConversionError) as exc_info:
            converter.convert(5, "kg", "lb", [])
        assert exc_info.value.from_unit_id == "kg"
        assert exc_info.value.to_unit_id == "lb"

    def test_strict_mode_identity_still_allowed(self):
        """Identity needs no conversion entry even in strict mode."""
        converter = UnitConverter(CostingConfig(strict_conversions=True))
        assert converter.convert(3, "kg", "kg", []) == 3
