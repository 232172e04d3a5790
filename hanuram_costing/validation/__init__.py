"""Validation of collaborator payloads and costing data."""

from .payload_schema import (
    dump_for_api,
    parse_labour,
    parse_op_cost_entries,
    parse_op_cost_entry,
    parse_packaging_costs,
    parse_raw_materials,
    parse_recipe,
    parse_recipe_items,
    parse_recipe_labour,
    parse_unit_conversions,
    parse_vendor_prices,
    unwrap_response,
)
from .costing_validator import CostingDataValidator, ValidationIssue, ValidationSeverity

__all__ = [
    "dump_for_api",
    "parse_labour",
    "parse_op_cost_entries",
    "parse_op_cost_entry",
    "parse_packaging_costs",
    "parse_raw_materials",
    "parse_recipe",
    "parse_recipe_items",
    "parse_recipe_labour",
    "parse_unit_conversions",
    "parse_vendor_prices",
    "unwrap_response",
    "CostingDataValidator",
    "ValidationIssue",
    "ValidationSeverity",
]
