"""Reporting tables built from cost results."""

from .cost_reports import cost_breakdown_table, op_cost_summary_table, recipe_items_table

__all__ = [
    "cost_breakdown_table",
    "op_cost_summary_table",
    "recipe_items_table",
]
