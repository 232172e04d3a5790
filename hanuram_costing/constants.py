"""Centralized constants for cost calculations.

Currency handling, operational cost categories, and production lines used
across the calculators and the payload schemas.
"""

# ============================================================================
# CURRENCY
# ============================================================================

#: Decimal places kept for every stored or displayed monetary figure
CURRENCY_DECIMAL_PLACES = 2

#: Symbol used when formatting costs for display
CURRENCY_SYMBOL = "₹"


# ============================================================================
# OPERATIONAL COSTS
# ============================================================================

#: Fixed monthly expense categories (attribute names on MonthlyCosts)
OP_COST_FIELDS = (
    "rent",
    "fixed_salary",
    "electricity",
    "marketing",
    "logistics",
    "insurance",
    "vehicle_installments",
    "travel_cost",
    "miscellaneous",
    "other_costs",
    "equipment_maintenance",
    "internet_charges",
    "telephone_bills",
)

#: Production lines whose monthly output (kg) absorbs the operational cost
PRODUCTION_LINES = (
    "mithai_production",
    "namkeen_production",
)

#: Month names as stored on operational cost entries
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


# ============================================================================
# REPORTING
# ============================================================================

#: Display labels for the landed cost components, in breakdown order
COST_COMPONENT_LABELS = {
    "raw_material": "Raw Material Cost",
    "production_labour": "Production Labour Cost",
    "packing_labour": "Packing Labour Cost",
    "packaging": "Packaging & Handling Cost",
}
