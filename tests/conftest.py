"""Pytest configuration and shared fixtures."""

import os

import pytest

from hanuram_costing.models import (
    Labour,
    LabourPhase,
    MonthlyCosts,
    MonthlyProduction,
    OpCostEntry,
    PackagingCost,
    Recipe,
    RecipeItem,
    RecipeLabour,
    UnitConversion,
)


@pytest.fixture(autouse=True)
def clean_costing_environment(monkeypatch):
    """Keep HANURAM_* variables from the shell out of CostingConfig defaults."""
    for name in list(os.environ):
        if name.upper().startswith("HANURAM_"):
            monkeypatch.delenv(name)


@pytest.fixture
def conversions():
    """Fixture for kg/g/litre conversions."""
    return [
        UnitConversion(from_unit_id="kg", to_unit_id="g", conversion_factor=1000),
        UnitConversion(from_unit_id="g", to_unit_id="kg", conversion_factor=0.001),
        UnitConversion(from_unit_id="ltr", to_unit_id="ml", conversion_factor=1000),
    ]


@pytest.fixture
def recipe_items():
    """Two raw material lines totalling 9500."""
    return [
        RecipeItem(
            raw_material_id="RM1",
            raw_material_name="Cashew",
            quantity=60.0,
            unit_id="kg",
            price=100.0,
        ),
        RecipeItem(
            raw_material_id="RM2",
            raw_material_name="Sugar",
            quantity=40.0,
            unit_id="kg",
            price=87.5,
        ),
    ]


@pytest.fixture
def recipe(recipe_items):
    """Kaju katli: 100 kg batch yielding 95 kg, stored totals not yet computed."""
    return Recipe(
        id="REC1",
        code="RC001",
        name="Kaju Katli",
        batch_size=100.0,
        unit_id="kg",
        unit_name="Kg",
        yield_quantity=95.0,
        items=recipe_items,
    )


@pytest.fixture
def production_labour():
    """One production worker at 570/day."""
    return [
        RecipeLabour(
            id="RL1",
            recipe_id="REC1",
            labour_id="LAB1",
            type=LabourPhase.PRODUCTION,
            salary_per_day=570.0,
        ),
    ]


@pytest.fixture
def packing_labour():
    """One packer at 190/day."""
    return [
        RecipeLabour(
            id="RL2",
            recipe_id="REC1",
            labour_id="LAB2",
            type=LabourPhase.PACKING,
            salary_per_day=190.0,
        ),
    ]


@pytest.fixture
def packaging_costs():
    """Packaging entries totalling 95."""
    return [
        PackagingCost(id="PC1", recipe_id="REC1", type="Shipper box", cost=60.0, quantity=10),
        PackagingCost(id="PC2", recipe_id="REC1", type="Stickers", cost=35.0, quantity=200),
    ]


@pytest.fixture
def labour():
    """Labour master record."""
    return Labour(id="LAB1", code="L001", name="Ramesh", department="Kitchen", salary_per_day=600.0)


@pytest.fixture
def op_cost_entry():
    """March 2025: 60,000 of expenses over 1,500 kg."""
    return OpCostEntry(
        id="OP1",
        month="March",
        year=2025,
        costs=MonthlyCosts(rent=50000.0, electricity=10000.0),
        production=MonthlyProduction(mithai_production=1000.0, namkeen_production=500.0),
    )
