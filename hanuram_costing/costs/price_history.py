"""Recipe cost history comparison.

Recipes are re-priced whenever raw material prices change; a snapshot keeps
the costs as they were so two points in time can be compared.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from hanuram_costing.models.recipe import Recipe, RecipeItem
from hanuram_costing.rounding import round_currency, safe_divide, to_decimal


class RecipeCostSnapshot(BaseModel):
    """
    Recipe costs captured at one moment.

    Attributes:
        recipe_id: Recipe the snapshot belongs to
        captured_at: Capture time
        total_raw_material_cost: Raw material cost per batch at capture
        price_per_unit: Raw material cost per output unit at capture
        items: Lines with the prices at capture
    """
    recipe_id: Optional[str] = Field(None, description="Recipe ID")
    captured_at: datetime = Field(default_factory=datetime.now, description="Capture time")
    total_raw_material_cost: float = Field(default=0.0, description="Raw material cost per batch")
    price_per_unit: float = Field(default=0.0, description="Raw material cost per unit")
    items: List[RecipeItem] = Field(default_factory=list, description="Lines at capture")

    @classmethod
    def of(cls, recipe: Recipe, captured_at: Optional[datetime] = None) -> "RecipeCostSnapshot":
        """Capture a recipe's current stored costs."""
        return cls(
            recipe_id=recipe.id,
            captured_at=captured_at or datetime.now(),
            total_raw_material_cost=recipe.total_raw_material_cost,
            price_per_unit=recipe.price_per_unit,
            items=[item.model_copy() for item in recipe.items],
        )




class ItemChangeType(str, Enum):
    """Kind of difference found for one raw material line."""
    PRICE = "price_change"
    QUANTITY = "quantity_change"
    VENDOR = "vendor_change"
    ADDED = "item_added"
    REMOVED = "item_removed"


@dataclass
class ItemChange:
    """
    One difference in a recipe line between two snapshots.

    Attributes:
        raw_material_id: Raw material of the line
        raw_material_name: Display name, when known
        change_type: What changed
        old_value: Value in the earlier snapshot (None for added lines)
        new_value: Value in the later snapshot (None for removed lines)
        change: new - old for price and quantity changes, else None
    """
    raw_material_id: str
    raw_material_name: Optional[str]
    change_type: ItemChangeType
    old_value: Optional[Union[float, str]] = None
    new_value: Optional[Union[float, str]] = None
    change: Optional[float] = None


@dataclass
class SnapshotComparison:
    """
    Difference between an earlier and a later snapshot.

    Attributes:
        cost_change: Later total minus earlier total
        percent_change: cost_change as a percentage of the earlier total
            (0 when the earlier total is 0)
        item_changes: Price, quantity and vendor changes of lines present in
            both snapshots, then lines removed, then lines added
    """
    previous_total: float = 0.0
    current_total: float = 0.0
    cost_change: float = 0.0
    percent_change: float = 0.0
    item_changes: List[ItemChange] = field(default_factory=list)

    @property
    def increased(self) -> bool:
        return self.cost_change > 0

    def changes_of(self, change_type: ItemChangeType) -> List[ItemChange]:
        """Item changes of one kind."""
        return [c for c in self.item_changes if c.change_type == change_type]


def _line_changes(old: RecipeItem, new: RecipeItem) -> List[ItemChange]:
    changes = []
    name = new.raw_material_name or old.raw_material_name

    if old.price != new.price:
        changes.append(ItemChange(
            raw_material_id=new.raw_material_id,
            raw_material_name=name,
            change_type=ItemChangeType.PRICE,
            old_value=old.price,
            new_value=new.price,
            change=round_currency(to_decimal(new.price) - to_decimal(old.price)),
        ))
    if old.quantity != new.quantity:
        changes.append(ItemChange(
            raw_material_id=new.raw_material_id,
            raw_material_name=name,
            change_type=ItemChangeType.QUANTITY,
            old_value=old.quantity,
            new_value=new.quantity,
            change=float(to_decimal(new.quantity) - to_decimal(old.quantity)),
        ))
    if (old.vendor_name or None) != (new.vendor_name or None):
        changes.append(ItemChange(
            raw_material_id=new.raw_material_id,
            raw_material_name=name,
            change_type=ItemChangeType.VENDOR,
            old_value=old.vendor_name,
            new_value=new.vendor_name,
        ))
    return changes


def compare_snapshots(previous: RecipeCostSnapshot, current: RecipeCostSnapshot) -> SnapshotComparison:
    """
    Compare two snapshots of the same recipe.

    Lines are matched by raw material. Lines in both snapshots report price,
    quantity and vendor changes; unmatched lines are reported as removed
    (only in previous) or added (only in current).

    Args:
        previous: Earlier snapshot
        current: Later snapshot

    Returns:
        Total and per-item changes
    """
    change = to_decimal(current.total_raw_material_cost) - to_decimal(previous.total_raw_material_cost)

    old_items: Dict[str, RecipeItem] = {item.raw_material_id: item for item in previous.items}
    new_items: Dict[str, RecipeItem] = {item.raw_material_id: item for item in current.items}

    item_changes: List[ItemChange] = []
    for item in current.items:
        old = old_items.get(item.raw_material_id)
        if old is not None:
            item_changes.extend(_line_changes(old, item))

    for item in previous.items:
        if item.raw_material_id not in new_items:
            item_changes.append(ItemChange(
                raw_material_id=item.raw_material_id,
                raw_material_name=item.raw_material_name,
                change_type=ItemChangeType.REMOVED,
                old_value=item.quantity,
            ))

    for item in current.items:
        if item.raw_material_id not in old_items:
            item_changes.append(ItemChange(
                raw_material_id=item.raw_material_id,
                raw_material_name=item.raw_material_name,
                change_type=ItemChangeType.ADDED,
                new_value=item.quantity,
            ))

    return SnapshotComparison(
        previous_total=previous.total_raw_material_cost,
        current_total=current.total_raw_material_cost,
        cost_change=round_currency(change),
        percent_change=safe_divide(change * 100, previous.total_raw_material_cost),
        item_changes=item_changes,
    )


def latest_two(snapshots: List[RecipeCostSnapshot]) -> Optional[SnapshotComparison]:
    """Compare the two most recent snapshots, or None with fewer than two."""
    if len(snapshots) < 2:
        return None
    ordered = sorted(snapshots, key=lambda s: s.captured_at, reverse=True)
    return compare_snapshots(previous=ordered[1], current=ordered[0])
