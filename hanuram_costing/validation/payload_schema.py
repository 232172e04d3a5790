"""
Validated boundary for payloads from the business API.

Architecture:
    REST JSON → parse_* (VALIDATION) → pydantic models → cost calculators

The calculators assume well-formed models; everything loosely typed in a
payload (camelCase keys, '_id' fields, numeric strings, nulls) is settled
here, and failures surface as PayloadValidationError with the entity name.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from hanuram_costing.exceptions import PayloadValidationError
from hanuram_costing.models import (
    Labour,
    OpCostEntry,
    PackagingCost,
    RawMaterial,
    Recipe,
    RecipeItem,
    RecipeLabour,
    UnitConversion,
    VendorPrice,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def unwrap_response(payload: Any) -> Any:
    """
    Strip the API envelope {"success": ..., "data": ...} if present.

    Raises:
        PayloadValidationError: If the envelope reports success=false
    """
    if isinstance(payload, Mapping) and "success" in payload and "data" in payload:
        if not payload.get("success"):
            raise PayloadValidationError(
                "response",
                [{"loc": ("success",), "msg": payload.get("message", "request failed")}]
            )
        return payload["data"]
    return payload


def parse_one(model: Type[ModelT], payload: Any, entity: str) -> ModelT:
    """Validate a single object payload into a model."""
    try:
        return model.model_validate(unwrap_response(payload))
    except ValidationError as e:
        logger.warning(f"Rejected {entity} payload: {e.error_count()} error(s)")
        raise PayloadValidationError(entity, e.errors()) from e


def parse_many(model: Type[ModelT], payload: Any, entity: str) -> List[ModelT]:
    """Validate a list payload into models (null data gives an empty list)."""
    data = unwrap_response(payload)
    if data is None:
        return []
    try:
        return TypeAdapter(List[model]).validate_python(data)
    except ValidationError as e:
        logger.warning(f"Rejected {entity} payload: {e.error_count()} error(s)")
        raise PayloadValidationError(entity, e.errors()) from e


def parse_recipe(payload: Any) -> Recipe:
    """Parse a recipe with its items."""
    return parse_one(Recipe, payload, "recipe")


def parse_recipe_items(payload: Any) -> List[RecipeItem]:
    return parse_many(RecipeItem, payload, "recipe item")


def parse_recipe_labour(payload: Any) -> List[RecipeLabour]:
    """
    Parse recipe labour assignments.

    The API nests the labour record under 'labour' and may omit labourId;
    the id is taken from the nested record in that case.
    """
    data = unwrap_response(payload)
    if data is None:
        return []
    return parse_many(RecipeLabour, [_flatten_labour(entry) for entry in data], "recipe labour")


def _flatten_labour(entry: Any) -> Any:
    if not isinstance(entry, Mapping):
        return entry
    nested = entry.get("labour")
    if not isinstance(nested, Mapping):
        return entry
    flat: Dict[str, Any] = {k: v for k, v in entry.items() if k != "labour"}
    flat.setdefault("labourId", nested.get("id") or nested.get("_id"))
    flat.setdefault("labourName", nested.get("name"))
    flat.setdefault("department", nested.get("department"))
    if flat.get("salaryPerDay") is None and "salaryPerDay" in nested:
        flat["salaryPerDay"] = nested["salaryPerDay"]
    return flat


def parse_packaging_costs(payload: Any) -> List[PackagingCost]:
    return parse_many(PackagingCost, payload, "packaging cost")


def parse_op_cost_entry(payload: Any) -> OpCostEntry:
    return parse_one(OpCostEntry, payload, "op cost")


def parse_op_cost_entries(payload: Any) -> List[OpCostEntry]:
    return parse_many(OpCostEntry, payload, "op cost")


def parse_unit_conversions(payload: Any) -> List[UnitConversion]:
    return parse_many(UnitConversion, payload, "unit conversion")


def parse_labour(payload: Any) -> List[Labour]:
    return parse_many(Labour, payload, "labour")


def parse_raw_materials(payload: Any) -> List[RawMaterial]:
    return parse_many(RawMaterial, payload, "raw material")


def parse_vendor_prices(payload: Any) -> List[VendorPrice]:
    return parse_many(VendorPrice, payload, "vendor price")


def dump_for_api(models: Iterable[BaseModel]) -> List[Dict[str, Any]]:
    """Serialize models back to camelCase dicts for the API."""
    return [m.model_dump(by_alias=True, mode="json") for m in models]
