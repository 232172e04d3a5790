"""Exceptions raised by the costing library."""

from typing import Any, List, Optional


class CostingError(Exception):
    """Base class for costing errors."""
    pass


class InvalidInput(CostingError, ValueError):
    """Raised for negative quantities or prices in line costing."""
    pass


class UnitConversionError(CostingError, LookupError):
    """Raised in strict mode when no conversion exists for a unit pair."""

    def __init__(self, from_unit_id: str, to_unit_id: str):
        self.from_unit_id = from_unit_id
        self.to_unit_id = to_unit_id
        super().__init__(f"No unit conversion defined from '{from_unit_id}' to '{to_unit_id}'")


class PayloadValidationError(CostingError, ValueError):
    """Raised when a collaborator payload fails schema validation."""

    def __init__(self, entity: str, errors: Optional[List[Any]] = None):
        self.entity = entity
        self.errors = errors or []
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in self.errors
            if isinstance(err, dict)
        )
        message = f"Invalid {entity} payload"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)
