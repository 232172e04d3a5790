"""Shared pydantic configuration for API-backed entities."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base for entities exchanged with the business API.

    Attributes are snake_case in Python; payloads use camelCase keys, and
    both spellings validate.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def record_id(required: bool = False, description: str = "Record identifier"):
    """Field for a record id that also accepts the document store's '_id' key."""
    return Field(
        ... if required else None,
        validation_alias=AliasChoices("id", "_id"),
        description=description,
    )
