"""
Shared schema building blocks.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising snake_case attributes as camelCase keys.

    ``populate_by_name`` lets services construct models with Python
    attribute names while rows coming from the store (already camelCase)
    validate through the aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Acknowledgement returned by write endpoints."""

    message: str = Field(..., example="Data saved successfully")
