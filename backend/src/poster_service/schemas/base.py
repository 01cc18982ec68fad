"""Base models for record request and response bodies.

Clients speak camelCase (``expertId``, ``createdAt``); Python code uses
snake_case attributes. The alias generator bridges the two, and
``populate_by_name`` lets requests use either spelling.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordRead(CamelModel):
    """Fields every stored record carries: identity and the two timestamps."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime
