"""
Shared pydantic configuration for API payloads.

Python attributes are snake_case; the JSON wire format (and the layout
persisted by the stores) uses camelCase, e.g. ``created_at`` is sent
as ``createdAt``.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RecordModel(CamelModel):
    """Base for stored records; immutable once created."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
