"""Shared pydantic configuration: snake_case in Python, camelCase on the wire."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from tracker.application.row_mapping import format_timestamp

# Millisecond UTC on the wire, the same text the store holds: 2024-01-15T10:00:00.000Z
Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str, when_used="json")]


class CamelModel(BaseModel):
    """Base DTO: accepts both naming styles, serializes with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
