"""Shared base for API schemas: snake_case in Python, camelCase on the wire."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model; accepts both camelCase and snake_case input, emits camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DataResponse(CamelModel, Generic[T]):
    """Envelope for successful payloads: {"data": ...}."""

    data: T


def empty_to_none(value: object) -> object:
    """Blank strings clear optional text fields."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
