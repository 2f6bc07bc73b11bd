"""Supplier (party) API schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from poms.schemas.base import CamelModel, empty_to_none


class PartyRequest(CamelModel):
    """Request body for creating or replacing a supplier."""

    name: str = Field(default=None, validate_default=True)
    gstin: str | None = Field(default=None, max_length=15)
    phone: str | None = Field(default=None, max_length=20)
    email: str | None = None
    address: str | None = None
    state_code: str | None = Field(default=None, max_length=5)
    is_registered_gst: bool = True

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("supplier_name_required", "Supplier name is required")
        return v.strip()

    @field_validator("gstin", "phone", "email", "address", "state_code", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        return empty_to_none(v)

    @field_validator("is_registered_gst", mode="before")
    @classmethod
    def default_registered(cls, v: Any) -> Any:
        return True if v is None else v


class PartyResponse(CamelModel):
    id: str
    name: str
    gstin: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    state_code: str | None = None
    is_registered_gst: bool
    created_at: datetime | None = None
