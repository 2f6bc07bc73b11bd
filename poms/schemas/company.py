"""Company API schemas."""

import re
from datetime import datetime
from typing import Any

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from poms.domain.enums import GstType
from poms.schemas.base import CamelModel, empty_to_none
from poms.schemas.party import PartyResponse

GSTIN_PATTERN = re.compile(r"^[0-9A-Z]{15}$")
PAN_PATTERN = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN = re.compile(r"^https?://.+")

_OPTIONAL_TEXT = ("address", "state_code", "phone")


class CompanyPayload(CamelModel):
    """Fields shared by create and update.

    Blank optional fields are stored as NULL. PAN is upper-cased before the
    format check.
    """

    name: str = Field(default=None, validate_default=True)
    gstin: str | None = None
    pan: str | None = None
    address: str | None = None
    state_code: str | None = Field(default=None, max_length=5)
    email: str | None = None
    phone: str | None = Field(default=None, max_length=20)
    logo_url: str | None = None
    gst_type: GstType = GstType.INTRA_STATE

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("company_name_required", "Company name is required")
        return v.strip()

    @field_validator(*_OPTIONAL_TEXT, mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        return empty_to_none(v)

    @field_validator("gstin", mode="before")
    @classmethod
    def validate_gstin(cls, v: Any) -> str | None:
        v = empty_to_none(v)
        if v is None:
            return None
        if not isinstance(v, str) or not GSTIN_PATTERN.match(v):
            raise PydanticCustomError(
                "invalid_gstin",
                "GSTIN must be 15 characters (numbers or uppercase letters)",
            )
        return v

    @field_validator("pan", mode="before")
    @classmethod
    def validate_pan(cls, v: Any) -> str | None:
        v = empty_to_none(v)
        if v is None:
            return None
        if not isinstance(v, str) or not PAN_PATTERN.match(v.upper()):
            raise PydanticCustomError("invalid_pan", "Invalid PAN format")
        return v.upper()

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: Any) -> str | None:
        v = empty_to_none(v)
        if v is None:
            return None
        if not isinstance(v, str) or not EMAIL_PATTERN.match(v):
            raise PydanticCustomError("invalid_email", "Invalid email format")
        return v

    @field_validator("logo_url", mode="before")
    @classmethod
    def validate_logo_url(cls, v: Any) -> str | None:
        v = empty_to_none(v)
        if v is None:
            return None
        if not isinstance(v, str) or not URL_PATTERN.match(v):
            raise PydanticCustomError("invalid_logo_url", "Invalid logo URL")
        return v


class CompanyCreateRequest(CompanyPayload):
    """Request body for POST /api/companies."""


class CompanyUpdateRequest(CompanyPayload):
    """Request body for PUT /api/companies?id= (full replacement; blanks clear fields)."""


class CompanyResponse(CamelModel):
    id: str
    name: str
    gstin: str | None = None
    pan: str | None = None
    address: str | None = None
    state_code: str | None = None
    email: str | None = None
    phone: str | None = None
    logo_url: str | None = None
    gst_type: GstType
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CompanyDetailResponse(CompanyResponse):
    """Company with its suppliers, newest first."""

    parties: list[PartyResponse] = Field(default_factory=list)
