"""Item API schemas. Prices and rates are Decimal in storage, numbers on the wire."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from pydantic import Field, field_serializer, field_validator
from pydantic_core import PydanticCustomError

from poms.schemas.base import CamelModel, empty_to_none

_CENTS = Decimal("0.01")
# Numeric(12, 2) column bound.
MAX_BASE_PRICE = Decimal("9999999999.99")


def _to_decimal(value: Any) -> Decimal | None:
    value = empty_to_none(value)
    if value is None or isinstance(value, bool):
        return None
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


class ItemRequest(CamelModel):
    """Request body for creating or updating an item.

    partyId must name a supplier of the same company; that is checked by the
    endpoint, not here.
    """

    party_id: str = Field(default=None, validate_default=True)
    name: str = Field(default=None, validate_default=True)
    description: str | None = None
    sku: str | None = None
    unit: str | None = None
    hsn_code: str | None = None
    base_price: Decimal = Field(default=None, validate_default=True)
    gst_rate: Decimal = Field(default=None, validate_default=True)

    @field_validator("party_id", mode="before")
    @classmethod
    def validate_party_id(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("party_required", "partyId is required")
        return v.strip()

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("item_name_required", "Item name is required")
        return v.strip()

    @field_validator("description", "sku", "unit", "hsn_code", mode="before")
    @classmethod
    def strip_optional(cls, v: Any) -> Any:
        v = empty_to_none(v)
        return v.strip() if isinstance(v, str) else v

    @field_validator("base_price", mode="before")
    @classmethod
    def validate_base_price(cls, v: Any) -> Decimal:
        price = _to_decimal(v)
        if price is None or price < 0:
            raise PydanticCustomError(
                "invalid_base_price", "Base price must be a non-negative number"
            )
        if price > MAX_BASE_PRICE:
            raise PydanticCustomError(
                "base_price_too_large",
                "Base price must be at most {max_price}",
                {"max_price": str(MAX_BASE_PRICE)},
            )
        return price.quantize(_CENTS, rounding=ROUND_HALF_UP)

    @field_validator("gst_rate", mode="before")
    @classmethod
    def validate_gst_rate(cls, v: Any) -> Decimal:
        rate = _to_decimal(v)
        if rate is None or rate < 0 or rate > 100:
            raise PydanticCustomError("invalid_gst_rate", "GST rate must be between 0 and 100")
        return rate.quantize(_CENTS, rounding=ROUND_HALF_UP)


class ItemResponse(CamelModel):
    id: str
    company_id: str
    party_id: str | None = None
    name: str
    description: str | None = None
    sku: str | None = None
    unit: str | None = None
    hsn_code: str | None = None
    base_price: Decimal
    gst_rate: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_serializer("base_price", "gst_rate")
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)
