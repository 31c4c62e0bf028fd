"""
Wire models for the receipt points API.

Field names on the wire are camelCase; Python attributes are snake_case.
Missing fields fall back to their zero value, unknown fields are ignored.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """A single purchased line item."""
    description: str = Field("", strict=True)
    price: float = Field(0.0, strict=True, allow_inf_nan=False)


class Receipt(BaseModel):
    """A purchase receipt submitted for scoring."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: str = Field("", strict=True)
    total: float = Field(0.0, strict=True, allow_inf_nan=False)
    purchase_date: str = Field(
        "", alias="purchaseDate", strict=True, description="YYYY-MM-DD"
    )
    purchase_time: str = Field(
        "", alias="purchaseTime", strict=True, description="HH:MM, 24-hour clock"
    )
    items: list[Item] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int
