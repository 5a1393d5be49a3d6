"""Pydantic request/response schemas for the Shelf API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from shelf.item.actions import AdjustmentDirection

ITEM_ID_MIN = 1000


class UpdateType(Enum):
    ADD = "ADD"
    TAKE = "TAKE"

    @property
    def direction(self) -> AdjustmentDirection:
        if self is UpdateType.ADD:
            return AdjustmentDirection.INCREASE
        return AdjustmentDirection.DECREASE


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddItemOnShelfRequest(BaseModel):
    item_id: int = Field(ge=ITEM_ID_MIN)
    item_name: str = Field(max_length=255)
    quantity: int = Field(ge=1)

    @field_validator("item_name")
    @classmethod
    def item_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class UpdateItemOnShelfRequest(BaseModel):
    update_type: UpdateType
    quantity: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ShelfItemResponse(BaseModel):
    item_id: int
    item_name: str
    quantity: int
    version: int
    updated_at: datetime | None = None
