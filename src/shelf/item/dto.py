"""Read model handed out by handlers and the query service."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ShelfItemDto:
    item_id: int
    item_name: str
    quantity: int
    version: int
    updated_at: datetime | None = None

    @classmethod
    def from_item(cls, item) -> "ShelfItemDto":
        return cls(
            item_id=item.item_id,
            item_name=item.item_name,
            quantity=item.quantity,
            version=item.version,
            updated_at=item.updated_at,
        )
