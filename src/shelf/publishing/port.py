"""Event sink port: where shelf events go after a successful action.

Publishing is fire-and-forget: the caller of the dispatcher notifies the
sink once the action has committed, and a delivery failure never undoes the
stock change.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class EventKind(Enum):
    NEW = "NEW"
    ADD = "ADD"
    TAKE = "TAKE"


@dataclass(frozen=True)
class ShelfEvent:
    """Something happened to a menu item on the shelf.

    ``quantity`` is the quantity involved in the change: the initial stock
    for NEW, the amount added or taken for ADD and TAKE.
    """

    kind: EventKind
    item_id: int
    quantity: int

    def to_dict(self) -> dict:
        return {"event_type": self.kind.value, "item_id": self.item_id, "quantity": self.quantity}


class EventSink(ABC):
    """Abstract interface for event sink adapters."""

    @abstractmethod
    def publish(self, event: ShelfEvent) -> None:
        """Hand the event over for delivery."""
        ...
