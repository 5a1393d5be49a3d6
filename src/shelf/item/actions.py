"""Shelf actions: the intents the dispatcher routes to handlers.

Actions are Protean commands: immutable once built and validated on
construction. ``ShelfAction`` is the closed set of variants.

They are routed by ``ShelfActionDispatcher``, not ``current_domain.process``,
so no Protean command handler is registered for them and ``shelf.init()``
reports each one as having no registered handler.
"""

from enum import Enum

from protean.fields import Integer, String

from shelf.domain import shelf


class AdjustmentDirection(Enum):
    INCREASE = "Increase"
    DECREASE = "Decrease"


@shelf.command(part_of="ShelfItem")
class CreateItemOnShelf:
    """Put a new menu item on the shelf with an initial quantity."""

    item_id = Integer(required=True)
    item_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)


@shelf.command(part_of="ShelfItem")
class AdjustItemOnShelf:
    """Increase or decrease the quantity of a menu item already on the shelf."""

    item_id = Integer(required=True)
    direction = String(required=True, choices=AdjustmentDirection)
    amount = Integer(required=True, min_value=1)


ShelfAction = CreateItemOnShelf | AdjustItemOnShelf
