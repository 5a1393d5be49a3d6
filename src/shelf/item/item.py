"""ShelfItem aggregate (CQRS) and its repository.

One ShelfItem per menu item. The aggregate only knows how to change its own
numbers; the decision whether a change is allowed belongs to the handlers in
creation.py and adjustment.py.
"""

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from shelf.domain import shelf

NEW_VERSION = 1


@shelf.aggregate
class ShelfItem:
    """Stock of one ready menu item on the kitchen shelf."""

    item_id = Integer(required=True, unique=True)
    item_name = String(required=True, max_length=255)
    quantity = Integer(required=True, default=0)
    version = Integer(required=True, default=NEW_VERSION)
    updated_at = DateTime()

    @invariant.post
    def quantity_is_never_negative(self):
        if self.quantity is not None and self.quantity < 0:
            raise ValidationError({"quantity": [f"Quantity cannot be negative: {self.quantity}"]})

    @classmethod
    def create(cls, item_id, item_name, quantity, created_at):
        """Put a new menu item on the shelf at version 1."""
        return cls(
            item_id=item_id,
            item_name=item_name,
            quantity=quantity,
            version=NEW_VERSION,
            updated_at=created_at,
        )

    def change_quantity(self, delta, changed_at):
        """Apply a signed quantity change and bump the version by one."""
        with atomic_change(self):
            self.quantity = self.quantity + delta
            self.version = self.version + 1
            self.updated_at = changed_at


@shelf.repository(part_of=ShelfItem)
class ShelfItemRepository:
    """Record store for shelf items, keyed by the menu item id."""

    def exists_by_item_id(self, item_id: int) -> bool:
        return self._dao.query.filter(item_id=item_id).all().total > 0

    def find_by_item_id(self, item_id: int) -> ShelfItem | None:
        return self._dao.query.filter(item_id=item_id).all().first

    def find_by_quantity_above(self, quantity: int) -> list[ShelfItem]:
        return self._dao.query.filter(quantity__gt=quantity).order_by("item_id").all().items

    def save(self, item: ShelfItem) -> ShelfItem:
        """Insert or replace the whole record."""
        self.add(item)
        return item
