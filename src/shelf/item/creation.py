"""Create handler: puts a new menu item on the shelf."""

import structlog
from protean.exceptions import ValidationError

from shelf.cache.port import AVAILABLE_ITEMS_KEY
from shelf.errors import DuplicateItem, ShelfError, StoreFailure
from shelf.item.actions import CreateItemOnShelf
from shelf.item.dto import ShelfItemDto
from shelf.item.handler import ShelfActionHandler
from shelf.item.item import ShelfItem
from shelf.result import ExecutionResult, Failure, Success

logger = structlog.get_logger(__name__)


class CreateItemOnShelfHandler(ShelfActionHandler):
    action_type = CreateItemOnShelf

    def execute(self, action: CreateItemOnShelf) -> ExecutionResult[ShelfItemDto]:
        try:
            if self.store.exists_by_item_id(action.item_id):
                raise DuplicateItem(action.item_id)

            item = ShelfItem.create(
                item_id=action.item_id,
                item_name=action.item_name,
                quantity=action.quantity,
                created_at=self.clock.now(),
            )
            logger.info("storing_new_shelf_item", item_id=item.item_id, quantity=item.quantity)
            try:
                saved = self.store.save(item)
            except ValidationError as exc:
                # A concurrent create got the item id in between the check and the save.
                if "item_id" in exc.messages:
                    raise DuplicateItem(action.item_id) from exc
                raise
            return Success(ShelfItemDto.from_item(saved))
        except ShelfError as exc:
            logger.warning("create_action_rejected", item_id=action.item_id, error=exc.message)
            return Failure(exc)
        except Exception as exc:
            logger.error("create_action_failed", item_id=action.item_id, exc_info=True)
            return Failure(StoreFailure("Create", exc))

    def after_commit(self, value: ShelfItemDto) -> None:
        # A new item changes what is available.
        self.cache.evict(AVAILABLE_ITEMS_KEY)
