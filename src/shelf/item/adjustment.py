"""Adjust handler: increases or decreases the quantity of a shelf item.

Decreasing is only allowed while the shelf holds at least the requested
amount; otherwise the action fails with InsufficientStock and the record is
left untouched. Every accepted change bumps the version by exactly one.

The version is informational: callers do not send an expected version and
concurrent adjustments to the same item are serialized by the record
store's transaction isolation, not checked here.
"""

import structlog

from shelf.cache.port import AVAILABLE_ITEMS_KEY, item_key
from shelf.errors import InsufficientStock, ItemNotFound, ShelfError, StoreFailure
from shelf.item.actions import AdjustItemOnShelf, AdjustmentDirection
from shelf.item.dto import ShelfItemDto
from shelf.item.handler import ShelfActionHandler
from shelf.item.item import ShelfItem
from shelf.result import ExecutionResult, Failure, Success

logger = structlog.get_logger(__name__)


class AdjustItemOnShelfHandler(ShelfActionHandler):
    action_type = AdjustItemOnShelf

    def execute(self, action: AdjustItemOnShelf) -> ExecutionResult[ShelfItemDto]:
        direction = AdjustmentDirection(action.direction)
        try:
            item = self.store.find_by_item_id(action.item_id)
            if item is None:
                raise ItemNotFound(action.item_id)

            self._check_applicable(item, direction, action.amount)

            delta = action.amount if direction == AdjustmentDirection.INCREASE else -action.amount
            item.change_quantity(delta, changed_at=self.clock.now())
            logger.info(
                "storing_adjusted_shelf_item",
                item_id=item.item_id,
                direction=direction.value,
                amount=action.amount,
                quantity=item.quantity,
                version=item.version,
            )
            saved = self.store.save(item)
            return Success(ShelfItemDto.from_item(saved))
        except ShelfError as exc:
            logger.warning(
                "adjust_action_rejected",
                item_id=action.item_id,
                direction=direction.value,
                error=exc.message,
            )
            return Failure(exc)
        except Exception as exc:
            logger.error(
                "adjust_action_failed",
                item_id=action.item_id,
                direction=direction.value,
                exc_info=True,
            )
            return Failure(StoreFailure("Adjust", exc))

    def after_commit(self, value: ShelfItemDto) -> None:
        # Readers see the new record straight away, without a store round-trip.
        self.cache.put(item_key(value.item_id), value)
        self.cache.evict(AVAILABLE_ITEMS_KEY)

    @staticmethod
    def _check_applicable(item: ShelfItem, direction: AdjustmentDirection, amount: int) -> None:
        logger.debug("checking_adjustment", item_id=item.item_id, direction=direction.value, quantity=item.quantity)
        if direction == AdjustmentDirection.DECREASE and item.quantity < amount:
            raise InsufficientStock(item.item_id, requested=amount, available=item.quantity)
