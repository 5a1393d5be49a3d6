"""Shelf application service and wiring.

``ShelfService`` is what the HTTP layer talks to: it builds actions,
dispatches them, unwraps the result and tells the event sink what happened.
``build_shelf`` assembles the whole object graph with explicit injection so
the handlers and the query service share one cache.
"""

from dataclasses import dataclass
from typing import assert_never

import structlog

from shelf.cache import create_cache
from shelf.cache.port import CachePort
from shelf.clock import Clock, SystemClock
from shelf.item.actions import AdjustItemOnShelf, AdjustmentDirection, CreateItemOnShelf, ShelfAction
from shelf.item.adjustment import AdjustItemOnShelfHandler
from shelf.item.creation import CreateItemOnShelfHandler
from shelf.item.dispatcher import ShelfActionDispatcher
from shelf.item.dto import ShelfItemDto
from shelf.item.queries import ShelfQueryService
from shelf.publishing import create_event_sink
from shelf.publishing.port import EventKind, EventSink, ShelfEvent

logger = structlog.get_logger(__name__)


def event_for(action: ShelfAction) -> ShelfEvent:
    """Describe a committed action as a shelf event."""
    match action:
        case CreateItemOnShelf():
            return ShelfEvent(kind=EventKind.NEW, item_id=action.item_id, quantity=action.quantity)
        case AdjustItemOnShelf():
            direction = AdjustmentDirection(action.direction)
            kind = EventKind.ADD if direction == AdjustmentDirection.INCREASE else EventKind.TAKE
            return ShelfEvent(kind=kind, item_id=action.item_id, quantity=action.amount)
        case _:
            assert_never(action)


class ShelfService:
    def __init__(self, dispatcher: ShelfActionDispatcher, event_sink: EventSink):
        self.dispatcher = dispatcher
        self.event_sink = event_sink

    def create_item(self, item_id: int, item_name: str, quantity: int) -> ShelfItemDto:
        action = CreateItemOnShelf(item_id=item_id, item_name=item_name, quantity=quantity)
        return self.perform(action)

    def adjust_item(self, item_id: int, direction: AdjustmentDirection, amount: int) -> ShelfItemDto:
        action = AdjustItemOnShelf(item_id=item_id, direction=direction.value, amount=amount)
        return self.perform(action)

    def perform(self, action: ShelfAction) -> ShelfItemDto:
        """Dispatch the action and return its result, raising the failure cause."""
        dto = self.dispatcher.dispatch(action).unwrap()
        self._publish(event_for(action))
        return dto

    def _publish(self, event: ShelfEvent) -> None:
        logger.info("shelf_event_about_to_be_emitted", **event.to_dict())
        try:
            self.event_sink.publish(event)
        except Exception:
            # Delivery is fire-and-forget; the stock change stays committed.
            logger.error("shelf_event_delivery_failed", **event.to_dict(), exc_info=True)


@dataclass
class Shelf:
    """The assembled shelf module."""

    service: ShelfService
    queries: ShelfQueryService
    dispatcher: ShelfActionDispatcher
    cache: CachePort
    clock: Clock
    event_sink: EventSink


def build_shelf(
    clock: Clock | None = None,
    cache: CachePort | None = None,
    event_sink: EventSink | None = None,
    store=None,
) -> Shelf:
    """Wire handlers, dispatcher, query service and service together.

    Anything not passed in comes from the configured adapters. Without a
    ``store`` the handlers use the active domain's ShelfItem repository.
    """
    clock = clock or SystemClock()
    cache = cache if cache is not None else create_cache()
    event_sink = event_sink if event_sink is not None else create_event_sink()

    dispatcher = ShelfActionDispatcher(
        [
            CreateItemOnShelfHandler(clock=clock, cache=cache, store=store),
            AdjustItemOnShelfHandler(clock=clock, cache=cache, store=store),
        ]
    )
    return Shelf(
        service=ShelfService(dispatcher, event_sink),
        queries=ShelfQueryService(cache=cache, store=store),
        dispatcher=dispatcher,
        cache=cache,
        clock=clock,
        event_sink=event_sink,
    )
