"""Event sink that emits shelf events as structured log lines."""

import structlog

from shelf.publishing.port import EventSink, ShelfEvent

logger = structlog.get_logger(__name__)


class LoggingEventSink(EventSink):
    def publish(self, event: ShelfEvent) -> None:
        logger.info("shelf_event_emitted", **event.to_dict())
