"""Fake event sink: records events in memory for testing and development.

Configurable to fail, so callers can be checked for fire-and-forget
behavior.
"""

from shelf.publishing.port import EventSink, ShelfEvent


class FakeEventSink(EventSink):
    def __init__(self) -> None:
        self.events: list[ShelfEvent] = []
        self.should_succeed = True
        self.failure_reason = "Event sink unavailable"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Event sink unavailable") -> None:
        """Configure the fake sink behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def publish(self, event: ShelfEvent) -> None:
        if not self.should_succeed:
            raise ConnectionError(self.failure_reason)
        self.events.append(event)
