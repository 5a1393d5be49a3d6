"""Event sink factory: pluggable delivery of shelf events."""

import os

from shelf.publishing.port import EventSink


def create_event_sink() -> EventSink:
    """Build the configured event sink.

    Uses LoggingEventSink by default. Set SHELF_EVENT_SINK to "fake" to keep
    events in memory instead.
    """
    sink = os.environ.get("SHELF_EVENT_SINK", "logging")
    if sink == "logging":
        from shelf.publishing.logging_sink import LoggingEventSink

        return LoggingEventSink()
    elif sink == "fake":
        from shelf.publishing.fake_sink import FakeEventSink

        return FakeEventSink()
    else:
        raise ValueError(f"Unknown event sink: {sink}")
