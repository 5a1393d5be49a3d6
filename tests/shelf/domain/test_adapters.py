"""Tests for the cache, clock and event sink adapters."""

from datetime import UTC, datetime

import pytest
from shelf.cache import create_cache
from shelf.cache.memory_adapter import MemoryCache
from shelf.cache.port import AVAILABLE_ITEMS_KEY, item_key
from shelf.clock import FixedClock, SystemClock
from shelf.publishing import create_event_sink
from shelf.publishing.fake_sink import FakeEventSink
from shelf.publishing.logging_sink import LoggingEventSink
from shelf.publishing.port import EventKind, ShelfEvent


class TestMemoryCache:
    def test_get_missing_returns_none(self):
        assert MemoryCache().get("nothing") is None

    def test_put_then_get(self):
        cache = MemoryCache()
        cache.put(item_key(1010), "value")
        assert cache.get(item_key(1010)) == "value"
        assert item_key(1010) in cache

    def test_evict_is_idempotent(self):
        cache = MemoryCache()
        cache.put(AVAILABLE_ITEMS_KEY, ())
        cache.evict(AVAILABLE_ITEMS_KEY)
        cache.evict(AVAILABLE_ITEMS_KEY)
        assert AVAILABLE_ITEMS_KEY not in cache

    def test_clear(self):
        cache = MemoryCache()
        cache.put("a", 1)
        cache.put("b", 2)
        cache.clear()
        assert len(cache) == 0

    def test_keys_do_not_collide(self):
        assert item_key(1010) != item_key(1011)
        assert item_key(1010) != AVAILABLE_ITEMS_KEY


class TestCacheFactory:
    def test_default_is_memory(self, monkeypatch):
        monkeypatch.delenv("SHELF_CACHE_ADAPTER", raising=False)
        assert isinstance(create_cache(), MemoryCache)

    def test_unknown_adapter(self, monkeypatch):
        monkeypatch.setenv("SHELF_CACHE_ADAPTER", "redis")
        with pytest.raises(ValueError):
            create_cache()


class TestEventSinkFactory:
    def test_default_is_logging(self, monkeypatch):
        monkeypatch.delenv("SHELF_EVENT_SINK", raising=False)
        assert isinstance(create_event_sink(), LoggingEventSink)

    def test_fake(self, monkeypatch):
        monkeypatch.setenv("SHELF_EVENT_SINK", "fake")
        assert isinstance(create_event_sink(), FakeEventSink)

    def test_unknown_sink(self, monkeypatch):
        monkeypatch.setenv("SHELF_EVENT_SINK", "kafka")
        with pytest.raises(ValueError):
            create_event_sink()


class TestFakeEventSink:
    def test_records_events(self):
        sink = FakeEventSink()
        event = ShelfEvent(kind=EventKind.NEW, item_id=1010, quantity=10)
        sink.publish(event)
        assert sink.events == [event]

    def test_configured_failure(self):
        sink = FakeEventSink()
        sink.configure(should_succeed=False, failure_reason="down")
        with pytest.raises(ConnectionError, match="down"):
            sink.publish(ShelfEvent(kind=EventKind.TAKE, item_id=1010, quantity=1))
        assert sink.events == []

    def test_event_payload(self):
        event = ShelfEvent(kind=EventKind.ADD, item_id=1010, quantity=5)
        assert event.to_dict() == {"event_type": "ADD", "item_id": 1010, "quantity": 5}


class TestClocks:
    def test_fixed_clock_is_stable(self):
        instant = datetime(2025, 1, 3, tzinfo=UTC)
        clock = FixedClock(instant)
        assert clock.now() == clock.now() == instant

    def test_fixed_clock_advance(self):
        clock = FixedClock(datetime(2025, 1, 3, tzinfo=UTC))
        assert clock.advance(minutes=5) == datetime(2025, 1, 3, 0, 5, tzinfo=UTC)

    def test_system_clock_is_utc(self):
        assert SystemClock().now().tzinfo is UTC
