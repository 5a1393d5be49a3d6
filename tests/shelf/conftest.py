from collections import Counter
from datetime import UTC, datetime

import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture
from shelf.cache.memory_adapter import MemoryCache
from shelf.clock import FixedClock
from shelf.item.item import ShelfItem
from shelf.publishing.fake_sink import FakeEventSink
from shelf.service import build_shelf

FROZEN_AT = datetime(2025, 1, 3, 10, 15, 30, tzinfo=UTC)


class CountingStore:
    """Wraps the ShelfItem repository and counts calls per method."""

    def __init__(self, repository):
        self._repository = repository
        self.calls = Counter()

    @property
    def reads(self) -> int:
        return self.calls["exists_by_item_id"] + self.calls["find_by_item_id"] + self.calls["find_by_quantity_above"]

    def exists_by_item_id(self, item_id):
        self.calls["exists_by_item_id"] += 1
        return self._repository.exists_by_item_id(item_id)

    def find_by_item_id(self, item_id):
        self.calls["find_by_item_id"] += 1
        return self._repository.find_by_item_id(item_id)

    def find_by_quantity_above(self, quantity):
        self.calls["find_by_quantity_above"] += 1
        return self._repository.find_by_quantity_above(quantity)

    def save(self, item):
        self.calls["save"] += 1
        return self._repository.save(item)


class BrokenStore(CountingStore):
    """A store whose connection is gone."""

    def __init__(self, repository, fail_on=("save",)):
        super().__init__(repository)
        self.fail_on = set(fail_on)

    def _maybe_fail(self, operation):
        if operation in self.fail_on:
            raise ConnectionError("connection to record store lost")

    def exists_by_item_id(self, item_id):
        self._maybe_fail("exists_by_item_id")
        return super().exists_by_item_id(item_id)

    def find_by_item_id(self, item_id):
        self._maybe_fail("find_by_item_id")
        return super().find_by_item_id(item_id)

    def find_by_quantity_above(self, quantity):
        self._maybe_fail("find_by_quantity_above")
        return super().find_by_quantity_above(quantity)

    def save(self, item):
        self._maybe_fail("save")
        return super().save(item)


@pytest.fixture(scope="session")
def shelf_bed():
    from shelf.domain import shelf

    bed = DomainFixture(shelf)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shelf_bed):
    with shelf_bed.domain_context():
        yield


@pytest.fixture()
def clock():
    return FixedClock(FROZEN_AT)


@pytest.fixture()
def cache():
    return MemoryCache()


@pytest.fixture()
def event_sink():
    return FakeEventSink()


@pytest.fixture()
def store(_ctx):
    return CountingStore(current_domain.repository_for(ShelfItem))


@pytest.fixture()
def kitchen(clock, cache, event_sink, store):
    """A fully wired shelf module over the test domain."""
    return build_shelf(clock=clock, cache=cache, event_sink=event_sink, store=store)


@pytest.fixture()
def seed(_ctx):
    """Put an item straight into the record store, bypassing the handlers."""

    def _seed(item_id=1010, item_name="Test", quantity=10, version=1, updated_at=FROZEN_AT):
        item = ShelfItem(
            item_id=item_id,
            item_name=item_name,
            quantity=quantity,
            version=version,
            updated_at=updated_at,
        )
        current_domain.repository_for(ShelfItem).add(item)
        return item

    return _seed


@pytest.fixture()
def stored(_ctx):
    """Read an item straight from the record store."""

    def _stored(item_id):
        return current_domain.repository_for(ShelfItem).find_by_item_id(item_id)

    return _stored


@pytest.fixture()
def broken_store(_ctx):
    """Build a store that raises ConnectionError on the named operations."""

    def _broken(*fail_on):
        return BrokenStore(current_domain.repository_for(ShelfItem), fail_on=fail_on or ("save",))

    return _broken
