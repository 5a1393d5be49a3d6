"""Query service: cache-through reads of shelf items.

Point reads are cached per item id; the list of available items is cached
as a whole under one key and dropped by every write. The service never
writes to the store; populating the cache on a miss is idempotent, so two
readers racing on the same key simply store the same value twice.
"""

import structlog
from protean.utils.globals import current_domain

from shelf.cache.port import AVAILABLE_ITEMS_KEY, CachePort, item_key
from shelf.item.dto import ShelfItemDto
from shelf.item.item import ShelfItem

logger = structlog.get_logger(__name__)


class ShelfQueryService:
    def __init__(self, cache: CachePort, store=None):
        self.cache = cache
        self._store = store

    @property
    def store(self):
        if self._store is not None:
            return self._store
        return current_domain.repository_for(ShelfItem)

    def find_by_item_id(self, item_id: int) -> ShelfItemDto | None:
        key = item_key(item_id)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        item = self.store.find_by_item_id(item_id)
        if item is None:
            logger.debug("shelf_item_not_found", item_id=item_id)
            return None

        dto = ShelfItemDto.from_item(item)
        self.cache.put(key, dto)
        return dto

    def find_all_available(self) -> list[ShelfItemDto]:
        cached = self.cache.get(AVAILABLE_ITEMS_KEY)
        if cached is not None:
            return list(cached)

        items = tuple(ShelfItemDto.from_item(item) for item in self.store.find_by_quantity_above(0))
        self.cache.put(AVAILABLE_ITEMS_KEY, items)
        return list(items)
