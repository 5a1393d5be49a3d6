"""Cache port: abstract interface for the shelf read cache.

Handlers write through it after a commit and the query service reads
through it. Adapters are swapped via configuration.
"""

from abc import ABC, abstractmethod
from typing import Any

AVAILABLE_ITEMS_KEY = "available_items"


def item_key(item_id: int) -> str:
    """Cache key for a single shelf item."""
    return f"items_by_item_id:{item_id}"


class CachePort(ABC):
    """Abstract interface for cache adapters."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the cached value, or None on a miss."""
        ...

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous one for the key."""
        ...

    @abstractmethod
    def evict(self, key: str) -> None:
        """Drop the entry for the key. Evicting a missing key is a no-op."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""
        ...
