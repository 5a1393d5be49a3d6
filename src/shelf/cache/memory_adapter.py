"""In-process cache adapter backed by a plain dict.

Values must be immutable (the shelf stores frozen ShelfItemDto objects and
tuples of them), so sharing them between readers is safe.
"""

from typing import Any

from shelf.cache.port import CachePort


class MemoryCache(CachePort):
    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._entries.get(key)

    def put(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def evict(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
