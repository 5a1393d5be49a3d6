"""Cache adapter factory: pluggable read cache for the shelf."""

import os

from shelf.cache.port import CachePort


def create_cache() -> CachePort:
    """Build the configured cache adapter.

    Uses MemoryCache by default. Select another adapter via the
    SHELF_CACHE_ADAPTER environment variable.
    """
    adapter = os.environ.get("SHELF_CACHE_ADAPTER", "memory")
    if adapter == "memory":
        from shelf.cache.memory_adapter import MemoryCache

        return MemoryCache()
    raise ValueError(f"Unknown cache adapter: {adapter}")
