"""Cache adapters implementing ResultCachePort."""

from closestdata.adapters.cache.memory_cache import InMemoryResultCache


__all__ = ["InMemoryResultCache"]
