from .store import CacheStore, MemoryCache

__all__ = ["CacheStore", "MemoryCache"]
