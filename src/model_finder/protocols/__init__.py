"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping cache backends (Redis, memory) without touching the finder
- Unit testing with in-memory implementations

Usage:
    ```python
    from model_finder.protocols import CacheStore

    store: CacheStore = RedisCacheStore.create()
    ```
"""

from .cache_store import CacheStore

__all__ = [
    "CacheStore",
]
