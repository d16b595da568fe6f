"""Cache storage protocol.

Defines the plain key-value interface a cache backend must offer. Tag
support is layered on top of it by ``model_finder.repositories.tagged_cache``,
so a backend never needs its own tag index.

Implementations include:
- Redis (default)
- In-process memory (tests, single-process apps)
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from model_finder.protocols import CacheStore

        store: CacheStore = RedisCacheStore.create()
        store: CacheStore = MemoryCacheStore()
        ```
    """

    def get(self, key: str) -> Any | None:
        """Retrieve a live entry.

        Args:
            key: The cache key

        Returns:
            The stored value, or None if missing or expired
        """
        ...

    def put(self, key: str, value: Any, ttl: int) -> None:
        """Store a value that expires after ``ttl`` seconds.

        Args:
            key: The cache key
            value: The value to store
            ttl: Time-to-live in seconds
        """
        ...

    def forever(self, key: str, value: Any) -> None:
        """Store a value without expiry.

        Args:
            key: The cache key
            value: The value to store
        """
        ...

    def forget(self, key: str) -> bool:
        """Remove an entry.

        Args:
            key: The cache key

        Returns:
            True if an entry was removed, False otherwise
        """
        ...

    def flush(self) -> None:
        """Remove every entry owned by this store."""
        ...

    def health_check(self) -> bool:
        """Check if the backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
