"""Cache operations for a single finder lookup.

Backend failures surface as CacheUnavailableError from the store; this
layer does not translate or swallow them.
"""

import logging
from typing import Any

from model_finder.config import settings
from model_finder.entities import CacheScope
from model_finder.protocols import CacheStore
from model_finder.repositories.tagged_cache import TaggedCache, tags

logger = logging.getLogger(__name__)


def flush_tag(store: CacheStore, tag: str) -> None:
    """Evict every entry stored under ``tag``."""
    tags(store, tag).flush()


class LookupCache:
    """Exists/get/put/forget for one cache key within its tag scope.

    Example:
        ```python
        cache = LookupCache(store, derive_scope(value, Country))
        if cache.exists():
            return cache.get()
        return cache.put(country)
        ```
    """

    def __init__(self, store: CacheStore, scope: CacheScope, ttl: int | None = None) -> None:
        """Initialize the lookup cache.

        Args:
            store: Cache backend
            scope: Key and tags for this lookup
            ttl: Default time-to-live in seconds. Defaults to settings.
        """
        self._store = store
        self._scope = scope
        self._ttl = ttl or settings.cache_ttl

    @property
    def scope(self) -> CacheScope:
        return self._scope

    def _handle(self) -> TaggedCache:
        return tags(self._store, self._scope.tags)

    def exists(self) -> bool:
        return self._handle().has(self._scope.key)

    def get(self) -> Any | None:
        """Return the cached entity, or None on a miss."""
        return self._handle().get(self._scope.key)

    def put(self, entity: Any, ttl: int | None = None) -> Any:
        """Store ``entity`` under this scope and return it.

        Args:
            entity: The model instance to cache
            ttl: Override the default time-to-live in seconds

        Returns:
            The same entity, for chaining
        """
        ttl = ttl or self._ttl
        self._handle().put(self._scope.key, entity, ttl)
        logger.debug("Cached %s under %s (ttl=%ss)", self._scope.entity_tag, self._scope.key, ttl)
        return entity

    def forget(self) -> bool:
        """Evict this entry. Returns False if nothing was cached."""
        return self._handle().forget(self._scope.key)

    def flush_tag(self, tag: str) -> None:
        flush_tag(self._store, tag)
