"""Cached find-by-value lookups for SQLAlchemy models.

A finder is composed per model from a FinderConfig, a cache store and an
EntityFinder:

    Finder -> LookupCache -> CacheStore
           -> EntityFinder -> Session
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from sqlalchemy.orm import Session

from model_finder.config import settings
from model_finder.entities import FinderConfig, ValueObject
from model_finder.exceptions import CacheUnavailableError
from model_finder.protocols import CacheStore
from model_finder.repositories import MemoryCacheStore, RedisCacheStore
from model_finder.services.entity_finder import EntityFinder
from model_finder.services.key_deriver import derive_scope, derive_tags
from model_finder.services.lookup_cache import LookupCache, flush_tag

logger = logging.getLogger(__name__)


def default_store() -> CacheStore:
    """Build the cache store selected by ``FINDER_CACHE_STORE``."""
    if settings.cache_store == "memory":
        return MemoryCacheStore()
    return RedisCacheStore.create()


class ModelFinderBase:
    """State and cache maintenance shared by every finder.

    Depends on the CacheStore protocol, so Redis and the in-memory store
    are interchangeable.
    """

    def __init__(
        self,
        config: FinderConfig,
        store: CacheStore,
        entity_finder: EntityFinder,
        cache_fallback: bool | None = None,
    ) -> None:
        """Initialize the finder.

        Args:
            config: Model, columns, TTL and global tag
            store: Cache backend (required)
            entity_finder: Runs the database search (required)
            cache_fallback: Query the database when the cache backend fails
                instead of raising CacheUnavailableError. Defaults to settings.
        """
        self._config = config
        self._store = store
        self._entity_finder = entity_finder
        self._cache_fallback = settings.cache_fallback if cache_fallback is None else cache_fallback

    @classmethod
    def create(
        cls,
        config: FinderConfig,
        session_factory: Callable[[], Session],
        store: CacheStore | None = None,
        cache_fallback: bool | None = None,
    ) -> "ModelFinderBase":
        """Factory method to create a finder with sensible defaults.

        Args:
            config: Model, columns, TTL and global tag
            session_factory: Returns a new Session, e.g. a ``sessionmaker``
            store: Cache backend. If None, uses ``FINDER_CACHE_STORE``.
            cache_fallback: See ``__init__``

        Returns:
            Configured finder

        Example:
            ```python
            finder = SoleModelFinder.create(
                FinderConfig(model=Country, columns=["name", "iso_code"]),
                session_factory=SessionLocal,
            )
            sweden = finder.find_sole("  sweden ")
            ```
        """
        return cls(
            config=config,
            store=store if store is not None else default_store(),
            entity_finder=EntityFinder(session_factory),
            cache_fallback=cache_fallback,
        )

    def cache_for(self, value: Any) -> LookupCache:
        value_object = ValueObject.from_input(value)
        scope = derive_scope(value_object, self._config.model, self._config.global_tag)
        return LookupCache(self._store, scope, ttl=self._config.ttl)

    def search(self, value: Any) -> Any:
        """Query the database directly, bypassing the cache."""
        value_object = ValueObject.from_input(value)
        return self._entity_finder.find_single(self._config.model, self._config.columns, value_object)

    def forget(self, value: Any) -> bool:
        """Drop the cached result for one lookup value."""
        return self.cache_for(value).forget()

    def clear_class_cache(self) -> None:
        """Clear all cached lookups for this finder's model."""
        _, entity_tag = derive_tags(self._config.model, self._config.global_tag)
        flush_tag(self._store, entity_tag)

    def clear_all_finder_cache(self) -> None:
        """Clear cached lookups for every model sharing this global tag."""
        flush_tag(self._store, self._config.global_tag)

    @property
    def config(self) -> FinderConfig:
        return self._config

    @property
    def store(self) -> CacheStore:
        """Get the underlying cache store (for testing)."""
        return self._store


class FindsModelEntries(ModelFinderBase, ABC):
    """A finder whose ``find`` strategy is supplied by the subclass.

    Example:
        ```python
        class CountryFinder(FindsModelEntries):
            def find(self, value):
                try:
                    return self.search(value)
                except ModelNotFoundError:
                    return self.search(f"%{value}%")
        ```
    """

    @abstractmethod
    def find(self, value: Any) -> Any:
        """Return the model matching ``value`` or raise."""


class SoleModelFinder(ModelFinderBase):
    """Finder that caches the single row matching a lookup value."""

    def find_sole(self, value: Any) -> Any:
        """Return the one row matching ``value``, from cache when possible.

        Business logic:
        1. Normalize the value and derive its cache key and tags
        2. On a cache hit, return the cached entity
        3. Otherwise search the database and cache the result

        Not-found and multiple-found errors propagate and are never cached.

        Args:
            value: The raw lookup value

        Returns:
            The matching model instance

        Raises:
            ModelNotFoundError: If no row matches
            MultipleRecordsFoundError: If more than one row matches
            CacheUnavailableError: If the cache fails and fallback is off
        """
        value_object = ValueObject.from_input(value)
        cache = self.cache_for(value_object)

        try:
            cached = cache.get()
        except CacheUnavailableError as e:
            if not self._cache_fallback:
                raise
            logger.warning("Cache read failed, searching %s directly: %s", self._config.model.__name__, e)
            return self.search(value_object)

        if cached is not None:
            logger.debug("Cache hit for %s %r", self._config.model.__name__, cache.scope.key)
            return cached

        logger.debug("Cache miss for %s %r", self._config.model.__name__, cache.scope.key)
        result = self.search(value_object)

        try:
            return cache.put(result)
        except CacheUnavailableError as e:
            if not self._cache_fallback:
                raise
            logger.warning("Cache write failed for %s: %s", self._config.model.__name__, e)
            return result
