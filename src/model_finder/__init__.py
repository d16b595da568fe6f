"""Model Finder - cached find-by-value lookups for SQLAlchemy models.

A lookup value is normalized, searched case-insensitively across the
configured columns, and the single matching row is cached under tags so
it can be invalidated per model or package-wide.

Layers:
    - protocols: Interface contracts (CacheStore)
    - repositories: Cache backends and tag support
    - services: Key derivation, lookup cache, entity finder, finders
    - entities: Frozen values and per-model configuration

Usage:
    ```python
    from model_finder import FinderConfig, SoleModelFinder

    finder = SoleModelFinder.create(
        FinderConfig(model=Country, columns=["name", "iso_code"]),
        session_factory=SessionLocal,
    )
    finder.find_sole("Sweden")
    finder.clear_class_cache()
    ```
"""

from model_finder.config import get_redis_client, settings
from model_finder.entities import CacheScope, FinderConfig, ValueObject
from model_finder.exceptions import (
    CacheUnavailableError,
    ModelFinderError,
    ModelNotFoundError,
    MultipleRecordsFoundError,
)
from model_finder.protocols import CacheStore
from model_finder.repositories import MemoryCacheStore, RedisCacheStore, TaggedCache, tags
from model_finder.services import (
    EntityFinder,
    FindsModelEntries,
    LookupCache,
    ModelFinderBase,
    SoleModelFinder,
    derive_key,
    derive_tags,
)

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    # Services
    "EntityFinder",
    "FindsModelEntries",
    "LookupCache",
    "ModelFinderBase",
    "SoleModelFinder",
    "derive_key",
    "derive_tags",
    # Repositories (cache backends)
    "MemoryCacheStore",
    "RedisCacheStore",
    "TaggedCache",
    "tags",
    # Entities
    "CacheScope",
    "FinderConfig",
    "ValueObject",
    # Errors
    "CacheUnavailableError",
    "ModelFinderError",
    "ModelNotFoundError",
    "MultipleRecordsFoundError",
]
