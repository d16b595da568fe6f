"""Service layer for finder lookups.

Architecture:
    SoleModelFinder -> LookupCache -> CacheStore
                    -> EntityFinder -> SQLAlchemy Session

Usage:
    ```python
    from model_finder.services import SoleModelFinder

    finder = SoleModelFinder.create(config, session_factory=SessionLocal)
    finder.find_sole("Sweden")
    ```
"""

from .entity_finder import EntityFinder
from .key_deriver import derive_key, derive_scope, derive_tags
from .lookup_cache import LookupCache, flush_tag
from .model_finder import FindsModelEntries, ModelFinderBase, SoleModelFinder, default_store

__all__ = [
    "EntityFinder",
    "FindsModelEntries",
    "LookupCache",
    "ModelFinderBase",
    "SoleModelFinder",
    "default_store",
    "derive_key",
    "derive_scope",
    "derive_tags",
    "flush_tag",
]
