"""Repository layer for cache backends.

Backends implement the plain CacheStore protocol; tagging is added by
TaggedCache on top of any of them.
"""

from model_finder.protocols import CacheStore

from .memory_store import MemoryCacheStore
from .redis_store import RedisCacheStore
from .tagged_cache import TaggedCache, TagSet, tags

__all__ = [
    "CacheStore",
    "MemoryCacheStore",
    "RedisCacheStore",
    "TaggedCache",
    "TagSet",
    "tags",
]
