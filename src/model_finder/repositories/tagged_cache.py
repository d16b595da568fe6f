"""Tag support layered over any CacheStore.

Each tag owns a random id stored in the backend. An entry written under a
set of tags lives at ``sha1("|".join(tag ids)):key``. Flushing a tag
replaces its id, which makes every entry written under that tag
unreachable; the orphaned entries then age out through their TTL.

Because the namespace is built from all tags of a scope, a lookup must use
the same tags (in the same order) that were used when storing.
"""

import hashlib
import logging
import uuid
from collections.abc import Callable, Iterable
from typing import Any

from model_finder.protocols import CacheStore

logger = logging.getLogger(__name__)


class TagSet:
    """The ids of an ordered set of tag names."""

    def __init__(self, store: CacheStore, names: Iterable[str]) -> None:
        self._store = store
        self.names = list(names)

    @staticmethod
    def tag_key(name: str) -> str:
        return f"tag:{name}:key"

    def tag_id(self, name: str) -> str:
        tag_id = self._store.get(self.tag_key(name))
        if tag_id is None:
            tag_id = self.reset_tag(name)
        return tag_id

    def reset_tag(self, name: str) -> str:
        tag_id = uuid.uuid4().hex
        self._store.forever(self.tag_key(name), tag_id)
        return tag_id

    def reset(self) -> None:
        for name in self.names:
            self.reset_tag(name)

    def namespace(self) -> str:
        return "|".join(self.tag_id(name) for name in self.names)


class TaggedCache:
    """A cache handle scoped to a set of tags.

    Example:
        ```python
        handle = tags(store, ["model-finder", "country"])
        handle.put("sweden", country, ttl=3600)
        handle.get("sweden")
        tags(store, "country").flush()   # handle.get("sweden") is now None
        ```
    """

    def __init__(self, store: CacheStore, tag_set: TagSet) -> None:
        self._store = store
        self._tags = tag_set

    def tagged_item_key(self, key: str) -> str:
        digest = hashlib.sha1(self._tags.namespace().encode("utf-8")).hexdigest()
        return f"{digest}:{key}"

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Any | None:
        return self._store.get(self.tagged_item_key(key))

    def put(self, key: str, value: Any, ttl: int) -> None:
        self._store.put(self.tagged_item_key(key), value, ttl)

    def remember(self, key: str, ttl: int, producer: Callable[[], Any]) -> Any:
        """Return the cached value, or store and return what ``producer`` makes."""
        value = self.get(key)
        if value is not None:
            return value

        value = producer()
        self.put(key, value, ttl)
        return value

    def forget(self, key: str) -> bool:
        return self._store.forget(self.tagged_item_key(key))

    def flush(self) -> None:
        self._tags.reset()
        logger.debug("Flushed cache tags %s", self._tags.names)


def tags(store: CacheStore, names: str | Iterable[str]) -> TaggedCache:
    """Return a handle on ``store`` scoped to one tag or an ordered list of tags."""
    if isinstance(names, str):
        names = [names]
    return TaggedCache(store, TagSet(store, names))
