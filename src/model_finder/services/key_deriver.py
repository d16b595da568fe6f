"""Derive cache keys and tags for finder lookups.

All functions are pure: the same value and model always produce the same
key and tags, which is what makes a second lookup hit the cache.
"""

from typing import Any

from model_finder.config import settings
from model_finder.entities import CacheScope, ValueObject
from model_finder.utils.text import class_basename, snake_case


def derive_key(value: ValueObject | str) -> str:
    """Lowercase and snake_case a normalized value.

    Args:
        value: A ValueObject, or a string that is already normalized

    Returns:
        The cache key, e.g. ``"jane_&_doe"`` for ``"Jane & Doe"``
    """
    return snake_case(str(value).lower())


def derive_tags(entity: Any, global_tag: str | None = None) -> tuple[str, str]:
    """Build the (global tag, model tag) pair for a model.

    Args:
        entity: Model class, model instance, or dotted type name
        global_tag: Package-wide tag. Defaults to settings.

    Returns:
        Tuple like ``("model-finder", "blog_post")``
    """
    return (global_tag or settings.cache_tag, snake_case(class_basename(entity)))


def derive_scope(value: ValueObject | str, entity: Any, global_tag: str | None = None) -> CacheScope:
    return CacheScope(key=derive_key(value), tags=derive_tags(entity, global_tag))
