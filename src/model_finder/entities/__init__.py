"""Domain entities for internal representation.

These are frozen values passed between the services. FinderConfig is a
validated pydantic model because it is built from user input.
"""

from .cache_scope import CacheScope
from .finder_config import FinderConfig
from .value_object import ValueObject

__all__ = ["CacheScope", "FinderConfig", "ValueObject"]
