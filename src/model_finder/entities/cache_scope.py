"""Cache scope domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheScope:
    """Key and tags identifying one cached lookup.

    Attributes:
        key: Cache key derived from the normalized lookup value
        tags: Ordered pair of (global package tag, per-model tag)
    """

    key: str
    tags: tuple[str, str]

    @property
    def global_tag(self) -> str:
        return self.tags[0]

    @property
    def entity_tag(self) -> str:
        return self.tags[1]
