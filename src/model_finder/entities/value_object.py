"""Normalized lookup value."""

from dataclasses import dataclass
from typing import Any

from model_finder.utils.text import normalize


@dataclass(frozen=True)
class ValueObject:
    """A lookup value after HTML decoding and whitespace squishing.

    Attributes:
        value: The normalized string used both as the search pattern
            and as the source of the cache key
    """

    value: str

    @classmethod
    def from_input(cls, raw: Any) -> "ValueObject":
        """Normalize a raw lookup input.

        Args:
            raw: A string, number, or anything with its own string form.
                An existing ValueObject is returned unchanged.

        Returns:
            The normalized ValueObject
        """
        if isinstance(raw, ValueObject):
            return raw
        return cls(value=normalize(raw))

    def __str__(self) -> str:
        return self.value
