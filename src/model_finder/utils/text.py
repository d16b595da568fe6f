"""String helpers for turning lookup values and class names into cache keys."""

import html
import re
from decimal import Decimal
from typing import Any

_WHITESPACE = re.compile(r"[\s\u3164\u1160]+")

# lower->Upper ("blogPost") and acronym->Word ("HTTPRequest")
_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s_]+")


def squish(value: str) -> str:
    """Collapse runs of whitespace into a single space and trim both ends."""
    return _WHITESPACE.sub(" ", value).strip()


def snake_case(value: str) -> str:
    """Convert a string to snake_case.

    Runs of whitespace and underscores become a single underscore. Any
    other punctuation, ``-`` and ``.`` included, is kept as-is so values
    the database tells apart keep distinct keys.

    Examples:
        >>> snake_case("BlogPost")
        'blog_post'
        >>> snake_case("HTTPRequest")
        'http_request'
        >>> snake_case("jane & doe")
        'jane_&_doe'
        >>> snake_case("a.b-c@x.com")
        'a.b-c@x.com'
    """
    value = _CASE_BOUNDARY.sub("_", value)
    value = _SEPARATORS.sub("_", value)
    return value.strip("_").lower()


def class_basename(target: Any) -> str:
    """Return the short type name of a class, an instance or a dotted path."""
    if isinstance(target, str):
        return target.rsplit(".", 1)[-1]
    if isinstance(target, type):
        return target.__name__
    return type(target).__name__


def _has_own_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def to_text(value: Any) -> str:
    """Convert an accepted lookup input to a plain string.

    Accepts strings, integers, floats, decimals and objects that define
    their own ``__str__``. Integral floats render without a fractional
    part, so ``1.0`` becomes ``"1"``.

    Raises:
        TypeError: For ``None``, booleans and objects without a string form.
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, bool):
        raise TypeError(f"Cannot use {value!r} as a lookup value")
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, (int, Decimal)):
        return str(value)
    if _has_own_str(value):
        return str(value)
    raise TypeError(f"Cannot use object of type {type(value).__name__} as a lookup value")


def decode_entities(value: str) -> str:
    """Decode HTML entities until the string no longer changes.

    ``"&amp;amp;"`` decodes fully to ``"&"``, which keeps :func:`normalize`
    stable when applied to its own output.
    """
    decoded = html.unescape(value)
    while decoded != value:
        value, decoded = decoded, html.unescape(decoded)
    return decoded


def normalize(value: Any) -> str:
    """Decode HTML entities and squish whitespace."""
    return squish(decode_entities(to_text(value)))
