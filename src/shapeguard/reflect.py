"""Closed set of structural tags exposed through ``Runtype.reflect``."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class Tag(StrEnum):
    """One case per runtype kind.

    Adding a member requires a matching branch in ``shapeguard.show._render`` and a
    review of ``shapeguard.types.record._is_optional_field``.
    """

    UNKNOWN = "unknown"
    NEVER = "never"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    FUNCTION = "function"
    LITERAL = "literal"
    INSTANCEOF = "instanceof"
    ARRAY = "array"
    TUPLE = "tuple"
    DICTIONARY = "dictionary"
    RECORD = "record"
    OPTIONAL = "optional"
    UNION = "union"
    INTERSECT = "intersect"
    CONSTRAINT = "constraint"
    BRAND = "brand"
    LAZY = "lazy"


# Tags whose rendered form is the tag name itself.
PRIMITIVE_TAGS: Final[frozenset[Tag]] = frozenset(
    {
        Tag.UNKNOWN,
        Tag.NEVER,
        Tag.BOOLEAN,
        Tag.NUMBER,
        Tag.STRING,
        Tag.FUNCTION,
    }
)

__all__ = ["PRIMITIVE_TAGS", "Tag"]
