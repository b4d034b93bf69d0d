"""Literal runtypes: a single accepted scalar value."""

from __future__ import annotations

from typing import Final

from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result, Success
from shapeguard.runtype import Runtype, VisitedState

LiteralValue = str | int | float | bool | None

_LITERAL_TYPES: Final[tuple[type, ...]] = (str, int, float, bool, type(None))


class Literal(Runtype):
    """Accepts exactly ``value``.

    The type must match as well as the value, so ``Literal(1)`` rejects ``True`` and
    ``1.0``.
    """

    __slots__ = ("value",)
    tag = Tag.LITERAL

    value: LiteralValue

    def __init__(self, value: LiteralValue) -> None:
        if not isinstance(value, _LITERAL_TYPES):
            raise TypeError(f"Literal value must be a scalar, got {type(value).__name__}")
        self._freeze(value=value)

    def _validate(self, value: object, visited: VisitedState) -> Result:
        if type(value) is type(self.value) and value == self.value:
            return Success(value)
        return Failure(f"Expected literal {self.value!r}, but was {value!r}")


Null: Final[Literal] = Literal(None)

__all__ = ["Literal", "LiteralValue", "Null"]
