"""Leaf runtypes backed by ``isinstance`` checks."""

from __future__ import annotations

from typing import Final

from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result, Success
from shapeguard.runtype import Runtype, VisitedState, type_name


class _Primitive(Runtype):
    __slots__ = ()

    def _accepts(self, value: object) -> bool:
        return True

    def _validate(self, value: object, visited: VisitedState) -> Result:
        if self._accepts(value):
            return Success(value)
        return Failure(f"Expected {self.tag}, but was {type_name(value)}")


class UnknownRuntype(_Primitive):
    """Accepts anything without narrowing it."""

    __slots__ = ()
    tag = Tag.UNKNOWN


class NeverRuntype(_Primitive):
    __slots__ = ()
    tag = Tag.NEVER

    def _validate(self, value: object, visited: VisitedState) -> Result:
        return Failure(f"Expected nothing, but was {type_name(value)}")


class BooleanRuntype(_Primitive):
    __slots__ = ()
    tag = Tag.BOOLEAN

    def _accepts(self, value: object) -> bool:
        return isinstance(value, bool)


class NumberRuntype(_Primitive):
    """``int`` or ``float``; ``bool`` is rejected even though it subclasses ``int``."""

    __slots__ = ()
    tag = Tag.NUMBER

    def _accepts(self, value: object) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)


class StringRuntype(_Primitive):
    __slots__ = ()
    tag = Tag.STRING

    def _accepts(self, value: object) -> bool:
        return isinstance(value, str)


class FunctionRuntype(_Primitive):
    __slots__ = ()
    tag = Tag.FUNCTION

    def _accepts(self, value: object) -> bool:
        return callable(value)


class InstanceOf(Runtype):
    """Accepts instances of ``ctor`` (or its subclasses)."""

    __slots__ = ("ctor",)
    tag = Tag.INSTANCEOF

    ctor: type

    def __init__(self, ctor: type) -> None:
        if not isinstance(ctor, type):
            raise TypeError(f"InstanceOf requires a class, got {type_name(ctor)}")
        self._freeze(ctor=ctor)

    def _validate(self, value: object, visited: VisitedState) -> Result:
        if isinstance(value, self.ctor):
            return Success(value)
        return Failure(f"Expected {self.ctor.__name__}, but was {type_name(value)}")


Unknown: Final[UnknownRuntype] = UnknownRuntype()
Never: Final[NeverRuntype] = NeverRuntype()
Boolean: Final[BooleanRuntype] = BooleanRuntype()
Number: Final[NumberRuntype] = NumberRuntype()
String: Final[StringRuntype] = StringRuntype()
Function: Final[FunctionRuntype] = FunctionRuntype()

__all__ = [
    "Boolean",
    "BooleanRuntype",
    "Function",
    "FunctionRuntype",
    "InstanceOf",
    "Never",
    "NeverRuntype",
    "Number",
    "NumberRuntype",
    "String",
    "StringRuntype",
    "Unknown",
    "UnknownRuntype",
]
