"""Homogeneous array runtype."""

from __future__ import annotations

from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result, Success
from shapeguard.runtype import Runtype, VisitedState, inner_validate, require_runtype, type_name


class Array(Runtype):
    """Accepts a ``list`` or ``tuple`` whose every element satisfies ``element``."""

    __slots__ = ("element", "is_readonly")
    tag = Tag.ARRAY

    element: Runtype
    is_readonly: bool

    def __init__(self, element: Runtype, *, is_readonly: bool = False) -> None:
        self._freeze(
            element=require_runtype(element, "Array element"),
            is_readonly=bool(is_readonly),
        )

    def as_readonly(self) -> Array:
        return Array(self.element, is_readonly=True)

    def _validate(self, value: object, visited: VisitedState) -> Result:
        if not isinstance(value, (list, tuple)):
            return Failure(f"Expected array, but was {type_name(value)}")

        for index, item in enumerate(value):
            result = inner_validate(self.element, item, visited, key=str(index))
            if isinstance(result, Failure):
                return result
        return Success(value)


__all__ = ["Array"]
