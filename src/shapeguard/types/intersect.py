"""Intersection runtype."""

from __future__ import annotations

from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result, Success
from shapeguard.runtype import Runtype, VisitedState, inner_validate, require_runtypes


class Intersect(Runtype):
    """Accepts a value satisfying every intersectee; the first failure is reported."""

    __slots__ = ("intersectees",)
    tag = Tag.INTERSECT

    intersectees: tuple[Runtype, ...]

    def __init__(self, *intersectees: Runtype) -> None:
        self._freeze(intersectees=require_runtypes(intersectees, "Intersect member"))

    def _validate(self, value: object, visited: VisitedState) -> Result:
        for intersectee in self.intersectees:
            result = inner_validate(intersectee, value, visited)
            if isinstance(result, Failure):
                return result
        return Success(value)


__all__ = ["Intersect"]
