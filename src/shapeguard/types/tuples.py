"""Fixed-position tuple runtype."""

from __future__ import annotations

from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result, Success
from shapeguard.runtype import Runtype, VisitedState, inner_validate, require_runtypes, type_name


class Tuple(Runtype):
    """Accepts a ``list`` or ``tuple`` matching ``components`` position by position.

    With ``strict=True`` the length must equal the number of components. Otherwise
    surplus trailing elements are allowed and left unvalidated.
    """

    __slots__ = ("components", "strict")
    tag = Tag.TUPLE

    components: tuple[Runtype, ...]
    strict: bool

    def __init__(self, *components: Runtype, strict: bool = False) -> None:
        self._freeze(
            components=require_runtypes(components, "Tuple component"),
            strict=bool(strict),
        )

    def _validate(self, value: object, visited: VisitedState) -> Result:
        if not isinstance(value, (list, tuple)):
            return Failure(f"Expected tuple to be an array, but was {type_name(value)}")

        expected = len(self.components)
        actual = len(value)
        if self.strict and actual != expected:
            return Failure(f"Expected tuple of length {expected}, but was {actual}")
        if actual < expected:
            return Failure(f"Expected tuple of at least length {expected}, but was {actual}")

        for index, component in enumerate(self.components):
            result = inner_validate(component, value[index], visited, key=str(index))
            if isinstance(result, Failure):
                return result
        return Success(value)


__all__ = ["Tuple"]
