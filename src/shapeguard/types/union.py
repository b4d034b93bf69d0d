"""Union and optional runtypes."""

from __future__ import annotations

from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result, Success
from shapeguard.runtype import (
    Runtype,
    VisitedState,
    inner_guard,
    inner_validate,
    require_runtype,
    require_runtypes,
    type_name,
)
from shapeguard.show import show
from shapeguard.types.literal import Null


class Union(Runtype):
    """Accepts a value satisfying at least one alternative.

    Alternatives are tried in declaration order and the first match wins. A value
    matching none of them is rejected with one message and no nested key.
    """

    __slots__ = ("alternatives",)
    tag = Tag.UNION

    alternatives: tuple[Runtype, ...]

    def __init__(self, *alternatives: Runtype) -> None:
        self._freeze(alternatives=require_runtypes(alternatives, "Union alternative"))

    def match(self, value: object) -> Runtype | None:
        """Return the first alternative accepting ``value``, or ``None``."""

        visited = VisitedState()
        for alternative in self.alternatives:
            if inner_guard(alternative, value, visited):
                return alternative
        return None

    def _validate(self, value: object, visited: VisitedState) -> Result:
        for alternative in self.alternatives:
            if inner_guard(alternative, value, visited):
                return Success(value)
        return Failure(
            f"No alternatives were matched: expected {show(self)}, but was {type_name(value)}"
        )


class Optional(Runtype):
    """``underlying`` or ``None``; validates exactly as ``Union(underlying, Null)``."""

    __slots__ = ("underlying", "_union")
    tag = Tag.OPTIONAL

    underlying: Runtype
    _union: Union

    def __init__(self, underlying: Runtype) -> None:
        checked = require_runtype(underlying, "Optional underlying")
        self._freeze(underlying=checked, _union=Union(checked, Null))

    def _validate(self, value: object, visited: VisitedState) -> Result:
        return inner_validate(self._union, value, visited)


__all__ = ["Optional", "Union"]
