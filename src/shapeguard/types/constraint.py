"""Refinement (constraint) and nominal (brand) wrappers."""

from __future__ import annotations

from shapeguard.errors import ValidationError
from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result
from shapeguard.runtype import (
    ConstraintPredicate,
    Runtype,
    VisitedState,
    inner_validate,
    require_runtype,
)


class Constraint(Runtype):
    """Validates ``underlying`` first, then applies ``predicate`` to the accepted value.

    A ``ValidationError`` raised by the predicate (for example from a nested ``check``)
    becomes this constraint's failure. Any other exception propagates.
    """

    __slots__ = ("underlying", "predicate", "name", "args")
    tag = Tag.CONSTRAINT

    underlying: Runtype
    predicate: ConstraintPredicate
    name: str | None
    args: object

    def __init__(
        self,
        underlying: Runtype,
        predicate: ConstraintPredicate,
        *,
        name: str | None = None,
        args: object = None,
    ) -> None:
        if not callable(predicate):
            raise TypeError("Constraint predicate must be callable")
        self._freeze(
            underlying=require_runtype(underlying, "Constraint underlying"),
            predicate=predicate,
            name=name,
            args=args,
        )

    def _validate(self, value: object, visited: VisitedState) -> Result:
        result = inner_validate(self.underlying, value, visited)
        if isinstance(result, Failure):
            return result

        try:
            outcome = self.predicate(result.value)
        except ValidationError as exc:
            return exc.to_failure()
        if isinstance(outcome, str):
            return Failure(outcome)
        if not outcome:
            return Failure(f"Failed {self.name or 'constraint'} check")
        return result


class Brand(Runtype):
    """Attaches a nominal ``brand`` name; validation is that of ``entity``."""

    __slots__ = ("brand", "entity")
    tag = Tag.BRAND

    brand: str
    entity: Runtype

    def __init__(self, brand: str, entity: Runtype) -> None:
        if not isinstance(brand, str) or not brand.strip():
            raise ValueError("brand must be a non-empty string")
        self._freeze(brand=brand, entity=require_runtype(entity, "Brand entity"))

    def _validate(self, value: object, visited: VisitedState) -> Result:
        return inner_validate(self.entity, value, visited)


__all__ = ["Brand", "Constraint"]
