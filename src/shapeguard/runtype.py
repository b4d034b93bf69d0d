"""
shapeguard — runtype base class and recursive validation engine.

File: src/shapeguard/runtype.py
Last updated: 2026-10-19

Purpose
- Define the contract every runtype implements (check / validate / guard / reflect).
- Provide the recursive dispatcher shared by all combinators.

What should be included in this file
- ``Runtype`` base class with fluent helpers (or_, and_, optional, constraints, brands).
- ``VisitedState``: call-scoped table of (runtype, value) pairs currently accepted or
  in progress, so cyclic data against recursive runtypes terminates.
- ``inner_validate`` / ``inner_guard`` used by combinators to recurse.

Functional requirements
- ``validate`` never raises for a validation failure; ``check`` raises ``ValidationError``.
- Key paths are prefixed by the structural combinator that recursed into a field.

Non-functional requirements
- No process-wide mutable state. Each external call owns a fresh ``VisitedState``.
- Evaluation is sequential and in declaration order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, ClassVar, Final

from shapeguard.errors import ValidationError
from shapeguard.result import Failure, Result, Success

if TYPE_CHECKING:
    from shapeguard.reflect import Tag
    from shapeguard.types.constraint import Brand, Constraint
    from shapeguard.types.intersect import Intersect
    from shapeguard.types.union import Optional, Union

# Immutable scalars cannot close a reference cycle, so they are never tracked.
_UNTRACKED_TYPES: Final[tuple[type, ...]] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
)

ConstraintPredicate = Callable[[Any], bool | str]


class VisitedState:
    """Call-scoped (runtype identity, value identity) table.

    A pair is marked when validation of it starts. When a pair ends in failure, its mark
    and every mark added while it was being validated are rolled back, so only accepted
    or in-progress pairs short-circuit.
    """

    __slots__ = ("_marks", "_order")

    def __init__(self) -> None:
        # Holding the objects keeps their ids stable for the lifetime of the call.
        self._marks: dict[tuple[int, int], tuple[Runtype, object]] = {}
        self._order: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._marks)

    def has(self, runtype: Runtype, value: object) -> bool:
        return (id(runtype), id(value)) in self._marks

    def mark(self, runtype: Runtype, value: object) -> bool:
        """Mark a pair as in progress. Returns ``False`` for untracked scalar values."""

        if isinstance(value, _UNTRACKED_TYPES):
            return False
        identity = (id(runtype), id(value))
        if identity not in self._marks:
            self._order.append(identity)
        self._marks[identity] = (runtype, value)
        return True

    def snapshot(self) -> int:
        return len(self._order)

    def rollback(self, snapshot: int) -> None:
        """Drop every mark added after ``snapshot`` was taken."""

        while len(self._order) > snapshot:
            del self._marks[self._order.pop()]


def inner_validate(
    runtype: Runtype,
    value: object,
    visited: VisitedState,
    *,
    key: str | None = None,
) -> Result:
    """Validate ``value`` against ``runtype`` within an ongoing validation call.

    A pair already present in ``visited`` is optimistically accepted. When ``key`` is
    given, a nested failure is re-rooted under it.
    """

    if visited.has(runtype, value):
        return Success(value)

    snapshot = visited.snapshot()
    visited.mark(runtype, value)
    result = runtype._validate(value, visited)
    if isinstance(result, Failure):
        # Nested pairs may have been accepted only because this pair was assumed valid.
        visited.rollback(snapshot)
        if key is not None:
            return result.nested_under(key)
    return result


def inner_guard(runtype: Runtype, value: object, visited: VisitedState) -> bool:
    """Boolean counterpart of ``inner_validate``; no key path is built."""

    if visited.has(runtype, value):
        return True

    snapshot = visited.snapshot()
    visited.mark(runtype, value)
    if runtype._validate(value, visited).success:
        return True
    visited.rollback(snapshot)
    return False


class Runtype(ABC):
    """A reusable, immutable description of a runtime-checkable structural type."""

    __slots__ = ()

    tag: ClassVar[Tag]

    @abstractmethod
    def _validate(self, value: object, visited: VisitedState) -> Result:
        """Validate one value. Recurse into children only through ``inner_validate``."""

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} runtypes are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} runtypes are immutable")

    def _freeze(self, **attributes: object) -> None:
        for name, value in attributes.items():
            object.__setattr__(self, name, value)

    @property
    def reflect(self) -> Runtype:
        """Structural description: ``tag`` plus the tag-specific payload attributes."""

        return self

    def check(self, value: object) -> Any:
        """Return the validated value or raise ``ValidationError``."""

        result = self.validate(value)
        if isinstance(result, Failure):
            raise ValidationError(result.message, result.key)
        return result.value

    def validate(self, value: object) -> Result:
        """Validate without raising for validation failures."""

        return inner_validate(self, value, VisitedState())

    def guard(self, value: object) -> bool:
        return self.validate(value).success

    def or_(self, other: Runtype) -> Union:
        from shapeguard.types.union import Union

        return Union(self, other)

    def and_(self, other: Runtype) -> Intersect:
        from shapeguard.types.intersect import Intersect

        return Intersect(self, other)

    def optional(self) -> Optional:
        from shapeguard.types.union import Optional

        return Optional(self)

    def with_constraint(
        self,
        predicate: ConstraintPredicate,
        *,
        name: str | None = None,
        args: object = None,
    ) -> Constraint:
        """Refine this runtype with ``predicate``.

        The predicate returns ``True`` to accept, ``False`` to reject with a generic
        message, or a string to reject with that message.
        """

        from shapeguard.types.constraint import Constraint

        return Constraint(self, predicate, name=name, args=args)

    def with_guard(
        self, predicate: Callable[[Any], bool], *, name: str | None = None
    ) -> Constraint:
        from shapeguard.types.constraint import Constraint

        return Constraint(self, lambda value: bool(predicate(value)), name=name)

    def with_brand(self, brand: str) -> Brand:
        from shapeguard.types.constraint import Brand

        return Brand(brand, self)

    def __str__(self) -> str:
        from shapeguard.show import show

        return show(self)

    def __repr__(self) -> str:
        return f"Runtype<{self}>"


def require_runtype(candidate: object, context: str) -> Runtype:
    if not isinstance(candidate, Runtype):
        raise TypeError(f"{context} must be a Runtype, got {type(candidate).__name__}")
    return candidate


def require_runtypes(candidates: Iterable[object], context: str) -> tuple[Runtype, ...]:
    return tuple(
        require_runtype(candidate, f"{context}[{index}]")
        for index, candidate in enumerate(candidates)
    )


def type_name(value: object) -> str:
    if value is None:
        return "None"
    return type(value).__name__


__all__ = [
    "ConstraintPredicate",
    "Runtype",
    "VisitedState",
    "inner_guard",
    "inner_validate",
    "require_runtype",
    "require_runtypes",
    "type_name",
]
