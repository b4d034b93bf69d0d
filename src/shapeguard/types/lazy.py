"""Deferred runtype construction for self-referential runtype graphs."""

from __future__ import annotations

import threading
from collections.abc import Callable

import structlog

from shapeguard.reflect import Tag
from shapeguard.result import Result
from shapeguard.runtype import Runtype, VisitedState, inner_validate, require_runtype

_LOGGER = structlog.get_logger(__name__)


class Lazy(Runtype):
    """Wraps a zero-argument factory that is invoked at most once, on first use.

    The resolved runtype is kept in a single-assignment memo slot guarded by a lock, so
    concurrent first uses agree on one instance. Cyclic data is handled by the engine's
    visited table, not here.
    """

    __slots__ = ("_factory", "_resolved", "_lock")
    tag = Tag.LAZY

    _factory: Callable[[], Runtype]
    _resolved: Runtype | None
    _lock: threading.Lock

    def __init__(self, factory: Callable[[], Runtype]) -> None:
        if not callable(factory):
            raise TypeError("Lazy requires a zero-argument callable")
        self._freeze(_factory=factory, _resolved=None, _lock=threading.Lock())

    @property
    def is_resolved(self) -> bool:
        return self._resolved is not None

    @property
    def underlying(self) -> Runtype:
        return self.resolve()

    def resolve(self) -> Runtype:
        resolved = self._resolved
        if resolved is not None:
            return resolved

        with self._lock:
            if self._resolved is None:
                candidate = require_runtype(self._factory(), "Lazy factory result")
                object.__setattr__(self, "_resolved", candidate)
                _LOGGER.debug("lazy_runtype_resolved", tag=str(candidate.tag))
                return candidate
            return self._resolved

    def _validate(self, value: object, visited: VisitedState) -> Result:
        return inner_validate(self.resolve(), value, visited)


__all__ = ["Lazy"]
