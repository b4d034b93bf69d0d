"""Mapping runtype with uniform key and value runtypes."""

from __future__ import annotations

from collections.abc import Mapping

from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result, Success
from shapeguard.runtype import Runtype, VisitedState, inner_validate, require_runtype, type_name
from shapeguard.types.primitives import String


class Dictionary(Runtype):
    """Accepts any ``Mapping`` whose keys satisfy ``key`` and values satisfy ``value``."""

    __slots__ = ("key", "value")
    tag = Tag.DICTIONARY

    key: Runtype
    value: Runtype

    def __init__(self, value: Runtype, key: Runtype = String) -> None:
        self._freeze(
            key=require_runtype(key, "Dictionary key"),
            value=require_runtype(value, "Dictionary value"),
        )

    def _validate(self, value: object, visited: VisitedState) -> Result:
        if not isinstance(value, Mapping):
            return Failure(f"Expected dictionary, but was {type_name(value)}")

        for entry_key, entry_value in value.items():
            path = str(entry_key)
            key_result = inner_validate(self.key, entry_key, visited)
            if isinstance(key_result, Failure):
                return Failure(
                    f"Expected dictionary key {path!r} to be valid: {key_result.message}", path
                )
            result = inner_validate(self.value, entry_value, visited, key=path)
            if isinstance(result, Failure):
                return result
        return Success(value)


__all__ = ["Dictionary"]
