"""
shapeguard — record runtypes.

File: src/shapeguard/types/record.py
Last updated: 2026-10-19

Purpose
- Validate mappings against a declared set of field runtypes.

What should be included in this file
- ``Record`` with independent ``is_partial`` / ``is_readonly`` / ``is_exact`` flags.
- Modifiers returning new records: ``as_partial``, ``as_readonly``, ``exact``,
  ``pick``, ``omit``, ``extend``.
- ``Partial`` and ``ExactRecord`` constructors.

Functional requirements
- Exact records reject unexpected keys before any declared field is validated.
- A missing required field fails with ``key`` set to the field name.
- Optional fields (partial record or ``Optional`` runtype) pass when absent or ``None``.
- Nested failures are re-rooted under the field name.

Non-functional requirements
- Modifiers never copy field runtypes; they share them by reference.
- Fields are checked in declaration order so the first failing field is reported.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result, Success
from shapeguard.runtype import Runtype, VisitedState, inner_validate, require_runtype, type_name
from shapeguard.show import show


class Record(Runtype):
    """Mapping with a fixed set of named, individually typed fields."""

    __slots__ = ("fields", "is_partial", "is_readonly", "is_exact")
    tag = Tag.RECORD

    fields: Mapping[str, Runtype]
    is_partial: bool
    is_readonly: bool
    is_exact: bool

    def __init__(
        self,
        fields: Mapping[str, Runtype],
        *,
        is_partial: bool = False,
        is_readonly: bool = False,
        is_exact: bool = False,
    ) -> None:
        if not isinstance(fields, Mapping):
            raise TypeError(f"Record fields must be a mapping, got {type_name(fields)}")

        checked: dict[str, Runtype] = {}
        for key, field in fields.items():
            if not isinstance(key, str):
                raise TypeError(f"Record field names must be strings, got {type_name(key)}")
            checked[key] = require_runtype(field, f"Record field {key!r}")

        self._freeze(
            fields=MappingProxyType(checked),
            is_partial=bool(is_partial),
            is_readonly=bool(is_readonly),
            is_exact=bool(is_exact),
        )

    def _replace(
        self,
        *,
        fields: Mapping[str, Runtype] | None = None,
        is_partial: bool | None = None,
        is_readonly: bool | None = None,
        is_exact: bool | None = None,
    ) -> Record:
        return Record(
            self.fields if fields is None else fields,
            is_partial=self.is_partial if is_partial is None else is_partial,
            is_readonly=self.is_readonly if is_readonly is None else is_readonly,
            is_exact=self.is_exact if is_exact is None else is_exact,
        )

    def as_partial(self) -> Record:
        return self._replace(is_partial=True)

    def as_readonly(self) -> Record:
        return self._replace(is_readonly=True)

    def exact(self) -> Record:
        return self._replace(is_exact=True)

    def pick(self, *keys: str) -> Record:
        """Keep only ``keys``; declaration order of the original record is preserved."""

        selected = self._known_keys(keys, "pick")
        return self._replace(
            fields={key: field for key, field in self.fields.items() if key in selected}
        )

    def omit(self, *keys: str) -> Record:
        dropped = self._known_keys(keys, "omit")
        return self._replace(
            fields={key: field for key, field in self.fields.items() if key not in dropped}
        )

    def extend(self, fields: Mapping[str, Runtype]) -> Record:
        """Add ``fields``; a name already declared is replaced by the new runtype."""

        return self._replace(fields={**self.fields, **fields})

    def _known_keys(self, keys: Iterable[str], operation: str) -> frozenset[str]:
        requested = frozenset(keys)
        unknown = sorted(requested - self.fields.keys())
        if unknown:
            raise ValueError(f"cannot {operation} undeclared field(s): {', '.join(unknown)}")
        return requested

    def _validate(self, value: object, visited: VisitedState) -> Result:
        if self.is_exact and isinstance(value, Mapping):
            for key in value:
                if key not in self.fields:
                    return Failure(f'Unexpected property "{key}"', str(key))

        if value is None:
            return Failure(f"Expected {show(self)}, but was None")
        if not isinstance(value, Mapping):
            return Failure(f"Expected {show(self)}, but was {type_name(value)}")

        for key, field in self.fields.items():
            optional = self.is_partial or _is_optional_field(field)
            if key not in value:
                if optional:
                    continue
                return Failure(f'Expected "{key}" property to be present, but was missing', key)

            item = value[key]
            if optional and item is None:
                continue
            result = inner_validate(field, item, visited, key=key)
            if isinstance(result, Failure):
                return result

        return Success(value)


def _is_optional_field(field: Runtype) -> bool:
    return field.reflect.tag is Tag.OPTIONAL


def Partial(fields: Mapping[str, Runtype]) -> Record:  # noqa: N802
    """Record whose every field may be absent or ``None``."""

    return Record(fields, is_partial=True)


def ExactRecord(fields: Mapping[str, Runtype]) -> Record:  # noqa: N802
    """Record that rejects keys outside its declared fields."""

    return Record(fields, is_exact=True)


__all__ = ["ExactRecord", "Partial", "Record"]
