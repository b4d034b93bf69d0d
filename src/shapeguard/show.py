"""Render runtype reflection metadata as a readable type expression."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from shapeguard.reflect import PRIMITIVE_TAGS, Tag

if TYPE_CHECKING:
    from shapeguard.runtype import Runtype


def show(runtype: Runtype, *, needs_parens: bool = False) -> str:
    """Return a type expression such as ``{ name: string; age?: number | None; }``.

    A runtype reached again while it is still being rendered is shown as
    ``CIRCULAR <tag>`` instead of being expanded.
    """

    return _render(runtype.reflect, needs_parens, set())


def _render(refl: Any, needs_parens: bool, rendering: set[int]) -> str:
    def parenthesize(text: str) -> str:
        return f"({text})" if needs_parens else text

    marker = id(refl)
    if marker in rendering:
        return parenthesize(f"CIRCULAR {refl.tag}")

    rendering.add(marker)
    try:
        tag = refl.tag
        if tag in PRIMITIVE_TAGS:
            return str(tag)
        if tag is Tag.LITERAL:
            return _literal_text(refl.value)
        if tag is Tag.INSTANCEOF:
            return f"InstanceOf<{refl.ctor.__name__}>"
        if tag is Tag.ARRAY:
            return f"{_readonly_tag(refl)}{_render(refl.element, True, rendering)}[]"
        if tag is Tag.TUPLE:
            rendered = ", ".join(_render(item, False, rendering) for item in refl.components)
            return f"[{rendered}]"
        if tag is Tag.DICTIONARY:
            key_text = _render(refl.key, False, rendering)
            value_text = _render(refl.value, False, rendering)
            return f"{{ [_: {key_text}]: {value_text} }}"
        if tag is Tag.RECORD:
            return _render_record(refl, rendering)
        if tag is Tag.OPTIONAL:
            return parenthesize(f"{_render(refl.underlying, True, rendering)} | None")
        if tag is Tag.UNION:
            if not refl.alternatives:
                return str(Tag.NEVER)
            return parenthesize(
                " | ".join(_render(item, True, rendering) for item in refl.alternatives)
            )
        if tag is Tag.INTERSECT:
            return parenthesize(
                " & ".join(_render(item, True, rendering) for item in refl.intersectees)
            )
        if tag is Tag.CONSTRAINT:
            return refl.name or _render(refl.underlying, needs_parens, rendering)
        if tag is Tag.BRAND:
            return _render(refl.entity, needs_parens, rendering)
        if tag is Tag.LAZY:
            return _render(refl.underlying, needs_parens, rendering)
    finally:
        rendering.discard(marker)

    raise ValueError(f"unsupported runtype tag: {refl.tag!r}")


def _render_record(refl: Any, rendering: set[int]) -> str:
    if not refl.fields:
        return "{}"

    parts: list[str] = []
    for key, field in refl.fields.items():
        optional_mark = "?" if refl.is_partial or field.reflect.tag is Tag.OPTIONAL else ""
        parts.append(
            f"{_readonly_tag(refl)}{key}{optional_mark}: {_render(field, False, rendering)};"
        )
    return "{ " + " ".join(parts) + " }"


def _literal_text(value: object) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return repr(value)


def _readonly_tag(refl: Any) -> str:
    return "readonly " if refl.is_readonly else ""


__all__ = ["show"]
