"""Unit tests for runtype rendering."""

from __future__ import annotations

import pytest

from shapeguard import (
    Array,
    Boolean,
    Dictionary,
    Function,
    InstanceOf,
    Intersect,
    Lazy,
    Literal,
    Null,
    Number,
    Optional,
    Partial,
    Record,
    Runtype,
    String,
    Tuple,
    Union,
    Unknown,
    show,
)


class Widget:
    pass


@pytest.mark.parametrize(
    ("runtype", "expected"),
    [
        (Boolean, "boolean"),
        (Unknown, "unknown"),
        (Function, "function"),
        (Literal("a"), '"a"'),
        (Literal(3), "3"),
        (Null, "None"),
        (InstanceOf(Widget), "InstanceOf<Widget>"),
        (Array(Number), "number[]"),
        (Array(Union(Number, String)), "(number | string)[]"),
        (Array(String).as_readonly(), "readonly string[]"),
        (Tuple(Number, String), "[number, string]"),
        (Dictionary(Number), "{ [_: string]: number }"),
        (Union(Number, Literal(True)), "number | True"),
        (
            Intersect(Record({"a": Number}), Record({"b": String})),
            "{ a: number; } & { b: string; }",
        ),
        (Record({}), "{}"),
        (Partial({"a": Number}), "{ a?: number; }"),
        (Record({"a": Number}).as_readonly(), "{ readonly a: number; }"),
        (Optional(String), "string | None"),
        (Array(Optional(String)), "(string | None)[]"),
        (Number.with_constraint(lambda v: v > 0, name="Positive"), "Positive"),
        (Number.with_constraint(lambda v: v > 0), "number"),
        (String.with_brand("Email"), "string"),
    ],
)
def test_show_renders_type_expressions(runtype: Runtype, expected: str) -> None:
    assert show(runtype) == expected


def test_show_parenthesizes_when_requested() -> None:
    assert show(Union(Number, String), needs_parens=True) == "(number | string)"


def test_repr_wraps_rendered_type() -> None:
    assert repr(Record({"name": String})) == "Runtype<{ name: string; }>"


def test_circular_placeholder_is_scoped_to_current_path() -> None:
    # The same runtype used twice side by side is not circular.
    pair = Tuple(Number, Number)
    assert show(pair) == "[number, number]"

    tree: Runtype = Lazy(lambda: Record({"left": tree, "right": tree}))
    assert show(tree) == "{ left: CIRCULAR lazy; right: CIRCULAR lazy; }"
