"""
shapeguard — unit tests for lazy (recursive) runtypes

File: tests/unit/types/test_lazy.py
Last updated: 2026-10-19

Purpose
- Validate deferred construction, memoization, and termination on cyclic data.

What this test file should cover
- Factory invoked exactly once, including under concurrent first use.
- Mutually recursive runtype graphs.
- Cyclic data validated against recursive runtypes terminates.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from shapeguard import Array, Lazy, Number, Optional, Record, Runtype, String

NODE: Runtype = Lazy(lambda: Record({"name": String, "next": Optional(NODE)}))


def test_factory_is_invoked_once_on_first_use() -> None:
    calls: list[int] = []

    def build() -> Runtype:
        calls.append(1)
        return Number

    runtype = Lazy(build)
    assert not runtype.is_resolved
    assert calls == []

    assert runtype.guard(1)
    assert not runtype.guard("x")
    assert runtype.guard(2)

    assert calls == [1]
    assert runtype.is_resolved
    assert runtype.underlying is Number


def test_first_resolve_returns_factory_result() -> None:
    runtype = Lazy(lambda: String)

    assert runtype.resolve() is String
    assert runtype.resolve() is String


def test_lazy_matches_wrapped_runtype_on_acyclic_values() -> None:
    inner = Record({"tags": Array(String)})
    runtype = Lazy(lambda: inner)

    for value in ({"tags": []}, {"tags": ["a"]}, {"tags": [1]}, {}, None):
        assert runtype.validate(value) == inner.validate(value)


def test_self_recursive_runtype_validates_linked_list() -> None:
    value = {"name": "a", "next": {"name": "b", "next": {"name": "c"}}}

    assert NODE.guard(value)

    value["next"]["next"]["name"] = 3  # type: ignore[index]
    result = NODE.validate(value)
    assert not result.success
    assert result.key == "next"


def test_mutually_recursive_runtypes() -> None:
    parent: Runtype = Lazy(lambda: Record({"children": Array(child)}))
    child: Runtype = Lazy(lambda: Record({"label": String, "parent": Optional(parent)}))

    tree = {"children": [{"label": "x", "parent": {"children": []}}, {"label": "y"}]}

    assert parent.guard(tree)
    assert parent.validate({"children": [{"label": 1}]}).key == "children.0.label"


def test_cyclic_data_terminates() -> None:
    first: dict[str, object] = {"name": "a"}
    second: dict[str, object] = {"name": "b", "next": first}
    first["next"] = second

    assert NODE.guard(first)


def test_cyclic_data_with_invalid_non_cyclic_field_is_rejected() -> None:
    first: dict[str, object] = {"name": 1}
    second: dict[str, object] = {"name": "b", "next": first}
    first["next"] = second

    result = NODE.validate(first)

    assert not result.success
    assert result.key == "name"


def test_self_referencing_array_terminates() -> None:
    tree: Runtype = Lazy(lambda: Array(tree))
    value: list[object] = []
    value.append(value)

    assert tree.guard(value)


def test_concurrent_first_use_resolves_single_instance() -> None:
    calls: list[int] = []
    barrier = threading.Barrier(8)
    lock = threading.Lock()

    def build() -> Runtype:
        with lock:
            calls.append(1)
        return Record({"name": String})

    runtype = Lazy(build)

    def resolve() -> Runtype:
        barrier.wait()
        return runtype.resolve()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: resolve(), range(8)))

    assert len(calls) == 1
    assert all(item is results[0] for item in results)


def test_lazy_requires_callable_and_runtype_result() -> None:
    with pytest.raises(TypeError):
        Lazy(Number)  # type: ignore[arg-type]

    broken = Lazy(lambda: "not a runtype")  # type: ignore[arg-type, return-value]
    with pytest.raises(TypeError):
        broken.guard(1)


def test_show_marks_circular_reference() -> None:
    assert str(NODE) == "{ name: string; next?: (CIRCULAR lazy) | None; }"
