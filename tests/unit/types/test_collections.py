"""Unit tests for array, tuple, and dictionary runtypes."""

from __future__ import annotations

import pytest

from shapeguard import Array, Dictionary, Number, Record, String, Tuple


def test_array_validates_every_element_and_reports_index() -> None:
    numbers = Array(Number)

    assert numbers.guard([])
    assert numbers.guard([1, 2.5, 3])
    assert numbers.guard((1, 2))

    result = numbers.validate([1, 2, "three"])
    assert not result.success
    assert result.key == "2"


def test_array_rejects_strings_and_mappings() -> None:
    assert not Array(String).guard("abc")
    assert not Array(String).guard({"a": "b"})
    assert Array(String).validate("abc").message == "Expected array, but was str"


def test_array_as_readonly_keeps_element() -> None:
    base = Array(Number)
    readonly = base.as_readonly()

    assert readonly.is_readonly
    assert not base.is_readonly
    assert readonly.element is base.element


def test_non_strict_tuple_allows_surplus_elements() -> None:
    assert Tuple(Number, String, strict=False).guard([1, "x", "extra"])
    assert Tuple(Number, String).guard([1, "x", object()])


def test_strict_tuple_requires_exact_length() -> None:
    strict = Tuple(Number, String, strict=True)

    assert strict.guard([1, "x"])
    assert not strict.guard([1, "x", "extra"])
    assert strict.validate([1, "x", "extra"]).message == "Expected tuple of length 2, but was 3"


def test_tuple_with_too_few_elements_fails() -> None:
    assert not Tuple(Number, String).guard([1])
    assert not Tuple(Number, String, strict=True).guard([1])


def test_tuple_reports_failing_position() -> None:
    result = Tuple(Number, Record({"name": String})).validate([1, {"name": 2}])

    assert not result.success
    assert result.key == "1.name"


def test_tuple_rejects_non_sequences() -> None:
    assert not Tuple(Number).guard({0: 1})


def test_dictionary_validates_values_with_key_paths() -> None:
    scores = Dictionary(Number)

    assert scores.guard({"a": 1, "b": 2})
    result = scores.validate({"a": 1, "b": "two"})
    assert result.key == "b"


def test_dictionary_validates_keys() -> None:
    by_id = Dictionary(String, key=Number)

    assert by_id.guard({1: "a", 2: "b"})

    result = by_id.validate({1: "a", "two": "b"})
    assert not result.success
    assert result.key == "two"
    assert "Expected number, but was str" in result.message


def test_dictionary_rejects_non_mapping() -> None:
    assert Dictionary(Number).validate([1]).message == "Expected dictionary, but was list"


@pytest.mark.parametrize("bad", [str, 1, None])
def test_combinators_reject_non_runtype_arguments(bad: object) -> None:
    with pytest.raises(TypeError):
        Array(bad)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Tuple(Number, bad)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Dictionary(bad)  # type: ignore[arg-type]
