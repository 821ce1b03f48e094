"""Selection among alternatives in multiple choice constraints."""
from __future__ import annotations

import pytest

from nestcheck.validation import ErrorEntry, Range, ValidationError, all_of, check, none_of, validate

NoneType = type(None)


def _entries(value, schema, **options):
    with pytest.raises(ValidationError) as excinfo:
        validate(value, schema, **options)
    return excinfo.value.entries


def test_structural_alternative_errors_are_surfaced() -> None:
    entries = _entries({"a": {"x": "bad"}}, {"a": [{"x": int}, str]})
    assert entries == [ErrorEntry("a['x']", "an int")]


def test_closest_structural_alternative_is_reported() -> None:
    schema = {"a": [{"x": int, "y": int}, {"name": str}]}
    entries = _entries({"a": {"name": 5}}, schema)
    assert entries == [ErrorEntry("a['name']", "a str")]


def test_first_structural_alternative_wins_ties() -> None:
    schema = {"a": [{"x": int}, {"x": str}]}
    entries = _entries({"a": {"x": None}}, schema)
    assert entries == [ErrorEntry("a['x']", "an int")]


def test_later_alternative_can_succeed() -> None:
    assert validate({"a": {"y": 1}}, {"a": [{"x": int}, {"y": int}]}) is True
    assert validate({"a": [1, 2]}, {"a": [str, [[int]]]}) is True


def test_mapping_without_structural_alternative_gets_summary() -> None:
    entries = _entries({"a": {}}, {"a": [int, str]})
    assert entries == [ErrorEntry("a", "one of int, str")]


def test_sequence_alternative_errors_are_surfaced() -> None:
    entries = _entries({"a": [1, "2"]}, {"a": [NoneType, [[int]]]})
    assert entries == [ErrorEntry("a[1]", "one of int")]


def test_surfaced_errors_follow_full_mode() -> None:
    schema = {"a": [{"x": int, "y": int}, NoneType]}
    entries = _entries({"a": {"x": "1", "y": "2"}}, schema, full=True)
    assert [entry.path for entry in entries] == ["a['x']", "a['y']"]


def test_trials_do_not_leak_errors() -> None:
    schema = {"a": [{"x": int}, {"y": int}], "b": str}
    entries = _entries({"a": {"y": 1}, "b": 1}, schema, full=True)
    assert entries == [ErrorEntry("b", "a str")]


def test_composite_all() -> None:
    constraint = all_of(int, Range(1, 10))
    assert check(5, constraint) is True
    for value in (15, 5.0, "x"):
        assert check(value, constraint, raise_errors=False) is False
    with pytest.raises(ValidationError, match=r"is not all of \[int, 1\.\.10\]"):
        check(15, constraint)


def test_composite_none() -> None:
    constraint = none_of(int, Range(1, 10))
    for value in ("x", 15.5, None):
        assert check(value, constraint) is True
    for value in (5, 15):
        assert check(value, constraint, raise_errors=False) is False
    with pytest.raises(ValidationError, match=r"is not none of \[int, 1\.\.10\]"):
        check(5, constraint)


def test_composite_inside_schema() -> None:
    schema = {"port": all_of(int, Range(1, 65535), none_of({22, 23}))}
    assert validate({"port": 8080}, schema) is True
    with pytest.raises(ValidationError, match=r"^port is not all of"):
        validate({"port": 22}, schema)


def test_composite_trials_are_fail_fast_even_in_full_mode() -> None:
    schema = {"a": all_of({"x": int, "y": int})}
    entries = _entries({"a": {"x": "1", "y": "2"}}, schema, full=True)
    assert len(entries) == 1
    assert entries[0].path == "a"
    assert entries[0].message.startswith("all of [")
