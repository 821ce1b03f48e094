from __future__ import annotations

import re

from nestcheck.validation import (
    OPTIONAL,
    ConstraintKind,
    PredicateOutcome,
    Range,
    all_of,
    classify,
    describe,
    join_path,
    none_of,
)


def is_odd(value):
    if isinstance(value, int) and value % 2 == 1:
        return True
    return "an odd integer"


def test_classify_kinds() -> None:
    assert classify(bool) is ConstraintKind.BOOLEAN
    assert classify(int) is ConstraintKind.TYPE
    assert classify({}) is ConstraintKind.SCHEMA
    assert classify([int, str]) is ConstraintKind.MULTI
    assert classify([]) is ConstraintKind.MULTI
    assert classify([[int]]) is ConstraintKind.ARRAY
    assert classify([[int], str]) is ConstraintKind.MULTI
    assert classify(re.compile("x")) is ConstraintKind.PATTERN
    assert classify(is_odd) is ConstraintKind.PREDICATE
    assert classify(Range(1, 2)) is ConstraintKind.RANGE
    assert classify({1, 2}) is ConstraintKind.ENUM
    assert classify(frozenset()) is ConstraintKind.ENUM
    assert classify(all_of(int)) is ConstraintKind.COMPOSITE
    assert classify(OPTIONAL) is ConstraintKind.OPTIONAL
    assert classify(42) is ConstraintKind.UNKNOWN
    assert classify(re.compile(b"x")) is ConstraintKind.UNKNOWN


def test_describe_constraints() -> None:
    assert describe(str) == "str"
    assert describe(bool) == "true or false"
    assert describe({"a": int}) == "{...schema...}"
    assert describe([OPTIONAL, int, str]) == "[int, str]"
    assert describe([[int, str]]) == "[[int, str]]"
    assert describe(re.compile("ab+")) == "re.compile('ab+')"
    assert describe(Range(1, 10)) == "1..10"
    assert describe(Range("a", "f")) == "'a'..'f'"
    assert describe({3, 1, 2}) == "{1, 2, 3}"
    assert describe(all_of(int, Range(1, 10))) == "all of [int, 1..10]"
    assert describe(none_of({"x"})) == "none of [{'x'}]"
    assert describe(42) == "42"


def test_describe_predicates() -> None:
    assert describe(is_odd) == "predicate is_odd"
    assert describe(is_odd, 2, has_value=True) == "an odd integer"
    assert describe(is_odd, 3, has_value=True) == "predicate is_odd"


def test_predicate_outcomes() -> None:
    assert PredicateOutcome.from_result(True).accepted is True
    assert PredicateOutcome.from_result("too big").message == "too big"
    for result in (False, None, 1, ["yes"]):
        outcome = PredicateOutcome.from_result(result)
        assert outcome.accepted is False
        assert outcome.message == "accepted by predicate"


def test_paths() -> None:
    assert join_path(None, "a") == "a"
    assert join_path(None, 3) == "3"
    assert join_path(None, ("x", 1)) == "('x', 1)"
    assert join_path("a", "b") == "a['b']"
    assert join_path("a", 0) == "a[0]"
    assert join_path(join_path("a", 0), "b") == "a[0]['b']"
