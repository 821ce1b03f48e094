"""Helpers that build constraints for common validation tasks."""
from __future__ import annotations

from typing import Any, Callable, List, Union

from .constraints import Composite, Range
from .engine import validate
from .errors import ErrorEntry, SchemaDefinitionError

Length = Union[int, Range]
Predicate = Callable[[Any], Union[bool, str]]


def _named(predicate: Predicate, name: str) -> Predicate:
    predicate.__name__ = name
    predicate.__qualname__ = name
    return predicate


def _check_length(length: Any) -> None:
    if isinstance(length, bool) or not isinstance(length, (int, Range)):
        raise SchemaDefinitionError("length must be an int or a Range")
    if isinstance(length, Range):
        for endpoint in (length.low, length.high):
            if isinstance(endpoint, bool) or not isinstance(endpoint, int) or endpoint < 0:
                raise SchemaDefinitionError("Range length endpoints must be non-negative ints")
    elif length < 0:
        raise SchemaDefinitionError("length must not be negative")


def _length_ok(length: Length, size: int) -> bool:
    if isinstance(length, Range):
        return length.covers(size)
    return size == length


def all_of(*constraints: Any) -> Composite:
    """Require a value to match every one of ``constraints``.

    Example::

        schema = {"a": all_of(int, Range(1, 100), none_of({7, 13}))}
    """
    return Composite(constraints)


def none_of(*constraints: Any) -> Composite:
    """Require a value to match none of ``constraints``."""
    return Composite(constraints, negate=True)


def enum(*members: Any) -> frozenset:
    """Require a value to equal one of ``members``. A set literal works too."""
    return frozenset(members)


def length(length: Length) -> Predicate:
    """Constrain the length of anything sized (strings, lists, mappings)."""
    _check_length(length)

    def _check(value: Any) -> Union[bool, str]:
        if not hasattr(value, "__len__"):
            return "a type that has a length"
        if _length_ok(length, len(value)):
            return True
        return f"of length {length}"

    return _named(_check, f"length({length})")


def array_length(length: Length, *constraints: Any) -> Predicate:
    """Constrain a list's length and require its elements to match ``constraints``."""
    if not constraints:
        raise SchemaDefinitionError("one or more constraints must be provided")
    _check_length(length)
    message = f"a list of length {length}"
    schema = {"array": [list(constraints)]}

    def _check(value: Any) -> Union[bool, str]:
        if not isinstance(value, (list, tuple)) or not _length_ok(length, len(value)):
            return message
        errors: List[ErrorEntry] = []
        if validate({"array": value}, schema, raise_errors=False, errors=errors):
            return True
        return f"valid: {errors[0]}"

    return _named(_check, f"array_length({length})")


def string_length(length: Length) -> Predicate:
    """Constrain a string's length."""
    _check_length(length)
    message = f"a string of length {length}"

    def _check(value: Any) -> Union[bool, str]:
        if isinstance(value, str) and _length_ok(length, len(value)):
            return True
        return message

    return _named(_check, f"string_length({length})")


__all__ = ["all_of", "array_length", "enum", "length", "none_of", "string_length"]
