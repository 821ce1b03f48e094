"""Constraint vocabulary and classification for nested schemas."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

from .errors import SchemaDefinitionError


class _OptionalMarker:
    """Marks a schema key as optional when listed among multiple choices."""

    _instance: "_OptionalMarker | None" = None

    def __new__(cls) -> "_OptionalMarker":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OPTIONAL"

    def __reduce__(self):
        return (_OptionalMarker, ())


OPTIONAL = _OptionalMarker()


class ConstraintKind(str, Enum):
    TYPE = "type"
    BOOLEAN = "boolean"
    SCHEMA = "schema"
    MULTI = "multi"
    ARRAY = "array"
    PATTERN = "pattern"
    PREDICATE = "predicate"
    RANGE = "range"
    ENUM = "enum"
    COMPOSITE = "composite"
    OPTIONAL = "optional"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Range:
    """Inclusive interval constraint.

    Integer endpoints restrict values to integers, numeric endpoints to
    numbers and string endpoints to strings. Other comparable endpoints
    only enforce interval membership.
    """

    low: Any
    high: Any

    def __post_init__(self) -> None:
        try:
            self.low <= self.high  # noqa: B015
        except TypeError as exc:
            raise SchemaDefinitionError(
                f"Range endpoints {self.low!r} and {self.high!r} are not comparable"
            ) from exc

    @property
    def value_type(self) -> Optional[Tuple[type, str]]:
        """Return the (type, description) values must have, if any."""
        if _is_int(self.low) and _is_int(self.high):
            return int, "an int"
        if _is_number(self.low) and _is_number(self.high):
            return Number, "a number"
        if isinstance(self.low, str) and isinstance(self.high, str):
            return str, "a string"
        return None

    def covers(self, value: Any) -> bool:
        try:
            return bool(self.low <= value <= self.high)
        except TypeError:
            return False

    def __str__(self) -> str:
        return f"{self.low!r}..{self.high!r}"


@dataclass(frozen=True)
class Composite:
    """All (``negate=False``) or none (``negate=True``) of ``constraints``."""

    constraints: Tuple[Any, ...]
    negate: bool = False

    def __post_init__(self) -> None:
        if not self.constraints:
            raise SchemaDefinitionError("No constraints were given")
        object.__setattr__(self, "constraints", tuple(self.constraints))

    @property
    def label(self) -> str:
        return "none" if self.negate else "all"


class PredicateOutcome:
    """Normalized result of a user predicate: accepted, or rejected with a message."""

    __slots__ = ("accepted", "message")

    GENERIC_MESSAGE = "accepted by predicate"

    def __init__(self, accepted: bool, message: Optional[str] = None) -> None:
        self.accepted = accepted
        self.message = message

    @classmethod
    def from_result(cls, result: Any) -> "PredicateOutcome":
        if result is True:
            return cls(True)
        if isinstance(result, str):
            return cls(False, result)
        return cls(False, cls.GENERIC_MESSAGE)

    @classmethod
    def evaluate(cls, predicate: Callable[[Any], Any], value: Any) -> "PredicateOutcome":
        return cls.from_result(predicate(value))

    def __repr__(self) -> str:
        if self.accepted:
            return "PredicateOutcome(accepted)"
        return f"PredicateOutcome(rejected: {self.message!r})"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_array_constraint(constraint: Any) -> bool:
    return isinstance(constraint, list) and len(constraint) == 1 and isinstance(constraint[0], list)


def choices_of(constraint: Sequence[Any]) -> list:
    """Return the choices of a multiple-choice list without the optional marker."""
    return [choice for choice in constraint if choice is not OPTIONAL]


def allows_missing(constraint: Any) -> bool:
    return isinstance(constraint, list) and any(choice is OPTIONAL for choice in constraint)


def classify(constraint: Any) -> ConstraintKind:
    """Return the kind of a schema node."""
    if constraint is OPTIONAL:
        return ConstraintKind.OPTIONAL
    if constraint is bool:
        return ConstraintKind.BOOLEAN
    if isinstance(constraint, type):
        return ConstraintKind.TYPE
    if isinstance(constraint, Mapping):
        return ConstraintKind.SCHEMA
    if isinstance(constraint, list):
        if is_array_constraint(constraint):
            return ConstraintKind.ARRAY
        return ConstraintKind.MULTI
    if isinstance(constraint, re.Pattern) and isinstance(constraint.pattern, str):
        return ConstraintKind.PATTERN
    if isinstance(constraint, Range):
        return ConstraintKind.RANGE
    if isinstance(constraint, (set, frozenset)):
        return ConstraintKind.ENUM
    if isinstance(constraint, Composite):
        return ConstraintKind.COMPOSITE
    if callable(constraint):
        return ConstraintKind.PREDICATE
    return ConstraintKind.UNKNOWN


def matches_type(value: Any, constraint: type) -> bool:
    """``isinstance`` that keeps booleans out of every type but ``bool``/``object``."""
    if isinstance(value, bool) and constraint is not object:
        return constraint is bool
    return isinstance(value, constraint)


def enum_contains(members: Any, value: Any) -> bool:
    try:
        if value not in members:
            return False
    except TypeError:
        return False
    value_is_bool = isinstance(value, bool)
    return any(
        member == value and isinstance(member, bool) == value_is_bool for member in members
    )


__all__ = [
    "OPTIONAL",
    "Composite",
    "ConstraintKind",
    "PredicateOutcome",
    "Range",
    "allows_missing",
    "choices_of",
    "classify",
    "enum_contains",
    "is_array_constraint",
    "is_mapping",
    "is_sequence",
    "matches_type",
]
