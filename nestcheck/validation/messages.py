"""Human readable descriptions of constraints.

Descriptions only ever reflect the schema. The validated value is used for
predicates alone, whose message is authored by the schema owner.
"""
from __future__ import annotations

from typing import Any, Iterable

from .constraints import ConstraintKind, PredicateOutcome, classify

SCHEMA_PLACEHOLDER = "{...schema...}"


def _predicate_name(predicate: Any) -> str:
    name = getattr(predicate, "__qualname__", None) or getattr(predicate, "__name__", None)
    if name is None:
        name = type(predicate).__qualname__
    return f"predicate {name}"


def describe(constraint: Any, value: Any = None, *, has_value: bool = False) -> str:
    """Return a compact description of ``constraint``.

    When ``has_value`` is set, predicates are asked for their own failure
    message for ``value`` instead of being described by name.
    """
    kind = classify(constraint)
    if kind is ConstraintKind.BOOLEAN:
        return "true or false"
    if kind is ConstraintKind.TYPE:
        return constraint.__name__
    if kind is ConstraintKind.SCHEMA:
        return SCHEMA_PLACEHOLDER
    if kind in (ConstraintKind.MULTI, ConstraintKind.ARRAY):
        return f"[{describe_choices(constraint, value, has_value=has_value)}]"
    if kind is ConstraintKind.PATTERN:
        return repr(constraint)
    if kind is ConstraintKind.PREDICATE:
        if has_value:
            outcome = PredicateOutcome.evaluate(constraint, value)
            if not outcome.accepted:
                return outcome.message or PredicateOutcome.GENERIC_MESSAGE
        return _predicate_name(constraint)
    if kind is ConstraintKind.RANGE:
        return str(constraint)
    if kind is ConstraintKind.ENUM:
        return describe_enum(constraint)
    if kind is ConstraintKind.COMPOSITE:
        inner = describe_choices(constraint.constraints, value, has_value=has_value)
        return f"{constraint.label} of [{inner}]"
    return repr(constraint)


def describe_choices(constraints: Iterable[Any], value: Any = None, *, has_value: bool = False) -> str:
    parts = []
    for constraint in constraints:
        if classify(constraint) is ConstraintKind.OPTIONAL:
            continue
        parts.append(describe(constraint, value, has_value=has_value))
    return ", ".join(parts)


def describe_enum(members: Iterable[Any]) -> str:
    return "{" + ", ".join(sorted(repr(member) for member in members)) + "}"


__all__ = ["SCHEMA_PLACEHOLDER", "describe", "describe_choices", "describe_enum"]
