"""Recursive constraint evaluation over nested mappings and sequences."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .constraints import (
    ConstraintKind,
    PredicateOutcome,
    allows_missing,
    choices_of,
    classify,
    enum_contains,
    is_array_constraint,
    is_mapping,
    is_sequence,
    matches_type,
)
from .errors import ErrorEntry, SchemaDefinitionError, ValidationError
from .messages import describe, describe_choices, describe_enum
from .paths import join_path

LOGGER = logging.getLogger(__name__)

ErrorCallback = Callable[[ErrorEntry], Any]

EMPTY_CHOICE_MESSAGE = "a valid multiple choice constraint (list must not be empty)"


@dataclass(frozen=True)
class _Context:
    """Per-call traversal state. ``errors`` is owned by a single call or trial."""

    strict: bool = False
    recursive_strict: bool = True
    full: bool = False
    verbose: bool = False
    errors: List[ErrorEntry] = field(default_factory=list)

    @property
    def nested_strict(self) -> bool:
        return self.strict and self.recursive_strict

    def scratch(self, *, full: Optional[bool] = None) -> "_Context":
        return replace(self, errors=[], full=self.full if full is None else full)

    def fail(self, path: Optional[str], message: str) -> bool:
        self.errors.append(ErrorEntry(path, message))
        return False


def _article(name: str) -> str:
    return "an" if name[:1].lower() in "aeiou" else "a"


# ----------------------------------------------------------------------
def _check_mapping(
    value: Mapping[Any, Any],
    schema: Mapping[Any, Any],
    path: Optional[str],
    ctx: _Context,
    strict: bool,
) -> bool:
    ok = True
    if strict:
        extra = [key for key in value if key not in schema]
        if extra:
            if ctx.verbose:
                names = ", ".join(repr(key) for key in extra)
                message = f"valid: contains members {names} not specified in schema"
            else:
                message = "valid: contains members not specified in schema"
            ok = ctx.fail(path, message)
            if not ctx.full:
                return False

    for key, constraint in schema.items():
        key_path = join_path(path, key)
        if key in value:
            passed = _check_one(value[key], constraint, key_path, ctx)
        elif allows_missing(constraint):
            continue
        else:
            passed = ctx.fail(key_path, "present")
        if not passed:
            ok = False
            if not ctx.full:
                return False
    return ok


def _check_multi(value: Any, constraint: List[Any], path: Optional[str], ctx: _Context) -> bool:
    choices = choices_of(constraint)
    if not choices:
        return ctx.fail(path, EMPTY_CHOICE_MESSAGE)

    # Direct class match
    value_type = type(value)
    if any(choice is value_type for choice in choices):
        return True

    structural: List[Tuple[int, int, List[ErrorEntry]]] = []
    for index, choice in enumerate(choices):
        trial = ctx.scratch()
        if _check_one(value, choice, path, trial):
            return True
        score = _structural_score(value, choice)
        if score is not None:
            structural.append((score, index, trial.errors))

    if structural:
        _, _, errors = min(structural, key=lambda item: (item[0], item[1]))
        ctx.errors.extend(errors)
        return False

    return ctx.fail(path, f"one of {describe_choices(choices, value, has_value=True)}")


def _structural_score(value: Any, choice: Any) -> Optional[int]:
    """Rank how closely ``value`` resembles a structural alternative.

    Lower is closer; ``None`` means the alternative is not structural for
    this value.
    """
    if is_mapping(value) and classify(choice) is ConstraintKind.SCHEMA:
        return len(set(value.keys()) ^ set(choice.keys()))
    if is_sequence(value) and is_array_constraint(choice):
        return 0
    return None


def _passes(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    return _check_one(value, constraint, path, ctx.scratch(full=False))


# ----------------------------------------------------------------------
def _check_type(value: Any, constraint: type, path: Optional[str], ctx: _Context) -> bool:
    if matches_type(value, constraint):
        return True
    name = constraint.__name__
    return ctx.fail(path, f"{_article(name)} {name}")


def _check_boolean(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    if value is True or value is False:
        return True
    return ctx.fail(path, "true or false")


def _check_schema(value: Any, constraint: Mapping[Any, Any], path: Optional[str], ctx: _Context) -> bool:
    if not is_mapping(value):
        return ctx.fail(path, "a mapping")
    return _check_mapping(value, constraint, path, ctx, ctx.nested_strict)


def _check_array(value: Any, constraint: List[Any], path: Optional[str], ctx: _Context) -> bool:
    if not is_sequence(value):
        return ctx.fail(path, "a list")
    ok = True
    for index, item in enumerate(value):
        if not _check_multi(item, constraint[0], join_path(path, index), ctx):
            ok = False
            if not ctx.full:
                return False
    return ok


def _check_pattern(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    if isinstance(value, str) and constraint.search(value):
        return True
    return ctx.fail(path, f"a string matching {constraint!r}")


def _check_predicate(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    outcome = PredicateOutcome.evaluate(constraint, value)
    if outcome.accepted:
        return True
    return ctx.fail(path, outcome.message or PredicateOutcome.GENERIC_MESSAGE)


def _check_range(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    value_type = constraint.value_type
    if value_type is not None:
        expected, description = value_type
        if not matches_type(value, expected):
            return ctx.fail(path, description)
    if constraint.covers(value):
        return True
    return ctx.fail(path, f"in range {constraint}")


def _check_enum(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    if enum_contains(constraint, value):
        return True
    return ctx.fail(path, f"an element of {describe_enum(constraint)}")


def _check_composite(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    for sub in constraint.constraints:
        passed = _passes(value, sub, path, ctx)
        if passed == constraint.negate:
            return ctx.fail(path, describe(constraint, value, has_value=True))
    return True


def _check_optional(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    return True


def _check_unknown(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    return ctx.fail(path, f"a valid schema constraint: {constraint!r}")


_HANDLERS: Dict[ConstraintKind, Callable[[Any, Any, Optional[str], _Context], bool]] = {
    ConstraintKind.TYPE: _check_type,
    ConstraintKind.BOOLEAN: _check_boolean,
    ConstraintKind.SCHEMA: _check_schema,
    ConstraintKind.MULTI: _check_multi,
    ConstraintKind.ARRAY: _check_array,
    ConstraintKind.PATTERN: _check_pattern,
    ConstraintKind.PREDICATE: _check_predicate,
    ConstraintKind.RANGE: _check_range,
    ConstraintKind.ENUM: _check_enum,
    ConstraintKind.COMPOSITE: _check_composite,
    ConstraintKind.OPTIONAL: _check_optional,
    ConstraintKind.UNKNOWN: _check_unknown,
}


def _check_one(value: Any, constraint: Any, path: Optional[str], ctx: _Context) -> bool:
    return _HANDLERS[classify(constraint)](value, constraint, path, ctx)


# ----------------------------------------------------------------------
def _report(
    ctx: _Context,
    *,
    raise_errors: bool,
    errors: Optional[List[ErrorEntry]],
    on_error: Optional[ErrorCallback],
) -> bool:
    LOGGER.debug(
        "Validation failed with %d error(s); first at %s",
        len(ctx.errors),
        ctx.errors[0].path if ctx.errors else None,
    )
    if errors is not None:
        errors.extend(ctx.errors)
    if on_error is not None:
        for entry in ctx.errors:
            on_error(entry)
    elif raise_errors:
        raise ValidationError(ctx.errors)
    return False


def _validate(
    value: Any,
    schema: Any,
    *,
    strict: bool,
    recursive_strict: bool,
    full: bool,
    verbose: bool,
    raise_errors: bool,
    errors: Optional[List[ErrorEntry]],
    on_error: Optional[ErrorCallback],
) -> bool:
    if not is_mapping(schema):
        raise SchemaDefinitionError("Schema must be a mapping")
    if not is_mapping(value):
        raise ValidationError([ErrorEntry(None, "a mapping")])

    ctx = _Context(strict=strict, recursive_strict=recursive_strict, full=full, verbose=verbose)
    if _check_mapping(value, schema, None, ctx, strict):
        return True
    return _report(ctx, raise_errors=raise_errors, errors=errors, on_error=on_error)


def validate(
    value: Any,
    schema: Mapping[Any, Any],
    *,
    strict: bool = False,
    full: bool = False,
    verbose: bool = False,
    raise_errors: bool = True,
    errors: Optional[List[ErrorEntry]] = None,
    on_error: Optional[ErrorCallback] = None,
) -> bool:
    """Validate the mapping ``value`` against ``schema``.

    ``strict`` rejects undeclared keys in every nested mapping, ``full``
    keeps going after the first violation and ``verbose`` names the
    undeclared keys. Violations are appended to ``errors`` when given and
    passed one by one to ``on_error`` when given; otherwise they are raised
    as a :class:`ValidationError` unless ``raise_errors`` is false.

    Returns ``True`` when the value is valid, ``False`` otherwise.
    """
    return _validate(
        value,
        schema,
        strict=strict,
        recursive_strict=True,
        full=full,
        verbose=verbose,
        raise_errors=raise_errors,
        errors=errors,
        on_error=on_error,
    )


def validate_strict(
    value: Any,
    schema: Mapping[Any, Any],
    verbose: bool = False,
    *,
    full: bool = False,
    raise_errors: bool = True,
    errors: Optional[List[ErrorEntry]] = None,
    on_error: Optional[ErrorCallback] = None,
) -> bool:
    """Validate with undeclared keys forbidden at the top level only."""
    return _validate(
        value,
        schema,
        strict=True,
        recursive_strict=False,
        full=full,
        verbose=verbose,
        raise_errors=raise_errors,
        errors=errors,
        on_error=on_error,
    )


def validate_full(
    value: Any,
    schema: Mapping[Any, Any],
    on_error: Optional[ErrorCallback] = None,
    **options: Any,
) -> bool:
    """Collect every violation; with ``on_error`` nothing is raised."""
    options.pop("full", None)
    return validate(value, schema, full=True, on_error=on_error, **options)


def check(
    value: Any,
    constraint: Any,
    *,
    strict: bool = False,
    full: bool = False,
    verbose: bool = False,
    raise_errors: bool = True,
    errors: Optional[List[ErrorEntry]] = None,
    on_error: Optional[ErrorCallback] = None,
) -> bool:
    """Validate a single value of any shape against a single constraint."""
    ctx = _Context(strict=strict, full=full, verbose=verbose)
    if _check_one(value, constraint, None, ctx):
        return True
    return _report(ctx, raise_errors=raise_errors, errors=errors, on_error=on_error)


__all__ = [
    "EMPTY_CHOICE_MESSAGE",
    "ErrorCallback",
    "check",
    "validate",
    "validate_full",
    "validate_strict",
]
