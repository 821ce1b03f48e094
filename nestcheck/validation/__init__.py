"""Constraint evaluation for nested mappings and sequences."""
from __future__ import annotations

from .constraints import OPTIONAL, Composite, ConstraintKind, PredicateOutcome, Range, classify
from .engine import check, validate, validate_full, validate_strict
from .errors import ErrorEntry, SchemaDefinitionError, ValidationError
from .generate import all_of, array_length, enum, length, none_of, string_length
from .messages import describe
from .paths import join_path

__all__ = [
    "OPTIONAL",
    "Composite",
    "ConstraintKind",
    "ErrorEntry",
    "PredicateOutcome",
    "Range",
    "SchemaDefinitionError",
    "ValidationError",
    "all_of",
    "array_length",
    "check",
    "classify",
    "describe",
    "enum",
    "join_path",
    "length",
    "none_of",
    "string_length",
    "validate",
    "validate_full",
    "validate_strict",
]
