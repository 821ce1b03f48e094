"""Validate nested key-value data against declarative schemas."""
from __future__ import annotations

from .validation import (
    OPTIONAL,
    Composite,
    ErrorEntry,
    Range,
    SchemaDefinitionError,
    ValidationError,
    all_of,
    array_length,
    check,
    describe,
    enum,
    length,
    none_of,
    string_length,
    validate,
    validate_full,
    validate_strict,
)

__version__ = "0.1.0"

__all__ = [
    "OPTIONAL",
    "Composite",
    "ErrorEntry",
    "Range",
    "SchemaDefinitionError",
    "ValidationError",
    "all_of",
    "array_length",
    "check",
    "describe",
    "enum",
    "length",
    "none_of",
    "string_length",
    "validate",
    "validate_full",
    "validate_strict",
]
