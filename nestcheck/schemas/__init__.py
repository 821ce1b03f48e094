"""Schema registry utilities."""
from __future__ import annotations

from .registry import (
    RegisteredSchema,
    all_schemas,
    register_schema,
    reload_registry,
    resolve_schema,
    schema_summaries,
)

__all__ = [
    "RegisteredSchema",
    "all_schemas",
    "register_schema",
    "reload_registry",
    "resolve_schema",
    "schema_summaries",
]
