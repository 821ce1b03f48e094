"""Named schema registry with alias and fuzzy lookup."""
from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from difflib import get_close_matches
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from nestcheck.settings import SCHEMA_MODULES
from nestcheck.validation import SchemaDefinitionError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredSchema:
    """A schema together with the names it can be looked up by."""

    name: str
    schema: Mapping[Any, Any]
    aliases: Tuple[str, ...] = ()
    description: Optional[str] = None
    options: Mapping[str, Any] = field(default_factory=dict)


_by_name: Dict[str, RegisteredSchema] = {}
_by_alias_lower: Dict[str, RegisteredSchema] = {}
_fuzzy_keys: List[str] = []
_fuzzy_map: Dict[str, RegisteredSchema] = {}


def _index(entry: RegisteredSchema) -> None:
    _by_name[entry.name.lower()] = entry
    _fuzzy_keys.append(entry.name.lower())
    _fuzzy_map[entry.name.lower()] = entry
    for alias in entry.aliases:
        alias_key = alias.strip().lower()
        _by_alias_lower[alias_key] = entry
        _fuzzy_keys.append(alias_key)
        _fuzzy_map[alias_key] = entry


def register_schema(
    name: str,
    schema: Mapping[Any, Any],
    *,
    aliases: Iterable[str] = (),
    description: Optional[str] = None,
    **options: Any,
) -> RegisteredSchema:
    """Add or replace a schema. ``options`` are default validation flags."""
    if not name or not name.strip():
        raise SchemaDefinitionError("Schema name cannot be empty")
    if not isinstance(schema, Mapping):
        raise SchemaDefinitionError(f"Schema '{name}' must be a mapping")
    entry = RegisteredSchema(
        name=name.strip(),
        schema=schema,
        aliases=tuple(aliases),
        description=description,
        options=dict(options),
    )
    if entry.name.lower() in _by_name:
        _rebuild_without(entry.name.lower())
    _index(entry)
    return entry


def _rebuild_without(name_key: str) -> None:
    remaining = [entry for key, entry in _by_name.items() if key != name_key]
    _clear()
    for entry in remaining:
        _index(entry)


def _clear() -> None:
    _by_name.clear()
    _by_alias_lower.clear()
    _fuzzy_keys.clear()
    _fuzzy_map.clear()


def _load_module(module_path: str) -> None:
    module = importlib.import_module(module_path)
    entries: Sequence[RegisteredSchema] = getattr(module, "SCHEMAS", ())
    for entry in entries:
        register_schema(
            entry.name,
            entry.schema,
            aliases=entry.aliases,
            description=entry.description,
            **entry.options,
        )
    LOGGER.debug("Loaded %d schema(s) from %s", len(entries), module_path)


def reload_registry(modules: Optional[Iterable[str]] = None) -> None:
    """Reload schemas from the configured modules, dropping ad-hoc registrations."""
    _clear()
    for module_path in modules if modules is not None else SCHEMA_MODULES:
        _load_module(module_path)


def all_schemas() -> Iterable[RegisteredSchema]:
    return _by_name.values()


def schema_summaries() -> List[Dict[str, object]]:
    summaries: List[Dict[str, object]] = []
    for entry in all_schemas():
        summaries.append(
            {
                "name": entry.name,
                "aliases": list(entry.aliases),
                "description": entry.description,
                "keys": [str(key) for key in entry.schema.keys()],
            }
        )
    summaries.sort(key=lambda item: str(item["name"]).lower())
    return summaries


def resolve_schema(name_or_alias: str) -> RegisteredSchema:
    if not name_or_alias:
        raise KeyError("Schema name cannot be empty")
    token = name_or_alias.strip().lower()
    direct = _by_name.get(token)
    if direct:
        return direct
    alias = _by_alias_lower.get(token)
    if alias:
        return alias
    matches = get_close_matches(token, _fuzzy_keys, n=1, cutoff=0.75)
    if matches:
        resolved = _fuzzy_map.get(matches[0])
        if resolved:
            return resolved
    raise KeyError(f"Schema '{name_or_alias}' was not found in the registry")


# Initial load during module import.
reload_registry()

__all__ = [
    "RegisteredSchema",
    "all_schemas",
    "register_schema",
    "reload_registry",
    "resolve_schema",
    "schema_summaries",
]
