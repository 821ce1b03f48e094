"""Structured validation errors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

TOP_LEVEL = "Top level"


class SchemaDefinitionError(ValueError):
    """Raised when a schema or constraint is malformed at construction time."""


@dataclass(frozen=True)
class ErrorEntry:
    """One violation: where it happened and what the value failed to be."""

    path: Optional[str]
    message: str

    def as_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "message": self.message}

    def __str__(self) -> str:
        return f"{self.path if self.path is not None else TOP_LEVEL} is not {self.message}"


class ValidationError(Exception):
    """Aggregate of one or more :class:`ErrorEntry` violations."""

    def __init__(self, entries: Iterable[ErrorEntry]) -> None:
        self.entries: List[ErrorEntry] = list(entries)
        super().__init__(", ".join(str(entry) for entry in self.entries))

    @property
    def first(self) -> Optional[ErrorEntry]:
        return self.entries[0] if self.entries else None


__all__ = ["ErrorEntry", "SchemaDefinitionError", "TOP_LEVEL", "ValidationError"]
