"""Pydantic models returned by the validation API."""
from __future__ import annotations

from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from nestcheck.validation import ErrorEntry


class Violation(BaseModel):
    """A single path-qualified violation."""

    path: Optional[str] = Field(default=None, description="Location of the value; null for the top level")
    message: str = Field(..., description="What the value was expected to be")
    text: str = Field(..., description="Rendered '<path> is not <message>' line")

    @classmethod
    def from_entry(cls, entry: ErrorEntry) -> "Violation":
        return cls(path=entry.path, message=entry.message, text=str(entry))


class ValidationReport(BaseModel):
    """Outcome of validating one document against a named schema."""

    schema_name: str
    valid: bool
    strict: bool = False
    full: bool = True
    errors: List[Violation] = Field(default_factory=list)

    @classmethod
    def build(
        cls,
        schema_name: str,
        entries: Iterable[ErrorEntry],
        *,
        strict: bool = False,
        full: bool = True,
    ) -> "ValidationReport":
        violations = [Violation.from_entry(entry) for entry in entries]
        return cls(
            schema_name=schema_name,
            valid=not violations,
            strict=strict,
            full=full,
            errors=violations,
        )


class SchemaSummary(BaseModel):
    """Registry listing entry."""

    name: str
    aliases: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    keys: List[str] = Field(default_factory=list)


__all__ = ["SchemaSummary", "ValidationReport", "Violation"]
