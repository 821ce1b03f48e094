"""Validation helpers shared across FastAPI routers."""
from __future__ import annotations

from typing import Any, List, Mapping

from nestcheck.models.api import ValidationReport
from nestcheck.observability import record_validation
from nestcheck.validation import ErrorEntry, ValidationError, validate


def run_validation(
    schema_name: str,
    document: Any,
    schema: Mapping[Any, Any],
    *,
    strict: bool = False,
    full: bool = True,
    verbose: bool = False,
) -> ValidationReport:
    """Validate ``document`` and summarise the outcome as a report."""
    entries: List[ErrorEntry] = []
    try:
        validate(
            document,
            schema,
            strict=strict,
            full=full,
            verbose=verbose,
            raise_errors=False,
            errors=entries,
        )
    except ValidationError as exc:
        # Non-mapping documents are rejected before traversal.
        entries = exc.entries
    report = ValidationReport.build(schema_name, entries, strict=strict, full=full)
    record_validation(schema_name, report.valid, len(report.errors))
    return report


__all__ = ["run_validation"]
