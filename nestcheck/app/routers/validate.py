"""Document validation endpoint."""
from __future__ import annotations

import json
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Query, Request

from nestcheck import settings
from nestcheck.models.api import ValidationReport
from nestcheck.schemas import RegisteredSchema, resolve_schema
from nestcheck.services import run_validation

router = APIRouter(tags=["validate"])


async def _read_document(request: Request) -> Any:
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise HTTPException(status_code=400, detail=f"Invalid JSON body: {exc}") from exc


@router.post("/validate/{name}", response_model=ValidationReport)
async def validate_document(
    name: str,
    request: Request,
    strict: Optional[bool] = Query(default=None, description="Reject undeclared keys at every level"),
    full: bool = Query(default=True, description="Report every violation instead of the first"),
    verbose: bool = Query(default=False, description="Name undeclared keys in errors"),
) -> ValidationReport:
    try:
        entry: RegisteredSchema = resolve_schema(name)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    if verbose and not settings.VERBOSE_ERRORS:
        raise HTTPException(status_code=403, detail="Verbose errors are disabled on this server")

    if strict is None:
        strict = bool(entry.options.get("strict", settings.STRICT_BODIES))

    document = await _read_document(request)
    return run_validation(
        entry.name,
        document,
        entry.schema,
        strict=strict,
        full=full,
        verbose=verbose,
    )
