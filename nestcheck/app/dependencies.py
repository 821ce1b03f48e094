"""FastAPI dependencies that validate request bodies at the boundary."""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, Mapping, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from nestcheck import settings
from nestcheck.models.api import ValidationReport
from nestcheck.services import run_validation
from nestcheck.validation import SchemaDefinitionError, ValidationError


def validated_body(
    schema: Mapping[Any, Any],
    *,
    name: str = "body",
    strict: Optional[bool] = None,
) -> Callable[[Request], Any]:
    """Return a dependency yielding the JSON body once it satisfies ``schema``.

    Invalid bodies are answered with HTTP 422 and the full list of
    violations. ``strict`` defaults to the ``STRICT_BODIES`` setting.
    """

    async def _dependency(request: Request) -> Dict[str, Any]:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise HTTPException(status_code=400, detail=f"Invalid JSON body: {exc}") from exc

        use_strict = settings.STRICT_BODIES if strict is None else strict
        report = run_validation(name, payload, schema, strict=use_strict, full=True)
        if not report.valid:
            raise HTTPException(status_code=422, detail=report.model_dump())
        return payload

    return _dependency


def install_error_handlers(app: FastAPI) -> None:
    """Map validation exceptions raised inside routes to HTTP responses."""

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        report = ValidationReport.build(request.url.path, exc.entries)
        return JSONResponse(status_code=422, content={"detail": report.model_dump()})

    @app.exception_handler(SchemaDefinitionError)
    async def _schema_definition_error(request: Request, exc: SchemaDefinitionError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": f"Invalid schema: {exc}"})


__all__ = ["install_error_handlers", "validated_body"]
