"""Structured logging and metrics for the validation service."""
from __future__ import annotations

import logging
import sys
import time

import structlog
from fastapi import FastAPI, Request
from prometheus_client import Counter, Histogram
from prometheus_fastapi_instrumentator import Instrumentator

from .settings import settings

VALIDATIONS = Counter(
    "nestcheck_validations_total",
    "Documents validated, by schema and outcome.",
    ["schema", "outcome"],
)
VIOLATIONS = Histogram(
    "nestcheck_violations_per_document",
    "Violations reported for invalid documents.",
    ["schema"],
    buckets=(1, 2, 5, 10, 25, 50, 100),
)


def init_logging() -> None:
    level = logging.getLevelName(settings.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    logging.basicConfig(stream=sys.stdout, level=level)


def record_validation(schema: str, valid: bool, error_count: int) -> None:
    """Count a validation outcome and log it without any document content."""
    outcome = "valid" if valid else "invalid"
    VALIDATIONS.labels(schema=schema, outcome=outcome).inc()
    if not valid:
        VIOLATIONS.labels(schema=schema).observe(error_count)
    structlog.get_logger("validation").info(
        "validated", schema=schema, outcome=outcome, errors=error_count
    )


def attach_instrumentation(app: FastAPI) -> None:
    Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    @app.middleware("http")
    async def _latency(request: Request, call_next):
        start = time.perf_counter()
        resp = await call_next(request)
        dur_ms = (time.perf_counter() - start) * 1000
        structlog.get_logger("request").info(
            "req",
            path=request.url.path,
            method=request.method,
            status=resp.status_code,
            duration_ms=round(dur_ms, 2),
        )
        return resp


__all__ = ["VALIDATIONS", "VIOLATIONS", "attach_instrumentation", "init_logging", "record_validation"]
