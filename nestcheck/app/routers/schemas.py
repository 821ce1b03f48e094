"""Schema registry endpoints."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter

from nestcheck.models.api import SchemaSummary
from nestcheck.schemas import schema_summaries

router = APIRouter(tags=["schemas"])


@router.get("/schemas", response_model=List[SchemaSummary])
def list_schemas():
    """Return registered schema names for selectors."""
    return schema_summaries()
