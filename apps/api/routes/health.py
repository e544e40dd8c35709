"""Health check endpoints exposed by the public API."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from apps.core.config import settings
from apps.core.db import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("", summary="Constant-time readiness probe")
def health_fast() -> dict[str, str]:
    """Simple readiness probe that avoids touching the database."""
    return {"status": "ok", "environment": settings.environment, "timestamp": _utc_timestamp()}


@router.get("/db", summary="Database connectivity check")
def health_db(db: Session = Depends(get_db)) -> dict[str, str]:
    """Deep health check that validates the database connection.

    Store failures propagate to the application's 503 handler.
    """
    db.execute(text("SELECT 1"))
    return {"status": "ok", "scope": "db", "timestamp": _utc_timestamp()}
