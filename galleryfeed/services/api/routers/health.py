# galleryfeed/services/api/routers/health.py
from __future__ import annotations
from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from galleryfeed.common.logging import get_logger
from galleryfeed.common.settings import get_settings
from galleryfeed.services.api.deps import get_db

cfg = get_settings()
logger = get_logger(__name__)
router = APIRouter(prefix=cfg.api.prefix, tags=["health"])


@router.get("/healthz")
def healthz():
    """Liveness: the process is up. Does not touch the database."""
    return {
        "ok": True,
        "app": cfg.app_name,
        "env": cfg.app_env,
    }


@router.get("/readyz")
def readyz(db: Session = Depends(get_db)):
    """Readiness: the media store answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Readiness check failed: %s", e)
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail="Database unavailable") from e
    return {"ok": True, "schema": cfg.db_schema}
