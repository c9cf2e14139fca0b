"""
Health check endpoint
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from constants import HTTPStatus
from database import get_db
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Liveness plus a database ping. 503 when the database is unreachable."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check database ping failed: {e}")
        return JSONResponse(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            content={"status": "degraded", "database": "error"},
        )
    return {"status": "ok", "database": "ok"}
