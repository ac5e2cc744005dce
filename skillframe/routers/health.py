from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy import text

from skillframe.api.deps import get_db
from skillframe.core import AppError, ErrorCode, ErrorReason

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/db/health")
def db_health(db: Session = Depends(get_db)):
    try:
        db.execute(text("select 1"))
    except SQLAlchemyError as e:
        raise AppError(
            code=ErrorCode.DB_ERROR,
            reason=ErrorReason.DATABASE_UNAVAILABLE.value,
            status_code=503,
            message=str(e.__class__.__name__),
        ) from e
    return {"status": "ok", "db": "connected"}
