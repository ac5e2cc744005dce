from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from skillframe.db.session import SessionLocal
from skillframe.services.framework_service import FrameworkService
from skillframe.services.migration_service import MigrationService

def get_db() -> Generator[Session, None, None]:
    """
    Yields a DB session per request.
    Ensures the session is closed even on exceptions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_framework_service(db: Session = Depends(get_db)) -> FrameworkService:
    return FrameworkService(db=db)


def get_migration_service(db: Session = Depends(get_db)) -> MigrationService:
    return MigrationService(db=db)
