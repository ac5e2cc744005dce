from fastapi import APIRouter

from skillframe import __version__
from skillframe.core.config import settings

router = APIRouter(prefix="/api", tags=["Root"])


@router.get("/")
def root():
    return {"service": settings.app_name, "version": __version__, "env": settings.env, "docs": "/docs"}
