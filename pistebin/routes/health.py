"""
Health check route.
"""
from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from pistebin.database import PasteDatabase
from pistebin.dependencies import get_db
from pistebin.models import HealthCheck

router = APIRouter()


@router.get("/api/healthz", response_model=HealthCheck)
async def health_check(db: PasteDatabase = Depends(get_db)) -> HealthCheck:
    """
    Health check endpoint.
    Returns 200 with ok=true if the application and database are healthy.
    """
    is_healthy = await run_in_threadpool(db.is_healthy)
    return HealthCheck(ok=is_healthy)
