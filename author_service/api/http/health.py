"""Liveness of the service and reachability of its database."""

from fastapi import APIRouter, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from author_service.logging import logger
from author_service.storage.db import engine

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    database: str


async def _database_reachable() -> bool:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.error(f"Health check could not reach the database: {e}")
        return False
    return True


@router.get("/health", response_model=HealthResponse)
async def health_check(response: Response) -> HealthResponse:
    """Report healthy when ``SELECT 1`` succeeds, otherwise answer 503."""
    if await _database_reachable():
        return HealthResponse(status="healthy", database="healthy")

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status="unhealthy", database="unhealthy")
