"""Health check."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from moonglass.config import get_settings
from pydantic import ValidationError

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": "moonglass-api"}


@router.get("/health/ready")
async def readiness_check():
    try:
        settings = get_settings()
        ZoneInfo(settings.timezone)
        return {"status": "ready", "timezone": settings.timezone}
    except (ValidationError, ZoneInfoNotFoundError, ValueError) as exc:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "error": str(exc)},
        )
