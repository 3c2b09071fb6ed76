from datetime import datetime, timezone

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict:
    settings = request.app.state.settings
    return {
        "status": "OK",
        "message": f"{settings.app_name} is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
        "environment": settings.environment,
        "database": "connected" if request.app.state.database.is_open else "disconnected",
    }


@router.get("/")
def index(request: Request) -> dict:
    settings = request.app.state.settings
    prefix = settings.api_prefix
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "endpoints": {
            "health": f"{prefix}/health",
            "auth": f"{prefix}/auth",
            "properties": f"{prefix}/properties",
            "trucks": f"{prefix}/trucks",
            "trips": f"{prefix}/trips",
            "furniture": f"{prefix}/furniture",
        },
    }
