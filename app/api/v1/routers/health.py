# app/api/v1/routers/health.py
import time
import subprocess
from fastapi import APIRouter, Depends

from app.api.deps import image_client
from app.core.config import get_settings

router = APIRouter(tags=["health"])
START_TIME = time.time()


def _git_sha(short: bool = True) -> str:
    try:
        cmd = ["git", "rev-parse", "--short" if short else "HEAD"]
        return subprocess.check_output(cmd, stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


@router.get("/health")
async def health(client=Depends(image_client)):
    """
    Tolerant health check:
    - the service is up even without an AI credential (views are mocked)
    - reports which provider is selected and whether it is live
    """
    settings = get_settings()
    git_sha = settings.GIT_SHA if settings.GIT_SHA != "unknown" else _git_sha()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": git_sha,
        "uptime_seconds": int(time.time() - START_TIME),
        "ai_provider": settings.AI_PROVIDER,
        "ai_api_key_set": settings.provider_api_key is not None,
        "ai_mode": "live" if client is not None else "mock",
    }
    return {"status": "ok", "checks": checks, "timestamp": int(time.time())}
