"""
QML Script IntelliSense Cache API Routes.

Requires Python 3.11+.
"""

from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies import require_session
from utils.logger import get_logger
from workspace.session import IntellisenseSession

router = APIRouter()
logger = get_logger("api.cache")


@router.get("/stats")
async def get_cache_stats(
    session: IntellisenseSession = Depends(require_session),
) -> dict[str, Any]:
    """Cache and watcher statistics."""
    return session.get_stats()


@router.delete("")
async def clear_cache(
    session: IntellisenseSession = Depends(require_session),
) -> dict[str, Any]:
    """Drop every cached script."""
    cleared = len(session.cache)
    session.cache.clear()
    logger.info("cache_cleared_via_api", entries=cleared)
    return {"cleared": cleared}
