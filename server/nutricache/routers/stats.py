"""Health check endpoint."""

import platform
import sys
from fastapi import APIRouter, Depends

from .. import __version__
from ..config import Settings
from ..dependencies import get_app_settings

router = APIRouter(tags=["stats"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Health check and status endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "backend": settings.api_root,
        "platform": platform.system().lower(),
        "pythonVersion": sys.version,
    }
