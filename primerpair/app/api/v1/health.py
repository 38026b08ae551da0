# File: primerpair/app/api/v1/health.py
# Version: v0.1.0
"""
Liveness probe plus the settings a client needs to pick a Tm model.
"""
from __future__ import annotations

from fastapi import APIRouter

from primerpair.app.core.config import settings
from primerpair.app.core.primer.thermodynamics import TM_METHODS

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict:
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "tmMethod": settings.TM_METHOD,
        "tmMethods": list(TM_METHODS),
    }
