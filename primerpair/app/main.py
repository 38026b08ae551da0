# File: primerpair/app/main.py
# Version: v0.1.0
"""
FastAPI app entry.

- Keeps all route assembly in primerpair/app/api/v1/api.py.
- Mounts /api/* via `api_router`.

Run:
    uvicorn primerpair.app.main:app
"""
from __future__ import annotations

import logging

from fastapi import FastAPI

from primerpair.app.api.v1.api import api_router
from primerpair.app.core.config import settings

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
)

# APIs under /api
app.include_router(api_router, prefix=settings.API_PREFIX)
