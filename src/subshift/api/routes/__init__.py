# src/subshift/api/routes/__init__.py
from __future__ import annotations

from fastapi import APIRouter

# Root router to be included by app.py
api_router = APIRouter()

from subshift.api.routes.health import router as health_router  # noqa: E402
from subshift.api.routes.metrics import router as metrics_router  # noqa: E402
from subshift.api.routes.subtitles import router as subtitles_router  # noqa: E402

api_router.include_router(health_router)
api_router.include_router(metrics_router)
api_router.include_router(subtitles_router)
