# src/subshift/api/app.py
from __future__ import annotations

import logging

from fastapi import FastAPI

from subshift.api import __version__
from subshift.api.config import load_config
from subshift.api.middlewares.access_log import AccessLogMiddleware
from subshift.api.middlewares.error_handler import install_error_handlers
from subshift.api.middlewares.request_context import RequestContextMiddleware
from subshift.api.routes import api_router
from subshift.utils.logger import configure_logging, get_logger

logger = get_logger("subshift")


def _log_level(name: str) -> int:
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def create_app() -> FastAPI:
    cfg = load_config()

    app = FastAPI(
        title="SubShift API",
        version=__version__,
    )

    # Middlewares wrap in reverse order of registration:
    # request context is outermost so the access log sees the trace id.
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestContextMiddleware, header_name="X-Request-Id")

    # Error handlers (stable error JSON, includes request_id)
    install_error_handlers(app)

    app.include_router(api_router)

    @app.on_event("startup")
    async def _startup() -> None:
        configure_logging(
            logger_name="subshift",
            console_level=_log_level(cfg.log_level),
            file_level=logging.DEBUG,
            log_path=(cfg.log_path or None),
        )
        logger.info(f"API_STARTUP version={__version__} max_upload_bytes={cfg.max_upload_bytes}")

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        logger.info("API_SHUTDOWN")

    return app


app = create_app()
