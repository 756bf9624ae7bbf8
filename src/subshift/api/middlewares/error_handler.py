from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from subshift.api.errors import EmptySubtitleApiError, InvalidWindowApiError, SubshiftApiError
from subshift.api.middlewares.request_context import get_request_id
from subshift.core.errors import EmptySubtitleError, InvalidWindowError, SubshiftError
from subshift.utils.logger import get_logger

logger = get_logger("subshift")


def _err_payload(
    *,
    code: str,
    message: str,
    request_id: Optional[str],
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "request_id": request_id or "",
        }
    }


def to_api_error(exc: SubshiftError) -> SubshiftApiError:
    """Translate a core processing error into its wire-level counterpart."""
    if isinstance(exc, InvalidWindowError):
        return InvalidWindowApiError(
            exc.message,
            details={"start_ms": exc.start_ms, "end_ms": exc.end_ms},
        )
    if isinstance(exc, EmptySubtitleError):
        return EmptySubtitleApiError(exc.message)
    return SubshiftApiError(code="processing_error", message=str(exc))


def _render(request: Request, err: SubshiftApiError) -> JSONResponse:
    rid = get_request_id(request)
    logger.info(f"API_ERROR rid={rid} code={err.code} status={err.status_code} msg={err.message}")
    logger.debug(f"API_ERROR rid={rid} details={err.details}")
    return JSONResponse(
        status_code=err.status_code,
        content=_err_payload(code=err.code, message=err.message, request_id=rid, details=err.details),
    )


def install_error_handlers(app: FastAPI) -> None:
    """
    Centralized error handling.

    - every error body has the same shape: {"error": {code, message, details, request_id}}
    - core errors (empty file, bad window) are mapped here, routes just let them raise
    - unexpected exceptions are logged with traceback and never leak internals
    """

    @app.exception_handler(SubshiftApiError)
    async def _handle_api_error(request: Request, exc: SubshiftApiError) -> JSONResponse:
        return _render(request, exc)

    @app.exception_handler(SubshiftError)
    async def _handle_core_error(request: Request, exc: SubshiftError) -> JSONResponse:
        return _render(request, to_api_error(exc))

    @app.exception_handler(Exception)
    async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        rid = get_request_id(request)
        logger.exception(f"API_UNHANDLED_ERROR rid={rid}")
        return JSONResponse(
            status_code=500,
            content=_err_payload(code="internal_error", message="An unexpected error occurred", request_id=rid),
        )
