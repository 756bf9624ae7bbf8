from __future__ import annotations

from fastapi import APIRouter

from subshift.api import __version__
from subshift.api.config import load_config

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict:
    """
    Human/debug-friendly health: includes config surface that is safe to expose.
    """
    cfg = load_config()
    return {
        "ok": True,
        "service": "subshift-api",
        "version": __version__,
        "max_upload_bytes": cfg.max_upload_bytes,
        "allowed_extensions": cfg.allowed_extensions,
    }


@router.get("/healthz")
def healthz() -> dict:
    """
    Liveness: must be fast and never block.
    """
    return {"ok": True}


@router.get("/readyz")
def readyz() -> dict:
    # Stateless service: ready as soon as it is up.
    return {"ok": True}
