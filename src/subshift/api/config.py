from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


def _split_csv(v: str) -> List[str]:
    parts = [p.strip() for p in (v or "").split(",")]
    return [p for p in parts if p]


def _normalize_ext(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True)
class ApiConfig:
    """
    API runtime config (env-driven).
    Keep it dependency-light; read once per call site via load_config().
    """

    host: str = os.getenv("SUBSHIFT_API_HOST", "0.0.0.0")
    port: int = int(os.getenv("SUBSHIFT_API_PORT", "8000"))

    # Uploads are held in memory only; this bounds per-request memory.
    max_upload_bytes: int = int(os.getenv("SUBSHIFT_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

    # Example: SUBSHIFT_ALLOWED_EXTENSIONS=".srt"
    allowed_extensions: List[str] = None  # type: ignore[assignment]

    log_level: str = os.getenv("SUBSHIFT_API_LOG_LEVEL", "INFO")
    log_path: str = os.getenv("SUBSHIFT_LOG_PATH", "")

    def __post_init__(self) -> None:
        # dataclass(frozen=True) + default None fields: use object.__setattr__
        exts_env = os.getenv("SUBSHIFT_ALLOWED_EXTENSIONS", "").strip()
        exts = [_normalize_ext(e) for e in _split_csv(exts_env)] if exts_env else [".srt"]
        object.__setattr__(self, "allowed_extensions", exts)


def load_config() -> ApiConfig:
    return ApiConfig()
