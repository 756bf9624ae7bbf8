from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SubshiftApiError(Exception):
    """
    Typed API error carrying a stable machine-readable code.
    """

    code: str
    message: str
    status_code: int = 400
    details: Optional[Dict[str, Any]] = None


class InvalidUploadError(SubshiftApiError):
    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="invalid_upload", message=message, status_code=400, details=details)


class UploadTooLargeError(SubshiftApiError):
    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="upload_too_large", message=message, status_code=413, details=details)


class EmptySubtitleApiError(SubshiftApiError):
    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="empty_subtitle", message=message, status_code=400, details=details)


class InvalidWindowApiError(SubshiftApiError):
    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="invalid_window", message=message, status_code=400, details=details)
