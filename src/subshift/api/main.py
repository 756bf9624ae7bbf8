# src/subshift/api/main.py
from __future__ import annotations

from typing import Optional

from subshift.api.app import app  # noqa: F401
from subshift.api.config import load_config


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """
    Programmatic runner:
    python -m subshift.api.main
    """
    import uvicorn  # local import to keep import graph light

    cfg = load_config()
    uvicorn.run(
        "subshift.api.main:app",
        host=host or cfg.host,
        port=port or cfg.port,
        reload=False,
    )


if __name__ == "__main__":
    run()
