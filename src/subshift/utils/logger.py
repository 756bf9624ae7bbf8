import logging
from contextvars import ContextVar
from typing import Optional

_FORMAT = "[%(levelname)s] %(message)s"

_trace_id: ContextVar[str] = ContextVar("subshift_trace_id", default="")


def get_logger(name: str = "subshift") -> logging.Logger:
    # Handlers live on the top-level "subshift" logger only; children propagate to it.
    base = logging.getLogger(name.split(".")[0])
    if not base.handlers:
        base.setLevel(logging.INFO)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        base.addHandler(handler)
        base.propagate = False
    return logging.getLogger(name)


def configure_logging(
    *,
    logger_name: str = "subshift",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_path: Optional[str] = None,
) -> logging.Logger:
    """
    Process-level logging baseline.

    - exactly one stderr handler at console_level
    - optional file handler at file_level (appends)
    Safe to call more than once: previous handlers are replaced.
    """
    logger = logging.getLogger(logger_name)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    logger.setLevel(min(console_level, file_level) if log_path else console_level)
    logger.propagate = False

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(console)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(fh)

    return logger


def set_trace_id(trace_id: str) -> None:
    _trace_id.set(trace_id)


def get_trace_id() -> str:
    return _trace_id.get()


def clear_trace_id() -> None:
    _trace_id.set("")
