from __future__ import annotations


class SubshiftError(Exception):
    """Base class for recoverable subtitle-processing errors."""


class EmptySubtitleError(SubshiftError):
    def __init__(self, message: str = "The file appears to be empty or not in valid SRT format") -> None:
        super().__init__(message)
        self.message = message


class InvalidWindowError(SubshiftError):
    def __init__(self, start_ms: int, end_ms: int, message: str = "Start time must be before end time") -> None:
        super().__init__(message)
        self.message = message
        self.start_ms = start_ms
        self.end_ms = end_ms
