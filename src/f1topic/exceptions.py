"""Custom exceptions for the f1topic client and renderers."""

from __future__ import annotations


class F1TopicError(Exception):
    """Base exception for all f1topic errors."""


class F1TransportError(F1TopicError):
    """Raised when the request cannot be completed or its body cannot be read."""


class F1ConnectionError(F1TransportError):
    """Raised when the client cannot connect to the API."""


class F1TimeoutError(F1TransportError):
    """Raised when a request to the API times out."""


class F1DecodeError(F1TopicError):
    """Raised when a response body does not match the expected schema."""


class F1NoDataError(F1TopicError):
    """Raised when the API reports that no data exists (e.g. off-season)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"no data found: {message}" if status_code else message)


class F1OverflowError(F1TopicError):
    """Raised when a compact topic exceeds its character budget."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(
            f"Slack topic exceeds {limit} character limit ({length} characters)"
        )
