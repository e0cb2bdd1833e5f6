from typing import Any, Optional


class SolscanError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(SolscanError, ValueError):
    """A required argument was missing or empty; no request was sent."""


class RequestFailed(SolscanError):
    """The HTTP transport failed or the body could not be decoded."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiResponseError(SolscanError):
    """Raised by ``check_response`` for a ``success: false`` envelope."""

    def __init__(self, message: str, errors: Any = None) -> None:
        super().__init__(message)
        self.errors = errors
