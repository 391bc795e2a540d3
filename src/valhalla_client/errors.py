"""Exceptions raised by the Valhalla client."""
from __future__ import annotations
from typing import Optional


class ValhallaError(Exception):
    """Base exception for all Valhalla client errors."""
    pass


class ValhallaBuildError(ValhallaError):
    """Request could not be built or its body could not be encoded to JSON."""
    pass


class ValhallaHookError(ValhallaError):
    """The before-request hook rejected or failed to customize the request."""
    pass


class ValhallaTransportError(ValhallaError):
    """Network-level failure (DNS, connection, timeout, TLS); no response obtained."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class ValhallaServiceError(ValhallaError):
    """Non-200 response returned by the Valhalla service.

    Attributes:
        error_code: Valhalla error code (e.g. "171"), empty when the body was not JSON.
        error: Error message, or the raw response text when the body was not JSON.
        status_code: HTTP status code.
        status: Status text reported by the service (e.g. "Bad Request").
    """

    def __init__(
        self,
        *,
        error_code: str = "",
        error: str = "",
        status_code: int = 0,
        status: str = "",
    ) -> None:
        super().__init__(f"{status}: {error}")
        self.error_code = error_code
        self.error = error
        self.status_code = status_code
        self.status = status

    def __repr__(self) -> str:
        return (
            f"ValhallaServiceError(error_code={self.error_code!r}, error={self.error!r}, "
            f"status_code={self.status_code!r}, status={self.status!r})"
        )


class ValhallaDecodeError(ValhallaError):
    """A 200 response whose body does not match the endpoint schema."""
    pass


__all__ = [
    "ValhallaError",
    "ValhallaBuildError",
    "ValhallaHookError",
    "ValhallaTransportError",
    "ValhallaServiceError",
    "ValhallaDecodeError",
]
