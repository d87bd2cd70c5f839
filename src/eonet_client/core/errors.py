"""Error types."""

from __future__ import annotations


class EonetError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class EonetTransportError(EonetError):
    """Network/transport-level failure."""


class EonetClientClosedError(EonetError):
    """Raised when client is used after close."""


class EonetValidationError(EonetError):
    """Invalid caller input, rejected before any request."""


class EonetDecodeError(EonetError):
    """Response body is not JSON or does not have the expected shape."""


__all__ = [
    "EonetError",
    "EonetTransportError",
    "EonetClientClosedError",
    "EonetValidationError",
    "EonetDecodeError",
]
