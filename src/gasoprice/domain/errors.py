"""Domain error taxonomy."""

from enum import Enum


class GasopriceError(Exception):
    """Base class for all gasoprice errors."""


class FetchError(GasopriceError):
    """A remote fetch failed. Never retried automatically."""

    def __init__(self, cause: str, status_code: int | None = None) -> None:
        """Initialize with a human-readable cause.

        Args:
            cause: Why the fetch failed.
            status_code: HTTP status code, if a response was received.
        """
        super().__init__(cause)
        self.cause = cause
        self.status_code = status_code


class NetworkError(FetchError):
    """The endpoint was unreachable, timed out or answered with a non-2xx status."""


class DecodeError(FetchError):
    """The response body was not valid JSON or did not match the expected shape."""


class LocationErrorKind(Enum):
    """Reasons the location provider can fail."""

    DENIED = "denied"
    UNKNOWN = "unknown"
    OTHER = "other"


class LocationError(GasopriceError):
    """The location provider could not deliver a position."""

    def __init__(self, kind: LocationErrorKind, message: str = "") -> None:
        super().__init__(message or f"Location unavailable: {kind.value}")
        self.kind = kind


class CoordinateParseError(GasopriceError, ValueError):
    """A latitude/longitude string could not be parsed. Non-fatal, per record."""


class CacheStoreError(GasopriceError):
    """The local snapshot store could not be opened or written."""
