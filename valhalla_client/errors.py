from typing import Optional


class ValhallaError(Exception):
    """Base class for every error raised by this library."""


class MalformedPolylineError(ValhallaError, ValueError):
    """Encoded shape is truncated or contains a byte outside [63, 126]."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message if position is None else f"{message} (at offset {position})")
        self.position = position


class ConfigurationError(ValhallaError):
    pass


class TransportError(ValhallaError):
    """The request never produced an HTTP response (connection, timeout)."""


class ServiceError(ValhallaError):
    """The service answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code


class ResponseDecodingError(ValhallaError):
    """Body is not JSON or does not match the expected response model."""


class PrecisionMismatchWarning(UserWarning):
    """
    Decoded shape left valid lat/lon bounds, which usually means it was
    decoded with the wrong precision (polyline5 vs polyline6).
    """
