"""Error taxonomy mapped to HTTP responses by the server."""

from typing import Any


class WeatherProxyError(Exception):
    """Base error carrying the HTTP status and response body fields."""

    status_code = 500
    error = "Server error"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigurationError(WeatherProxyError):
    """Raised when a required setting (the CWA API key) is missing."""

    error = "Server configuration error"


class DataNotFoundError(WeatherProxyError):
    """Raised when neither dataset yields usable forecast data."""

    status_code = 404
    error = "No data found"


class UpstreamError(WeatherProxyError):
    """Raised when the CWA API answers with an HTTP error status."""

    error = "CWA API error"

    def __init__(self, status_code: int, message: str, details: Any = None):
        super().__init__(message, status_code=status_code, details=details)
