"""Typed exceptions for the dashboard history client (no logic)."""


class HistoryClientError(Exception):
    """Base class for everything raised by this package."""


class ValidationError(HistoryClientError, ValueError):
    """Client error: bad input parameters (e.g., non-numeric version, limit < 0)."""


class ConfigError(HistoryClientError, ValueError):
    """Malformed DASHHISTORY_* environment setting."""


class TransportError(HistoryClientError, RuntimeError):
    """Network/provider failure while talking to the versioning API."""


class HTTPStatusError(TransportError):
    """API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str, body: str = ""):
        super().__init__(f"HTTP {status_code} for {url}")
        self.status_code = status_code
        self.url = url
        self.body = body
