from .errors import (
    ConfigError,
    HistoryClientError,
    HTTPStatusError,
    TransportError,
    ValidationError,
)
from .futures import failed, resolved
from .history_client import HistoryClient, create_history_client
from .logging_utils import setup_logging
from .schemas import CompareSelector, Dashboard, DiffView, HistoryListOptions
from .settings import Settings, load_settings
from .transport import QueryParams, RequestsTransport, Transport

__all__ = [
    "HistoryClient",
    "create_history_client",
    "Transport",
    "RequestsTransport",
    "QueryParams",
    "resolved",
    "failed",
    "Dashboard",
    "HistoryListOptions",
    "CompareSelector",
    "DiffView",
    "Settings",
    "load_settings",
    "setup_logging",
    "HistoryClientError",
    "ValidationError",
    "ConfigError",
    "TransportError",
    "HTTPStatusError",
]
__version__ = "0.1.0"
