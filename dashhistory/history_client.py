"""Dashboard version history: list, compare and restore revisions via the API."""

from __future__ import annotations

import logging
import numbers
from collections.abc import Callable, Mapping
from concurrent.futures import Future
from typing import Any

from .errors import ValidationError
from .futures import resolved
from .logging_utils import setup_logging
from .schemas import DEFAULT_DIFF_VIEW, CompareSelector, Dashboard, DiffView, HistoryListOptions
from .settings import Settings, load_settings
from .transport import QueryParams, RequestsTransport, Transport

__all__ = ["HistoryClient", "create_history_client"]


def _dashboard_id(dashboard: Dashboard | Mapping[str, Any] | None) -> Any:
    if dashboard is None:
        return None
    if isinstance(dashboard, Mapping):
        ident = dashboard.get("id")
    else:
        ident = getattr(dashboard, "id", None)
    # 0 и "" тоже «ещё не сохранён»
    return ident or None


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _list_params(options: HistoryListOptions | QueryParams | None) -> QueryParams | None:
    # всё, кроме нашего dataclass, уходит в транспорт как есть
    if isinstance(options, HistoryListOptions):
        return options.as_params()
    return options


def _revisions(selector: CompareSelector | Mapping[str, Any]) -> tuple[Any, Any]:
    if isinstance(selector, Mapping):
        return selector["original"], selector["new"]
    return selector.original, selector.new


class HistoryClient:
    """
    Thin façade over the dashboard versions API.

    Every operation returns a `concurrent.futures.Future`. When the dashboard
    has no id yet, nothing is sent and an already-resolved empty value comes
    back instead. Transport failures are returned as-is (same exception object
    on the future), never wrapped or logged here.
    """

    def __init__(
        self,
        transport: Transport,
        immediate: Callable[[Any], Future[Any]] = resolved,
        *,
        logger: logging.Logger | None = None,
        strict_version: bool = False,
    ):
        self.transport = transport
        self.immediate = immediate
        self.logger = logger or logging.getLogger("dashhistory")
        self.strict_version = strict_version

    def close(self) -> None:
        """Release the transport's pool and session, if it owns any."""
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> HistoryClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def list_history(
        self,
        dashboard: Dashboard | Mapping[str, Any] | None,
        options: HistoryListOptions | QueryParams | None = None,
    ) -> Future[Any]:
        ident = _dashboard_id(dashboard)
        if not ident:
            self.logger.debug("list_history: dashboard not saved, skip network")
            return self.immediate([])

        self.logger.debug("list_history: dashboard=%s", ident)
        return self.transport.get(f"api/dashboards/db/{ident}/versions", _list_params(options))

    def compare_versions(
        self,
        dashboard: Dashboard | Mapping[str, Any] | None,
        selector: CompareSelector | Mapping[str, Any],
        view: DiffView | str = DEFAULT_DIFF_VIEW,
    ) -> Future[Any]:
        ident = _dashboard_id(dashboard)
        if not ident:
            self.logger.debug("compare_versions: dashboard not saved, skip network")
            return self.immediate({})

        original, new = _revisions(selector)
        self.logger.debug("compare_versions: dashboard=%s %s...%s view=%s", ident, original, new, view)
        return self.transport.get(f"api/dashboards/db/{ident}/compare/{original}...{new}/{view}")

    def restore_version(self, dashboard: Dashboard | Mapping[str, Any] | None, version: Any) -> Future[Any]:
        """Ask the API to restore `version`; this mutates the remote dashboard.

        A missing id or a non-numeric version short-circuits to an empty
        result, unless `strict_version` is on, in which case a bad version
        on a saved dashboard raises ValidationError before anything is sent.
        """
        ident = _dashboard_id(dashboard)
        numeric = _is_number(version)

        if ident and not numeric and self.strict_version:
            raise ValidationError(f"version must be a number, got {version!r}")

        if not (ident and numeric):
            self.logger.debug("restore_version: nothing to restore (id=%r, version=%r), skip network", ident, version)
            return self.immediate({})

        self.logger.debug("restore_version: dashboard=%s version=%s", ident, version)
        return self.transport.post(f"api/dashboards/db/{ident}/restore", {"version": version})


def create_history_client(
    settings: Settings | None = None,
    logger: logging.Logger | None = None,
    *,
    strict_version: bool = False,
) -> HistoryClient:
    """Wire a HistoryClient over RequestsTransport from DASHHISTORY_* settings."""
    settings = settings or load_settings()
    if logger is None:
        logger = setup_logging(settings=settings)

    transport = RequestsTransport(
        settings.api_url,
        timeout=settings.timeout,
        max_workers=settings.max_workers,
        logger=logger,
    )
    return HistoryClient(transport, logger=logger, strict_version=strict_version)
