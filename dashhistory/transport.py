"""Transport contract and the default requests-based implementation.

- `Transport`: abstract get/post returning `concurrent.futures.Future`
- `RequestsTransport`: `requests.Session` + ThreadPoolExecutor (DI via
  `_session_factory` / `_pool_factory` for unit tests)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from http import HTTPStatus
from typing import Any

import requests

from .errors import HTTPStatusError, TransportError
from .futures import failed

__all__ = ["Transport", "RequestsTransport", "QueryParams", "DEFAULT_HTTP_TIMEOUT", "DEFAULT_MAX_WORKERS"]

DEFAULT_HTTP_TIMEOUT = 5
DEFAULT_MAX_WORKERS = 4

# Всё, что requests принимает как params: dict, список пар или готовая строка запроса
QueryParams = Mapping[str, Any] | Sequence[tuple[str, Any]] | str | bytes


class Transport(ABC):
    """
    Contract for talking to the versioning API.

    Implementations must:
      - resolve the future with the decoded backend payload,
      - fail the future (never raise synchronously) on network/HTTP errors,
      - treat `path` as relative to their own API root.
    """

    @abstractmethod
    def get(self, path: str, params: QueryParams | None = None) -> Future[Any]:
        """Issue a read."""
        raise NotImplementedError

    @abstractmethod
    def post(self, path: str, data: Any = None) -> Future[Any]:
        """Issue a write; `data` is sent as a JSON body."""
        raise NotImplementedError


def _join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class RequestsTransport(Transport):
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        logger: logging.Logger | None = None,
        _session_factory: Callable[[], requests.Session] | None = None,
        _pool_factory: Callable[..., ThreadPoolExecutor] | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout or DEFAULT_HTTP_TIMEOUT
        self.logger = logger or logging.getLogger("dashhistory")

        session_factory = _session_factory or requests.Session
        pool_factory = _pool_factory or ThreadPoolExecutor
        self._session = session_factory()
        self._session.headers.update({"Accept": "application/json"})
        self._pool = pool_factory(max_workers=max_workers)

    def get(self, path: str, params: QueryParams | None = None) -> Future[Any]:
        return self._submit("GET", path, params=params)

    def post(self, path: str, data: Any = None) -> Future[Any]:
        return self._submit("POST", path, json=data)

    def _submit(self, method: str, path: str, **kwargs: Any) -> Future[Any]:
        try:
            return self._pool.submit(self._request, method, path, **kwargs)
        except RuntimeError as e:
            # пул уже закрыт: отдаём упавший future, а не исключение
            err = TransportError(f"{method} {path}: transport is closed")
            err.__cause__ = e
            return failed(err)

    def close(self) -> None:
        self._pool.shutdown(wait=True)
        self._session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Выполняется в потоке пула; исключение отсюда становится исключением future
    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = _join_url(self.base_url, path)
        self.logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            self.logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e

        status = getattr(resp, "status_code", HTTPStatus.OK)
        if status >= HTTPStatus.BAD_REQUEST:
            self.logger.warning("%s %s -> HTTP %d", method, url, status)
            raise HTTPStatusError(status, url, getattr(resp, "text", ""))

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(f"{method} {url} returned invalid JSON") from e
