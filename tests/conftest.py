from concurrent.futures import Future

import pytest

from dashhistory import HistoryClient, failed, resolved


class FakeTransport:
    """Запоминает каждый вызов и отдаёт заранее заданный future."""

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls = []

    def _reply(self):
        if self.error is not None:
            return failed(self.error)
        return resolved(self.payload)

    def get(self, path, params=None):
        self.calls.append(("GET", path, params))
        return self._reply()

    def post(self, path, data=None):
        self.calls.append(("POST", path, data))
        return self._reply()


class AssertNotCalledTransport:
    # Если клиент вдруг полезет в сеть, тест упадёт сразу
    def get(self, path, params=None):
        raise AssertionError(f"transport MUST NOT be called: GET {path}")

    def post(self, path, data=None):
        raise AssertionError(f"transport MUST NOT be called: POST {path}")


@pytest.fixture
def fake_transport_factory():
    def _factory(payload=None, error=None):
        return FakeTransport(payload=payload, error=error)

    return _factory


@pytest.fixture
def fake_transport(fake_transport_factory):
    return fake_transport_factory(payload={"ok": True})


@pytest.fixture
def client(fake_transport):
    return HistoryClient(fake_transport)


@pytest.fixture
def not_called_transport():
    return AssertNotCalledTransport()


@pytest.fixture
def offline_client(not_called_transport):
    return HistoryClient(not_called_transport)


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text
        if json_data is not None:
            self.content = b"x"
        else:
            self.content = text.encode("utf-8")

    def json(self):
        if self._json is None:
            raise ValueError("no json")
        return self._json


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response or FakeResponse(json_data={})
        self.error = error
        self.requests = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


class InlinePool:
    """Пул, который выполняет задачу сразу, в том же потоке."""

    def __init__(self, max_workers=None):
        self.max_workers = max_workers
        self.shutdown_called = False

    def submit(self, fn, *args, **kwargs):
        if self.shutdown_called:
            raise RuntimeError("cannot schedule new futures after shutdown")
        fut = Future()
        try:
            fut.set_result(fn(*args, **kwargs))
        except Exception as e:
            fut.set_exception(e)
        return fut

    def shutdown(self, wait=True):
        self.shutdown_called = True


@pytest.fixture
def fake_session_factory():
    def _factory(response=None, error=None):
        return FakeSession(response=response, error=error)

    return _factory


@pytest.fixture
def fake_response_factory():
    return FakeResponse


@pytest.fixture
def inline_pool_factory():
    created = []

    def _factory(*args, **kwargs):
        pool = InlinePool(*args, **kwargs)
        created.append(pool)
        return pool

    _factory.created = created
    return _factory
