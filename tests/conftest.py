import pytest

_MALFORMED = object()


class DummyResp:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is _MALFORMED:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


@pytest.fixture
def malformed():
    return _MALFORMED


@pytest.fixture
def fake_http():
    """
    Фабрика фейкового requests.get/post: отдаёт заданный ответ и запоминает вызовы.

        call, calls = fake_http(DummyResp(200, {...}))
    """

    def _factory(resp=None, *, exc=None):
        calls = []

        def _call(url, **kwargs):
            calls.append({"url": url, **kwargs})
            if exc is not None:
                raise exc
            return resp

        return _call, calls

    return _factory


@pytest.fixture
def resp():
    return DummyResp


@pytest.fixture
def http_must_not_be_called():
    def _call(*a, **k):
        raise AssertionError("HTTP MUST NOT be called here")

    return _call
