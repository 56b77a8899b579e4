import pytest
import requests

from infrastructure.threadcast_client import (
    ThreadcastClient,
    ThreadcastClientError,
    ThreadcastPermissionError,
)


class DummyResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.text = str(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FlakySession:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def _next(self, method, url, json=None, params=None, headers=None, timeout=None):
        self.calls.append((method, url, json, params, headers))
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url, **kwargs):
        return self._next("get", url, **kwargs)

    def patch(self, url, **kwargs):
        return self._next("patch", url, **kwargs)


def _ok(data):
    return DummyResponse(200, {"success": True, "data": data, "timestamp": "now"})


def _client(session, **kwargs):
    client = ThreadcastClient("http://server/api/", session=session, token_provider=lambda: "tok", **kwargs)
    return client


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(ThreadcastClient, "_sleep", lambda self, d: None)


def test_list_todos_unwraps_envelope():
    session = FlakySession([_ok([{"id": "a"}, {"id": "b"}])])
    todos = _client(session).list_todos("m-1")
    assert [t["id"] for t in todos] == ["a", "b"]
    method, url, _, params, headers = session.calls[0]
    assert (method, url) == ("get", "http://server/api/todos")
    assert params == {"missionId": "m-1"}
    assert headers["Authorization"] == "Bearer tok"


def test_list_todos_accepts_paged_payload():
    session = FlakySession([_ok({"content": [{"id": "a"}], "totalElements": 1})])
    assert _client(session).list_todos("m") == [{"id": "a"}]


def test_update_dependencies_patches_list():
    session = FlakySession([_ok({"id": "b", "dependencies": [{"id": "a"}]})])
    result = _client(session).update_dependencies("b", ["a"])
    method, url, body, _, _ = session.calls[0]
    assert (method, url) == ("patch", "http://server/api/todos/b/dependencies")
    assert body == {"dependencies": ["a"]}
    assert result["id"] == "b"


def test_retries_network_errors():
    session = FlakySession([requests.ConnectionError("down"), _ok({"id": "a"})])
    assert _client(session, max_attempts=2).get_todo("a") == {"id": "a"}
    assert len(session.calls) == 2


def test_network_error_after_last_attempt():
    session = FlakySession([requests.ConnectionError("down"), requests.ConnectionError("down")])
    with pytest.raises(ThreadcastClientError):
        _client(session, max_attempts=2).get_todo("a")


def test_retries_server_errors_then_fails():
    session = FlakySession([DummyResponse(502, None), DummyResponse(503, {"success": False})])
    with pytest.raises(ThreadcastClientError):
        _client(session, max_attempts=2).get_todo("a")
    assert len(session.calls) == 2


def test_permission_error():
    session = FlakySession([DummyResponse(401, {"success": False})])
    with pytest.raises(ThreadcastPermissionError):
        _client(session).get_todo("a")


def test_client_error_carries_server_message():
    payload = {"success": False, "error": {"code": "CIRCULAR_DEPENDENCY", "message": "Circular dependency"}}
    session = FlakySession([DummyResponse(400, payload)])
    with pytest.raises(ThreadcastClientError, match="Circular dependency"):
        _client(session).update_dependencies("a", ["b"])


def test_unsuccessful_envelope_is_an_error():
    session = FlakySession([DummyResponse(200, {"success": False, "error": {"message": "nope"}})])
    with pytest.raises(ThreadcastClientError, match="nope"):
        _client(session).get_todo("a")


def test_missing_token_sends_no_header():
    session = FlakySession([_ok([])])
    ThreadcastClient("http://server/api", session=session).list_todos("m")
    assert "Authorization" not in session.calls[0][4]


def test_requires_base_url():
    with pytest.raises(ThreadcastClientError):
        ThreadcastClient("", session=FlakySession([]))
