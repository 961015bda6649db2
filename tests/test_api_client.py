import pytest
import requests

from issue_app.core.api_client import IssueAPI
from issue_app.core.errors import TransportError
from issue_app.core.models import FilterKind

BASE = "https://issues.example.com/api"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    def __init__(self, routes):
        self.routes = routes
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        resp = self.routes.get(url)
        if isinstance(resp, Exception):
            raise resp
        return resp or FakeResponse(404, text="not found")


def _api(routes):
    session = FakeSession(routes)
    return IssueAPI(BASE + "/", timeout=5, session=session), session


def test_fetch_issues():
    api, session = _api({f"{BASE}/issues": FakeResponse(payload=[{"id": 1}, "junk"])})
    assert api.fetch_issues() == [{"id": 1}]
    assert session.calls == [(f"{BASE}/issues", {}, 5)]
    assert session.headers["Accept"] == "application/json"


def test_fetch_filtered_params():
    api, session = _api({f"{BASE}/filter": FakeResponse(payload=[])})
    assert api.fetch_filtered(FilterKind.PRIORITY, "High") == []
    assert session.calls[0][1] == {"priority": "High"}


def test_fetch_issue_not_found():
    api, session = _api({})
    assert api.fetch_issue("A 1") is None
    assert session.calls[0][0] == f"{BASE}/issues/A%201"


def test_fetch_stats():
    api, _ = _api({f"{BASE}/stats": FakeResponse(payload={"total": 0})})
    assert api.fetch_stats() == {"total": 0}


def test_server_error():
    api, _ = _api({f"{BASE}/stats": FakeResponse(500, text="boom")})
    with pytest.raises(TransportError) as excinfo:
        api.fetch_stats()
    assert excinfo.value.status_code == 500


def test_missing_list_endpoint_is_an_error():
    api, _ = _api({})
    with pytest.raises(TransportError):
        api.fetch_issues()


def test_connection_error():
    api, _ = _api({f"{BASE}/issues": requests.ConnectionError("refused")})
    with pytest.raises(TransportError):
        api.fetch_issues()


def test_invalid_json_and_shape():
    api, _ = _api(
        {
            f"{BASE}/issues": FakeResponse(payload=None),
            f"{BASE}/stats": FakeResponse(payload=[1, 2]),
        }
    )
    with pytest.raises(TransportError):
        api.fetch_issues()
    with pytest.raises(TransportError):
        api.fetch_stats()
