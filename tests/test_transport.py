import json
from datetime import timedelta

import pytest
import responses

from zaya.transport import BASE_URL, APIError, Transport, ZayaError

API = "https://api.example.com/v1"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def transport():
    with Transport(api_key="token", base_url=API) as t:
        yield t


def test_returns_decoded_json(rsps, transport):
    rsps.add(responses.GET, f"{API}/account", json={"id": 7, "email": "me@example.com"})
    result = transport.request("GET", "/account")
    assert result == {"id": 7, "email": "me@example.com"}


def test_sends_auth_and_json_headers(rsps, transport):
    rsps.add(responses.GET, f"{API}/account", json={"id": 1})
    result = transport.request("GET", "/account")
    assert result == {"id": 1}
    sent = rsps.calls[0].request
    assert sent.headers["Authorization"] == "Bearer token"
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.headers["Accept"] == "application/json"


def test_body_is_sent_as_json(rsps, transport):
    rsps.add(responses.POST, f"{API}/spaces", json={"id": 1})
    body = {"name": "Work", "color": "#ff0000"}
    result = transport.request("POST", "/spaces", body)
    assert result == {"id": 1}
    assert json.loads(rsps.calls[0].request.body) == body


def test_no_body_when_none(rsps, transport):
    rsps.add(responses.GET, f"{API}/links/3", json={"id": 3})
    result = transport.request("GET", "/links/3")
    assert result == {"id": 3}
    assert rsps.calls[0].request.body is None


def test_empty_reply_returns_none(rsps, transport):
    rsps.add(responses.DELETE, f"{API}/links/3", body="", status=204)
    assert transport.request("DELETE", "/links/3") is None


def test_error_status_raises_api_error(rsps, transport):
    rsps.add(responses.GET, f"{API}/domains/9", body="missing domain", status=404)
    with pytest.raises(APIError) as info:
        transport.request("GET", "/domains/9")
    assert info.value.status_code == 404
    assert info.value.body == "missing domain"
    assert "missing domain" in str(info.value)
    assert str(info.value).startswith("API error: 404")


def test_api_error_is_zaya_error(rsps, transport):
    rsps.add(responses.GET, f"{API}/account", body="boom", status=500)
    with pytest.raises(ZayaError):
        transport.request("GET", "/account")


def test_invalid_json_raises(rsps, transport):
    rsps.add(responses.GET, f"{API}/account", body="not json")
    with pytest.raises(ZayaError, match="failed to decode response"):
        transport.request("GET", "/account")


def test_connection_failure_raises(rsps, transport):
    with pytest.raises(ZayaError, match="failed to send request"):
        transport.request("GET", "/unregistered")


def test_unserialisable_body_raises(transport):
    with pytest.raises(ZayaError, match="failed to marshal request body"):
        transport.request("POST", "/links", {"bad": object()})


def test_defaults_and_timedelta_timeout():
    t = Transport(api_key="token", timeout=timedelta(seconds=5))
    assert t.base_url == BASE_URL
    assert t.timeout == 5.0
    t.close()