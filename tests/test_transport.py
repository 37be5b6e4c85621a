"""
Tests for the HTTP transport: headers, bodies, token rotation, failures
and configuration loading.
"""

import json

import httpx
import pytest

from pixela import PixelaAPI, PixelaConfig

URL = "https://pixe.la/v1/users/alice/graphs"


def test_get_sends_token_without_content_type(client, handler):
    client.get(URL)

    request = handler.last
    assert request.method == "GET"
    assert str(request.url) == URL
    assert request.headers["X-USER-TOKEN"] == "thisissecret"
    assert "content-type" not in request.headers


def test_post_serializes_payload_as_json(client, handler):
    client.post(URL, {"id": "reading", "name": "Reading"})

    request = handler.last
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["X-USER-TOKEN"] == "thisissecret"
    assert json.loads(request.content) == {"id": "reading", "name": "Reading"}


def test_put_without_payload_sends_no_body(client, handler):
    client.put(f"{URL}/reading/increment")

    request = handler.last
    assert request.method == "PUT"
    assert request.headers["Content-Type"] == "application/json"
    assert request.content == b""


def test_delete_sends_token_only(client, handler):
    client.delete(f"{URL}/reading")

    request = handler.last
    assert request.method == "DELETE"
    assert request.headers["X-USER-TOKEN"] == "thisissecret"
    assert "content-type" not in request.headers


def test_returns_body_text_for_error_status(client, handler):
    body = '{"message":"Specified user is not exist.","isSuccess":false}'
    handler.reply(text=body, status_code=404)

    assert client.get(URL) == body


def test_set_token_applies_to_later_requests_only(client, handler):
    # Rotate while the first request is being served
    handler.on_request = lambda request: client.set_token("newsecret")

    client.get(URL)
    handler.on_request = None
    client.get(URL)
    client.delete(URL)

    assert handler.requests[0].headers["X-USER-TOKEN"] == "thisissecret"
    assert [r.headers["X-USER-TOKEN"] for r in handler.requests[1:]] == ["newsecret", "newsecret"]
    assert client.token == "newsecret"


def test_network_error_propagates():
    def fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = PixelaAPI("alice", "thisissecret", transport=httpx.MockTransport(fail))

    with pytest.raises(httpx.ConnectError):
        api.get(URL)


def test_context_manager_closes_client(handler):
    with PixelaAPI("alice", "thisissecret", transport=httpx.MockTransport(handler)) as api:
        api.get(URL)
        http_client = api.get_http_client()

    assert http_client.is_closed


def test_loads_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PIXELA_USERNAME", "bob")
    monkeypatch.setenv("PIXELA_TOKEN", "envtoken")
    monkeypatch.setenv("PIXELA_BASE_URL", "https://example.test/")

    api = PixelaAPI()

    assert api.username == "bob"
    assert api.token == "envtoken"
    assert api.endpoints.user() == "https://example.test/v1/users/bob"


def test_explicit_arguments_override_config():
    config = PixelaConfig(pixela_username="bob", pixela_token="cfgtoken", pixela_api_version="v2")

    api = PixelaAPI(token="override", config=config)

    assert api.username == "bob"
    assert api.token == "override"
    assert api.endpoints.graphs() == "https://pixe.la/v2/users/bob/graphs"


def test_missing_configuration_raises_value_error(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PIXELA_USERNAME", raising=False)
    monkeypatch.delenv("PIXELA_TOKEN", raising=False)

    with pytest.raises(ValueError):
        PixelaAPI()


def test_explicit_zero_timeout_is_kept():
    config = PixelaConfig(pixela_username="bob", pixela_token="cfgtoken", pixela_timeout=45.0)

    api = PixelaAPI(config=config, timeout=0)

    assert api.timeout == 0
