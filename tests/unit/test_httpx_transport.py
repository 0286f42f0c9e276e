# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import base64
import logging

import httpx
import pytest

from quaff.config import TransportSettings
from quaff.endpoints import Endpoint
from quaff.errors import ErrorCategory, TransportError, UnknownResponseClass
from quaff.log import TRACE
from quaff.responses import (
    JSON_ERROR_RESPONSE,
    JSON_RESPONSE,
    RESULT_CODE,
    RESULT_MESSAGE,
    ErrorResponse,
    JsonErrorResponse,
    JsonResponse,
    Response,
    ResponseRegistry,
)
from quaff.transports import ACTION_EXISTS, ACTION_READ, REQUEST_OPTIONS, HttpxTransport, PingResult, Transport
from quaff.utils.codes import STATUS_CODE_RANGE, ResponseCodes

OK_SET = ResponseCodes.from_patterns([200, 201, 204], ["4xx", "5xx"])


def test_make_response_ok_scenario(endpoint):
    raw = httpx.Response(200, content=b'{"a": 1}', headers={"Content-Type": "application/json"})
    resp = HttpxTransport.make_response(endpoint, raw, codes=OK_SET)
    assert type(resp) is Response
    assert resp.meta[RESULT_CODE] == 200
    assert resp.content_type == "application/json"
    assert RESULT_MESSAGE not in resp.meta


def test_make_response_error_scenario(endpoint):
    raw = httpx.Response(404, content=b"missing", headers={"Content-Type": "text/plain"})
    resp = HttpxTransport.make_response(endpoint, raw, codes=OK_SET)
    assert isinstance(resp, ErrorResponse)
    assert resp.meta[RESULT_CODE] == 404
    assert resp.result_message == "Not Found"
    assert resp.body == b"missing"


def test_classification_depends_only_on_ok_set(endpoint):
    for code in STATUS_CODE_RANGE:
        for body in (b"", b'{"error": false}'):
            resp = HttpxTransport.make_response(endpoint, httpx.Response(code, content=body), codes=OK_SET)
            assert resp.is_error is (code not in OK_SET.ok)


def test_make_response_uses_endpoint_classes():
    endpoint = Endpoint(base_url="http://x.test", response_class=JSON_RESPONSE, error_class=JSON_ERROR_RESPONSE)
    ok = HttpxTransport.make_response(endpoint, httpx.Response(200, json={"v": 1}))
    err = HttpxTransport.make_response(endpoint, httpx.Response(500, json={"e": "x"}))
    assert isinstance(ok, JsonResponse) and ok.data() == {"v": 1}
    assert isinstance(err, JsonErrorResponse) and err.data() == {"e": "x"}


def test_make_response_unregistered_class_raises():
    endpoint = Endpoint(base_url="http://x.test", response_class="missing")
    with pytest.raises(UnknownResponseClass):
        HttpxTransport.make_response(endpoint, httpx.Response(200), registry=ResponseRegistry())


def test_merged_options_keep_accept_user_agent_and_auth(settings):
    endpoint = Endpoint(
        base_url="http://x.test",
        accept_type="text/xml",
        auth_options={ACTION_READ: {REQUEST_OPTIONS: {"headers": {"X-Api-Key": "abc"}}}},
    )
    with HttpxTransport(endpoint, {"transport": httpx.MockTransport(lambda r: httpx.Response(200))}, settings=settings) as transport:
        read = transport.request_options(ACTION_READ)
        exists = transport.request_options(ACTION_EXISTS)
    assert read["headers"] == {"Accept": "text/xml", "X-Api-Key": "abc", "User-Agent": "QuaffTest/1.0"}
    assert exists["headers"] == {"Accept": "text/xml", "User-Agent": "QuaffTest/1.0"}


def test_get_sends_headers_and_query_params(make_transport):
    endpoint = Endpoint(base_url="http://api.example.test/v1", query={"format": "json", "page": 1})
    transport, handler = make_transport(endpoint, lambda r: httpx.Response(200, json=[]))

    resp = transport.get("/items", {"page": 3})

    assert resp.result_code == 200
    request = handler.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/v1/items"
    assert dict(request.url.params) == {"format": "json", "page": "3"}
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"] == "QuaffTest/1.0"


def test_get_applies_endpoint_auth(make_transport):
    endpoint = Endpoint(
        base_url="http://api.example.test",
        auth_options={ACTION_READ: {REQUEST_OPTIONS: {"auth": ("user", "secret")}}},
    )
    transport, handler = make_transport(endpoint)

    transport.get("items")

    expected = "Basic " + base64.b64encode(b"user:secret").decode()
    assert handler.requests[0].headers["Authorization"] == expected


def test_get_returns_error_response_for_http_errors(make_transport, endpoint):
    transport, _ = make_transport(endpoint, lambda r: httpx.Response(503, text="down"))
    resp = transport.get("items")
    assert isinstance(resp, ErrorResponse)
    assert resp.result_code == 503
    assert resp.result_message == "Service Unavailable"
    assert resp.text == "down"


def test_get_uses_configured_ok_codes(make_transport, endpoint, settings):
    settings.ok_codes = ("200",)
    transport, _ = make_transport(endpoint, lambda r: httpx.Response(204))
    assert transport.get("items").is_error is True
    assert transport.response_decode_ok() == frozenset({200})
    assert transport.is_ok(200) and transport.is_error(204)


def test_get_wraps_client_exceptions(make_transport, endpoint):
    def refuse(request):
        raise ConnectionRefusedError(111, "Connection refused")

    transport, _ = make_transport(endpoint, refuse)

    with pytest.raises(TransportError) as excinfo:
        transport.get("/items")

    err = excinfo.value
    assert "Connection refused" in err.message
    assert err.code == 111
    assert err.category == ErrorCategory.CONNECTION_ERROR
    assert isinstance(err.__cause__, ConnectionRefusedError)


def test_get_wraps_httpx_timeouts(make_transport, endpoint):
    def slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    transport, _ = make_transport(endpoint, slow)
    with pytest.raises(TransportError) as excinfo:
        transport.get("items")
    assert excinfo.value.category == ErrorCategory.TIMEOUT
    assert isinstance(excinfo.value.__cause__, httpx.ReadTimeout)


def test_get_wraps_malformed_uri(make_transport):
    transport, handler = make_transport(Endpoint(base_url=""))
    with pytest.raises(TransportError):
        transport.get("items")
    assert handler.requests == []


def test_get_logs_sync_and_trace_body(make_transport, endpoint, caplog):
    transport, _ = make_transport(endpoint, lambda r: httpx.Response(200, text="payload-body"))
    caplog.set_level(TRACE, logger="quaff.transports.httpx_transport")

    transport.get("items")

    debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
    trace = [r for r in caplog.records if r.levelno == TRACE]
    assert any("sync GET" in r.getMessage() for r in debug)
    assert any("payload-body" in r.getMessage() for r in trace)


def test_get_skips_trace_when_disabled(make_transport, endpoint, caplog):
    transport, _ = make_transport(endpoint, lambda r: httpx.Response(200, text="payload-body"))
    caplog.set_level(logging.DEBUG, logger="quaff.transports.httpx_transport")
    transport.get("items")
    assert not [r for r in caplog.records if r.levelno == TRACE]


def test_ping_issues_head_and_returns_status(make_transport, endpoint):
    transport, handler = make_transport(endpoint, lambda r: httpx.Response(404 if r.url.path.endswith("gone") else 200))

    found = transport.ping("items/1")
    missing = transport.ping("http://api.example.test/v1/gone")

    assert isinstance(found, PingResult)
    assert found.status_code == 200 and found.exists
    assert missing.status_code == 404 and not missing.exists
    assert isinstance(missing.response, ErrorResponse)
    assert [r.method for r in handler.requests] == ["HEAD", "HEAD"]
    assert handler.requests[0].headers["Accept"] == "application/json"


def test_ping_wraps_client_exceptions(make_transport, endpoint):
    def refuse(request):
        raise httpx.ConnectError("All connection attempts failed", request=request)

    transport, _ = make_transport(endpoint, refuse)
    with pytest.raises(TransportError, match="All connection attempts failed"):
        transport.ping("items")


def test_client_built_from_raw_options(endpoint):
    settings = TransportSettings(timeout=10.0, verify_ssl=False)
    transport = HttpxTransport(endpoint, {"timeout": 2.5}, settings=settings)
    try:
        assert transport.client.timeout.read == 2.5
        assert transport.client.follow_redirects is True
        assert transport.client_options == {"timeout": 2.5}
    finally:
        transport.close()


def test_close_closes_client(endpoint, settings):
    client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    with HttpxTransport(endpoint, settings=settings, client=client) as transport:
        assert transport.client is client
    assert client.is_closed


def test_bad_code_settings_fail_before_any_request(endpoint):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200)

    settings = TransportSettings(ok_codes=("ok",))
    with pytest.raises(ValueError, match="Invalid status code pattern"):
        HttpxTransport(endpoint, {"transport": httpx.MockTransport(handler)}, settings=settings)
    assert seen == []


def test_malformed_ok_codes_env_uses_defaults(monkeypatch, endpoint):
    monkeypatch.setenv("QUAFF_RESPONSE_OK_CODES", "ok")
    transport = HttpxTransport(endpoint, {"transport": httpx.MockTransport(lambda r: httpx.Response(200))})
    try:
        assert transport.get("items").result_code == 200
    finally:
        transport.close()


def test_get_keeps_base_url_query(make_transport):
    transport, handler = make_transport(Endpoint(base_url="http://x.test/v1?apikey=k"))

    transport.get("")
    transport.get("items")

    assert str(handler.requests[0].url) == "http://x.test/v1?apikey=k"
    assert str(handler.requests[1].url) == "http://x.test/v1/items?apikey=k"


def test_transport_base_is_abstract(endpoint, settings):
    with pytest.raises(TypeError):
        Transport(endpoint, settings=settings)


def test_response_decode_sets_and_endpoint(make_transport, endpoint):
    transport, _ = make_transport(endpoint)
    assert transport.get_endpoint() is endpoint
    assert transport.response_decode_ok() == frozenset(range(200, 300))
    assert transport.response_decode_error() == frozenset(range(400, 600))
    assert transport.response_decode_ok().isdisjoint(transport.response_decode_error())
