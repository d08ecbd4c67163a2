# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx

from bootcheck.http.adapters import StubHttpClient
from bootcheck.http.httpx_client import DEFAULT_USER_AGENT, HttpxClient
from bootcheck.http.models import HttpRequest, HttpResponse


def _client(handler) -> HttpxClient:
    return HttpxClient(timeout=2.0, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_httpx_client_concatenates_streamed_chunks():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=iter([b'{"status"', b':"ok"', b"}"]))

    resp = _client(handler).request(HttpRequest(url="http://localhost:3000/health"))

    assert resp.ok is True
    assert resp.status_code == 200
    assert resp.text == '{"status":"ok"}'
    assert seen[0].method == "GET"
    assert seen[0].headers["User-Agent"] == DEFAULT_USER_AGENT


def test_httpx_client_passes_request_timeout(monkeypatch):
    captured = {}

    class FakeHttpxClient:
        def stream(self, method, url, headers=None, timeout=None):  # noqa: ARG002
            captured["timeout"] = timeout
            raise httpx.ConnectTimeout("timed out")

        def close(self):  # pragma: no cover - not exercised
            pass

    client = HttpxClient(timeout=9.0, client=FakeHttpxClient())
    resp = client.request(HttpRequest(url="http://example", timeout=1.2))

    assert captured["timeout"] == 1.2
    assert resp.ok is False
    assert resp.error_type == "ConnectTimeout"
    assert resp.error_message == "timed out"
    assert isinstance(resp.exception, httpx.ConnectTimeout)

    client.request(HttpRequest(url="http://example"))
    assert captured["timeout"] == 9.0

    client.request(HttpRequest(url="http://example", timeout=float("inf")))
    assert captured["timeout"] == 9.0


def test_httpx_client_never_raises_on_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    resp = _client(handler).request(HttpRequest(url="http://localhost:1/health"))

    assert resp.ok is False
    assert resp.status_code is None
    assert "Connection refused" in resp.error_message


def test_httpx_client_invalid_timeout_uses_default():
    assert HttpxClient(timeout=0).timeout == 5.0
    assert HttpxClient(timeout=None).timeout == 5.0
    assert HttpxClient(timeout=float("inf")).timeout == 5.0
    assert HttpxClient(timeout=float("nan")).timeout == 5.0


def test_stub_client_records_requests():
    stub = StubHttpClient()
    stub.add("http://x/health", HttpResponse(ok=True, status_code=200, text="up"))

    assert stub.request(HttpRequest(url="http://x/health")).text == "up"
    missing = stub.request(HttpRequest(url="http://y/health"))
    assert missing.ok is False
    assert isinstance(missing.exception, ConnectionRefusedError)
    assert [r.url for r in stub.requests] == ["http://x/health", "http://y/health"]
    stub.close()
    assert stub.closed is True
