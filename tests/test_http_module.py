"""Tests for the shared HTTP fetcher."""

from __future__ import annotations

import httpx
import pytest

from url_updater.config import HttpSettings
from url_updater.http.fetcher import HttpFetcher
from url_updater.updater.base import UpdaterError


def _fetcher(handler) -> HttpFetcher:
    fetcher = HttpFetcher(HttpSettings(max_retries=0))
    fetcher._client = httpx.Client(transport=httpx.MockTransport(handler))  # noqa: SLF001
    return fetcher


def _routes(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/ok":
        return httpx.Response(200, text="hello", headers={"content-type": "text/plain"})
    if request.url.path == "/json":
        return httpx.Response(200, text='[{"tag_name": "v1.0.0"}]')
    if request.url.path == "/broken-json":
        return httpx.Response(200, text="{not json")
    if request.url.path == "/slow":
        raise httpx.ReadTimeout("timed out", request=request)
    if request.url.path == "/down":
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(404, text="missing")


class TestHttpFetcher:
    def test_fetch_success(self):
        with _fetcher(_routes) as fetcher:
            result = fetcher.fetch("https://example.com/ok")
        assert result.is_success
        assert result.content == "hello"
        assert result.content_type == "text/plain"
        assert result.error is None

    def test_fetch_http_error_status(self):
        with _fetcher(_routes) as fetcher:
            result = fetcher.fetch("https://example.com/nope")
        assert not result.is_success
        assert result.status_code == 404
        assert result.error == "HTTP 404"

    def test_fetch_timeout(self):
        with _fetcher(_routes) as fetcher:
            result = fetcher.fetch("https://example.com/slow")
        assert not result.is_success
        assert result.error == "timeout"

    def test_fetch_transport_error(self):
        with _fetcher(_routes) as fetcher:
            result = fetcher.fetch("https://example.com/down")
        assert result.status_code == 0
        assert "connection refused" in (result.error or "")

    def test_fetch_text_raises_on_failure(self):
        with _fetcher(_routes) as fetcher, pytest.raises(UpdaterError, match="HTTP 404") as info:
            fetcher.fetch_text("https://example.com/nope")
        assert info.value.code == "http"

    def test_fetch_json(self):
        with _fetcher(_routes) as fetcher:
            assert fetcher.fetch_json("https://example.com/json") == [{"tag_name": "v1.0.0"}]

    def test_fetch_json_invalid(self):
        with _fetcher(_routes) as fetcher, pytest.raises(UpdaterError, match="Invalid JSON"):
            fetcher.fetch_json("https://example.com/broken-json")
