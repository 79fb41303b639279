"""Synchronous HTTP client with transport retries and timeout."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from url_updater.config import HttpSettings
from url_updater.updater.base import UpdaterError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FetchResult:
    """Result of an HTTP fetch operation."""

    url: str
    status_code: int
    content: str
    content_type: str
    is_success: bool
    error: str | None = None


class HttpFetcher:
    """HTTP client wrapper with retry, timeout, and user-agent configuration."""

    def __init__(
        self,
        settings: HttpSettings | None = None,
        *,
        headers: dict[str, str] | None = None,
    ) -> None:
        settings = settings or HttpSettings()
        self._timeout = httpx.Timeout(settings.timeout_seconds, connect=10.0)
        base_headers = {"User-Agent": settings.user_agent}
        if headers:
            base_headers.update(headers)
        transport = httpx.HTTPTransport(retries=settings.max_retries)
        self._client = httpx.Client(
            timeout=self._timeout,
            headers=base_headers,
            transport=transport,
            follow_redirects=True,
        )

    def fetch(self, url: str) -> FetchResult:
        """Fetch URL content, returning structured result."""

        try:
            response = self._client.get(url)
            content_type = response.headers.get("content-type", "")
            return FetchResult(
                url=url,
                status_code=response.status_code,
                content=response.text,
                content_type=content_type,
                is_success=response.is_success,
                error=None if response.is_success else f"HTTP {response.status_code}",
            )
        except httpx.TimeoutException:
            logger.warning("Timeout fetching %s", url)
            return FetchResult(
                url=url,
                status_code=0,
                content="",
                content_type="",
                is_success=False,
                error="timeout",
            )
        except httpx.HTTPError as exc:
            logger.warning("HTTP error fetching %s: %s", url, exc)
            return FetchResult(
                url=url,
                status_code=0,
                content="",
                content_type="",
                is_success=False,
                error=str(exc),
            )

    def fetch_text(self, url: str) -> str:
        """Fetch URL body or raise ``UpdaterError``."""

        result = self.fetch(url)
        if not result.is_success:
            raise UpdaterError(f"Failed to fetch {url}: {result.error}", code="http")
        return result.content

    def fetch_json(self, url: str) -> Any:
        text = self.fetch_text(url)
        try:
            return json.loads(text)
        except json.JSONDecodeError as error:
            raise UpdaterError(f"Invalid JSON from {url}: {error}", code="json") from error

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpFetcher:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()
