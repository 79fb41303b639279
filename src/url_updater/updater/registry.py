"""Ordered list of updaters run by a batch update."""

from __future__ import annotations

from url_updater.config import HttpSettings
from url_updater.http.fetcher import HttpFetcher
from url_updater.tools.docker import DockerDesktopUrlUpdater
from url_updater.tools.gh import GhUrlUpdater
from url_updater.updater.base import UrlUpdater


def github_fetcher(settings: HttpSettings | None = None) -> HttpFetcher:
    """Fetcher for the GitHub API, authenticated when a token is configured."""

    settings = settings or HttpSettings()
    headers = {"Accept": "application/vnd.github+json"}
    if settings.github_token:
        headers["Authorization"] = f"Bearer {settings.github_token}"
    return HttpFetcher(settings, headers=headers)


def default_updaters(
    fetcher: HttpFetcher | None = None,
    *,
    github: HttpFetcher | None = None,
) -> list[UrlUpdater]:
    """Build the updaters in the order a batch run dispatches them."""

    fetcher = fetcher or HttpFetcher()
    return [
        DockerDesktopUrlUpdater(fetcher),
        GhUrlUpdater(github or fetcher),
    ]
