"""Updaters that discover versions from an HTML page or the GitHub releases API."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from url_updater.http.fetcher import HttpFetcher
from url_updater.updater.base import AbstractUrlUpdater, UpdaterError
from url_updater.updater.deadline import Clock, utc_now

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


class WebsiteUrlUpdater(AbstractUrlUpdater):
    """Scrape ``version_url`` with ``version_pattern`` and fill ``url_templates``.

    ``version_pattern`` must define a ``version`` group; any other named
    groups are available to the templates alongside it.
    """

    version_url: ClassVar[str] = ""
    version_pattern: ClassVar[str] = ""
    url_templates: ClassVar[Mapping[str, str]] = {}

    def __init__(self, fetcher: HttpFetcher, *, clock: Clock = utc_now) -> None:
        super().__init__(clock=clock)
        self.fetcher = fetcher
        self._matches: dict[str, dict[str, str]] = {}

    def fetch_versions(self) -> Sequence[str]:
        page = self.fetcher.fetch_text(self.version_url)
        self._matches = {}
        for match in re.finditer(self.version_pattern, page, flags=re.DOTALL):
            groups = {key: value for key, value in match.groupdict().items() if value is not None}
            version = groups.get("version")
            if version and version not in self._matches:
                self._matches[version] = groups
        if not self._matches:
            raise UpdaterError(
                f"No versions found for {self.identity()} at {self.version_url}",
                code="no_versions",
            )
        logger.debug("Matched %d versions at %s", len(self._matches), self.version_url)
        return list(self._matches)

    def build_urls(self, version: str) -> Mapping[str, list[str]]:
        values = self._matches.get(version, {"version": version})
        return {
            file_name: [template.format(**values)]
            for file_name, template in self.url_templates.items()
        }


class GithubUrlUpdater(AbstractUrlUpdater):
    """Read published releases of ``github_owner/github_repo``.

    Drafts and pre-releases are ignored. When a release lists its assets,
    only templates whose file name is among them are kept.
    """

    github_owner: ClassVar[str] = ""
    github_repo: ClassVar[str] = ""
    url_templates: ClassVar[Mapping[str, str]] = {}

    def __init__(self, fetcher: HttpFetcher, *, clock: Clock = utc_now) -> None:
        super().__init__(clock=clock)
        self.fetcher = fetcher
        self._assets: dict[str, set[str]] = {}

    @property
    def releases_url(self) -> str:
        repo = f"{self.github_owner}/{self.github_repo}"
        return f"{GITHUB_API_URL}/repos/{repo}/releases?per_page=100"

    def fetch_versions(self) -> Sequence[str]:
        payload = self.fetcher.fetch_json(self.releases_url)
        if not isinstance(payload, list):
            raise UpdaterError(
                f"Unexpected releases payload for {self.github_owner}/{self.github_repo}",
                code="payload",
            )
        self._assets = {}
        for release in payload:
            version = _release_version(release)
            if version is None:
                continue
            self._assets[version] = {
                str(asset.get("name", "")) for asset in release.get("assets") or []
            }
        return list(self._assets)

    def build_urls(self, version: str) -> Mapping[str, list[str]]:
        assets = self._assets.get(version, set())
        urls: dict[str, list[str]] = {}
        for file_name, template in self.url_templates.items():
            url = template.format(version=version)
            if assets and url.rsplit("/", 1)[-1] not in assets:
                continue
            urls[file_name] = [url]
        return urls


def _release_version(release: Any) -> str | None:
    if not isinstance(release, dict):
        return None
    if release.get("draft") or release.get("prerelease"):
        return None
    tag = str(release.get("tag_name") or "").strip()
    if not tag:
        return None
    return tag[1:] if tag.startswith("v") else tag
