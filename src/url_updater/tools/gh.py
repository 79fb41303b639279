"""GitHub CLI release archives."""

from __future__ import annotations

from url_updater.updater.website import GithubUrlUpdater

_RELEASE_BASE = "https://github.com/cli/cli/releases/download/v{version}"


class GhUrlUpdater(GithubUrlUpdater):
    tool = "gh"
    github_owner = "cli"
    github_repo = "cli"
    url_templates = {
        "windows_x64.urls": _RELEASE_BASE + "/gh_{version}_windows_amd64.zip",
        "linux_x64.urls": _RELEASE_BASE + "/gh_{version}_linux_amd64.tar.gz",
        "linux_arm64.urls": _RELEASE_BASE + "/gh_{version}_linux_arm64.tar.gz",
        "mac_x64.urls": _RELEASE_BASE + "/gh_{version}_macOS_amd64.zip",
        "mac_arm64.urls": _RELEASE_BASE + "/gh_{version}_macOS_arm64.zip",
    }
