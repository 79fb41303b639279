"""Docker Desktop download URLs from the release notes page."""

from __future__ import annotations

from url_updater.updater.website import WebsiteUrlUpdater

_DOWNLOAD_BASE = "https://desktop.docker.com"


class DockerDesktopUrlUpdater(WebsiteUrlUpdater):
    tool = "docker"
    edition = "docker"
    version_url = "https://docs.docker.com/desktop/release-notes/"
    # version heading followed, within the same section, by the Windows installer link
    version_pattern = (
        r"<h2[^>]*>\s*(?P<version>\d+\.\d+\.\d+)\s*</h2>"
        r"(?:(?!<h2).)*?desktop\.docker\.com/win/main/amd64/(?P<build>\d+)/"
    )
    url_templates = {
        "windows_x64.urls": _DOWNLOAD_BASE
        + "/win/main/amd64/{build}/Docker%20Desktop%20Installer.exe",
        "mac_x64.urls": _DOWNLOAD_BASE + "/mac/main/amd64/{build}/Docker.dmg",
        "mac_arm64.urls": _DOWNLOAD_BASE + "/mac/main/arm64/{build}/Docker.dmg",
        "linux_x64.urls": _DOWNLOAD_BASE + "/linux/main/amd64/{build}/docker-desktop-amd64.deb",
    }
