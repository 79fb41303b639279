"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from url_updater.report import UrlFinalReport


@pytest.fixture()
def repository_path(tmp_path: Path) -> Path:
    """Minimal URL repository with one known docker version."""

    root = tmp_path / "ide-urls"
    version_dir = root / "docker" / "docker" / "4.30.0"
    version_dir.mkdir(parents=True)
    (version_dir / "windows_x64.urls").write_text(
        "https://desktop.docker.com/win/main/amd64/149282/Docker%20Desktop%20Installer.exe\n",
        encoding="utf-8",
    )
    (root / ".git").mkdir()
    return root


@pytest.fixture()
def report() -> UrlFinalReport:
    return UrlFinalReport()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (
        "URL_UPDATER_REPOSITORY_PATH",
        "URL_UPDATER_TIMEOUT_MINUTES",
        "URL_UPDATER_REPORT_PATH",
        "URL_UPDATER_HTTP_TIMEOUT_SECONDS",
        "URL_UPDATER_HTTP_MAX_RETRIES",
        "URL_UPDATER_USER_AGENT",
        "URL_UPDATER_GITHUB_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
