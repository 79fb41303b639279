from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import allure
from click.testing import CliRunner

from url_updater import controllers
from url_updater.main import url_updater
from url_updater.report import UpdateOutcome, UrlFinalReport
from url_updater.repository import urls_file_name
from url_updater.updater.base import ToolIdentity

pytestmark = [
    allure.epic("URL Update"),
    allure.feature("CLI"),
]


class StubUpdater:
    def __init__(self, tool: str, *, fail: bool = False) -> None:
        self.tool = tool
        self.fail = fail
        self._report: UrlFinalReport | None = None

    def identity(self) -> ToolIdentity:
        return ToolIdentity(self.tool)

    def bind(self, deadline: datetime | None, report: UrlFinalReport) -> None:  # noqa: ARG002
        self._report = report

    def execute(self, repository) -> None:
        assert self._report is not None
        if self.fail:
            raise RuntimeError("network error")
        version = (
            repository.get_or_create_tool(self.tool)
            .get_or_create_edition(self.tool)
            .get_or_create_version("1.0.0")
        )
        version.set_urls(urls_file_name("linux", "x64"), [f"https://example.com/{self.tool}"])
        self._report.add(self.tool, UpdateOutcome.ADDED, "1.0.0")


def _stub_updaters(monkeypatch) -> None:
    monkeypatch.setattr(
        controllers,
        "default_updaters",
        lambda *_args, **_kwargs: [StubUpdater("alpha"), StubUpdater("beta", fail=True)],
    )


def test_update_runs_all_and_writes_report(
    repository_path: Path,
    tmp_path: Path,
    monkeypatch,
) -> None:
    _stub_updaters(monkeypatch)
    report_path = tmp_path / "report.json"

    result = CliRunner().invoke(
        url_updater,
        [
            "update",
            "--repository-path",
            str(repository_path),
            "--timeout-minutes",
            "5",
            "--report-path",
            str(report_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert (
        "URL update run finished: state=completed dispatched=2 failed=1 saved_versions=1"
        in result.output
    )
    assert "  failed tool=beta error=network error" in result.output
    assert "  tool=alpha added=1 failed=0 expired=0" in result.output
    assert (repository_path / "alpha" / "alpha" / "1.0.0" / "linux_x64.urls").is_file()
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["entries"] == [
        {"tool_identity": "alpha", "outcome": "added", "detail": "1.0.0"},
    ]


def test_update_single_tool_without_saving(repository_path: Path, monkeypatch) -> None:
    _stub_updaters(monkeypatch)

    result = CliRunner().invoke(
        url_updater,
        ["update", "--repository-path", str(repository_path), "--tool", "alpha", "--no-save"],
    )

    assert result.exit_code == 0, result.output
    assert "state=completed dispatched=1 failed=0 saved_versions=0" in result.output
    assert not (repository_path / "alpha").exists()


def test_update_with_missing_repository_is_usage_error(tmp_path: Path, monkeypatch) -> None:
    _stub_updaters(monkeypatch)

    result = CliRunner().invoke(
        url_updater,
        ["update", "--repository-path", str(tmp_path / "missing")],
    )

    assert result.exit_code == 2
    assert "URL repository not found" in result.output


def test_version_option() -> None:
    result = CliRunner().invoke(url_updater, ["--version"])

    assert result.exit_code == 0
    assert "url-updater" in result.output
