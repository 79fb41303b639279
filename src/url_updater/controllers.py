"""Controllers for URL update CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from pathlib import Path

from url_updater.config import Settings
from url_updater.http.fetcher import HttpFetcher
from url_updater.report import UrlFinalReport
from url_updater.updater.base import UrlUpdater
from url_updater.updater.manager import UpdateManager
from url_updater.updater.registry import default_updaters, github_fetcher


@dataclass(slots=True)
class UpdateCommand:
    """CLI inputs for the update command."""

    repository_path: Path | None
    timeout_minutes: int | None
    tool: str | None
    report_path: Path | None
    save: bool = True


class UpdateCliController:
    """Coordinates update command execution."""

    def run_update(self, command: UpdateCommand) -> list[str]:
        settings = Settings.from_env(
            repository_path=command.repository_path,
            timeout_minutes=command.timeout_minutes,
            report_path=command.report_path,
        )
        settings.validate()
        deadline = datetime.now(tz=UTC) + timedelta(minutes=settings.timeout_minutes)
        report = UrlFinalReport()

        with _updaters(settings) as updaters:
            manager = UpdateManager(
                settings.repository_path,
                report,
                deadline,
                updaters=updaters,
            )
            if command.tool:
                manager.update(command.tool)
            else:
                manager.update_all()

        saved = manager.save() if command.save else 0
        if settings.report_path is not None:
            report.write_json(settings.report_path)

        failed = [result for result in manager.results if not result.succeeded]
        lines = [
            "URL update run finished: "
            f"state={manager.state.value} "
            f"dispatched={len(manager.results)} "
            f"failed={len(failed)} "
            f"saved_versions={saved}",
        ]
        lines.extend(f"  failed tool={result.identity} error={result.error}" for result in failed)
        lines.extend(report.render_lines())
        if settings.report_path is not None:
            lines.append(f"Report written to {settings.report_path}")
        return lines


@contextmanager
def _updaters(settings: Settings) -> Iterator[list[UrlUpdater]]:
    with HttpFetcher(settings.http) as fetcher, github_fetcher(settings.http) as github:
        yield default_updaters(fetcher, github=github)
