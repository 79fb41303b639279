"""Updater contracts, errors, and the shared version-crawling template."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from url_updater.report import UpdateOutcome, UrlFinalReport
from url_updater.updater.deadline import Clock, ProcessorWithTimeout, utc_now

if TYPE_CHECKING:
    from url_updater.repository import UrlRepository

logger = logging.getLogger(__name__)


class UpdaterError(Exception):
    """Base error raised by updaters for upstream problems."""

    def __init__(self, message: str, *, code: str = "updater_error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message


class ConfigurationError(UpdaterError):
    """The run cannot start: repository or settings are unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="configuration")


@dataclass(slots=True, frozen=True)
class ToolIdentity:
    """Tool name with optional edition; edition defaults to the tool name."""

    tool: str
    edition: str | None = None

    @property
    def effective_edition(self) -> str:
        return self.edition or self.tool

    def matches(self, selector: str) -> bool:
        return selector in {self.tool, str(self)}

    def __str__(self) -> str:
        if not self.edition or self.edition == self.tool:
            return self.tool
        return f"{self.tool}/{self.edition}"


@runtime_checkable
class UrlUpdater(Protocol):
    """Interface the manager dispatches."""

    tool: str

    def identity(self) -> ToolIdentity:
        raise NotImplementedError

    def bind(self, deadline: datetime | None, report: UrlFinalReport) -> None:
        """Receive the run's shared deadline and report sink."""
        raise NotImplementedError

    def execute(self, repository: UrlRepository) -> None:
        """Update the repository for this tool; may raise."""
        raise NotImplementedError


class AbstractUrlUpdater(ProcessorWithTimeout):
    """Template for updaters that discover versions and add their download URLs.

    Subclasses set ``tool`` (and optionally ``edition``) and implement
    ``fetch_versions`` and ``build_urls``. ``execute`` skips versions already
    present in the repository and stops early once the bound deadline passes.
    """

    tool: str = ""
    edition: str | None = None

    def __init__(self, *, clock: Clock = utc_now) -> None:
        super().__init__(clock=clock)
        self._report: UrlFinalReport | None = None

    def identity(self) -> ToolIdentity:
        return ToolIdentity(tool=self.tool, edition=self.edition)

    def bind(self, deadline: datetime | None, report: UrlFinalReport) -> None:
        if deadline is None:
            self.clear_deadline()
        else:
            self.set_deadline(deadline)
        self._report = report

    @property
    def report(self) -> UrlFinalReport:
        if self._report is None:
            raise RuntimeError(f"{type(self).__name__} used before bind()")
        return self._report

    def fetch_versions(self) -> Sequence[str]:
        """Return upstream versions, newest first."""
        raise NotImplementedError

    def build_urls(self, version: str) -> Mapping[str, list[str]]:
        """Return download URLs for ``version`` keyed by urls file name."""
        raise NotImplementedError

    def execute(self, repository: UrlRepository) -> None:
        identity = self.identity()
        edition = repository.get_or_create_tool(identity.tool).get_or_create_edition(
            identity.effective_edition,
        )
        versions = self.fetch_versions()
        logger.info("Found %d upstream versions for %s", len(versions), identity)
        for version_name in versions:
            if self.has_expired():
                logger.warning("Deadline reached while updating %s", identity)
                self.report.add(str(identity), UpdateOutcome.EXPIRED, version_name)
                return
            if edition.get_version(version_name) is not None:
                continue
            try:
                urls = self.build_urls(version_name)
            except Exception as exc:  # noqa: BLE001
                logger.warning("Failed to resolve %s %s: %s", identity, version_name, exc)
                self.report.add(str(identity), UpdateOutcome.FAILED, f"{version_name}: {exc}")
                continue
            if not urls:
                continue
            version = edition.get_or_create_version(version_name)
            for file_name, file_urls in urls.items():
                version.set_urls(file_name, file_urls)
            self.report.add(str(identity), UpdateOutcome.ADDED, version_name)
