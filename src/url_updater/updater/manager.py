"""Deadline-governed dispatch of the registered URL updaters."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from url_updater.report import UrlFinalReport
from url_updater.repository import UrlRepository
from url_updater.updater.base import ToolIdentity, UrlUpdater
from url_updater.updater.deadline import Clock, ProcessorWithTimeout, utc_now
from url_updater.updater.registry import default_updaters

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    """Lifecycle of the single run a manager performs."""

    IDLE = "idle"
    RUNNING = "running"
    EXPIRED = "expired"
    COMPLETED = "completed"


@dataclass(slots=True, frozen=True)
class UpdaterDescriptor:
    """Registration record pairing a tool identity with its updater."""

    identity: ToolIdentity
    updater: UrlUpdater

    @classmethod
    def of(cls, updater: UrlUpdater) -> UpdaterDescriptor:
        return cls(identity=updater.identity(), updater=updater)


@dataclass(slots=True, frozen=True)
class DispatchResult:
    """Outcome of one dispatch, captured at the isolation boundary."""

    identity: ToolIdentity
    succeeded: bool
    error: str | None = None


class UpdateManager(ProcessorWithTimeout):
    """Runs updaters in registration order against one repository.

    The repository is loaded once here; a load failure propagates to the
    caller. ``update_all`` stops before the next updater once the deadline has
    passed, ``update`` runs the selected updaters regardless of it. Errors
    raised by an updater are logged and never leave ``dispatch``.
    """

    def __init__(
        self,
        repository_path: Path,
        report: UrlFinalReport,
        deadline: datetime,
        *,
        updaters: Sequence[UrlUpdater] | None = None,
        clock: Clock = utc_now,
    ) -> None:
        super().__init__(clock=clock)
        self.repository = UrlRepository.load(repository_path)
        self.report = report
        self.set_deadline(deadline)
        if updaters is None:
            updaters = default_updaters()
        self.descriptors: tuple[UpdaterDescriptor, ...] = tuple(
            UpdaterDescriptor.of(updater) for updater in updaters
        )
        self.state = RunState.IDLE
        self._results: list[DispatchResult] = []

    @property
    def results(self) -> tuple[DispatchResult, ...]:
        return tuple(self._results)

    def update_all(self) -> None:
        """Run every registered updater until done or out of time."""

        self._start()
        for descriptor in self.descriptors:
            if self.has_expired():
                self.state = RunState.EXPIRED
                return
            self._results.append(self.dispatch(descriptor))
        self.state = RunState.COMPLETED

    def update(self, tool: str) -> None:
        """Run only updaters matching ``tool`` (name or ``tool/edition``).

        Used for manual checks of a single updater, so the deadline is not
        consulted.
        """

        self._start()
        for descriptor in self.descriptors:
            if descriptor.identity.matches(tool):
                self._results.append(self.dispatch(descriptor))
        self.state = RunState.COMPLETED

    run_all = update_all
    run_one = update

    def dispatch(self, descriptor: UpdaterDescriptor) -> DispatchResult:
        updater = descriptor.updater
        updater_name = type(updater).__name__
        try:
            updater.bind(self.get_deadline(), self.report)
            logger.debug("Starting %s for tool %s", updater_name, descriptor.identity)
            updater.execute(self.repository)
            logger.debug("Ended %s for tool %s", updater_name, descriptor.identity)
        except Exception as exc:
            logger.exception("Failed to update %s: %s", descriptor.identity, exc)
            return DispatchResult(identity=descriptor.identity, succeeded=False, error=str(exc))
        return DispatchResult(identity=descriptor.identity, succeeded=True)

    def save(self) -> int:
        return self.repository.save()

    def _start(self) -> None:
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"UpdateManager already ran (state={self.state.value})")
        self.state = RunState.RUNNING
