"""Global wall-clock budget shared by the manager and its updaters."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


class ProcessorWithTimeout:
    """Holds one absolute expiry instant and answers whether it has passed."""

    def __init__(self, *, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._deadline: datetime | None = None

    def set_deadline(self, deadline: datetime) -> None:
        if deadline.tzinfo is None:
            deadline = deadline.replace(tzinfo=UTC)
        self._deadline = deadline

    def clear_deadline(self) -> None:
        self._deadline = None

    def get_deadline(self) -> datetime | None:
        return self._deadline

    def has_expired(self) -> bool:
        if self._deadline is None:
            return False
        return self._clock() >= self._deadline
