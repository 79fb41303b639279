"""Runtime configuration for the URL update job."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; UrlUpdater/0.1)"


@dataclass(slots=True)
class HttpSettings:
    """Outbound HTTP settings shared by all updaters."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    user_agent: str = DEFAULT_USER_AGENT
    github_token: str | None = None


@dataclass(slots=True)
class Settings:
    """Application settings grouped by concern."""

    repository_path: Path = Path("ide-urls")
    timeout_minutes: int = 60
    report_path: Path | None = None
    http: HttpSettings = field(default_factory=HttpSettings)

    @classmethod
    def from_env(
        cls,
        repository_path: Path | None = None,
        timeout_minutes: int | None = None,
        report_path: Path | None = None,
    ) -> Settings:
        """Load settings from environment; explicit arguments take precedence."""

        env_report_path = os.getenv("URL_UPDATER_REPORT_PATH", "").strip()
        return cls(
            repository_path=repository_path
            or Path(os.getenv("URL_UPDATER_REPOSITORY_PATH", "ide-urls")),
            timeout_minutes=(
                timeout_minutes
                if timeout_minutes is not None
                else _env_int("URL_UPDATER_TIMEOUT_MINUTES", 60)
            ),
            report_path=report_path or (Path(env_report_path) if env_report_path else None),
            http=HttpSettings(
                timeout_seconds=_env_float("URL_UPDATER_HTTP_TIMEOUT_SECONDS", 30.0),
                max_retries=_env_int("URL_UPDATER_HTTP_MAX_RETRIES", 3),
                user_agent=os.getenv("URL_UPDATER_USER_AGENT", DEFAULT_USER_AGENT),
                github_token=os.getenv("URL_UPDATER_GITHUB_TOKEN") or None,
            ),
        )

    def validate(self) -> None:
        """Raise configuration error on values no run could use."""

        if self.timeout_minutes <= 0:
            raise ValueError("URL_UPDATER_TIMEOUT_MINUTES must be > 0.")
        if self.http.timeout_seconds <= 0:
            raise ValueError("URL_UPDATER_HTTP_TIMEOUT_SECONDS must be > 0.")
        if self.http.max_retries < 0:
            raise ValueError("URL_UPDATER_HTTP_MAX_RETRIES must be >= 0.")
        if not self.http.user_agent.strip():
            raise ValueError("URL_UPDATER_USER_AGENT must not be empty.")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as error:
        raise ValueError(f"Invalid integer value for {name}: {value!r}") from error


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as error:
        raise ValueError(f"Invalid number value for {name}: {value!r}") from error
