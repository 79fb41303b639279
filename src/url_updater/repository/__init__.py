"""File-system backed URL repository (the ``ide-urls`` layout)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from url_updater.repository.models import (
    UrlEdition,
    UrlTool,
    UrlVersion,
    load_tool,
    urls_file_name,
)
from url_updater.updater.base import ConfigurationError

logger = logging.getLogger(__name__)

__all__ = [
    "UrlEdition",
    "UrlRepository",
    "UrlTool",
    "UrlVersion",
    "urls_file_name",
]


@dataclass(slots=True)
class UrlRepository:
    """Root of the repository; the single object updaters mutate."""

    path: Path
    tools: dict[str, UrlTool] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> UrlRepository:
        """Read the whole tree under ``path``.

        Hidden directories (``.git``) are skipped. Raises ``ConfigurationError``
        when the path is missing or unreadable.
        """

        if not path.is_dir():
            raise ConfigurationError(f"URL repository not found: {path}")
        repository = cls(path=path)
        try:
            for child in sorted(path.iterdir()):
                if child.is_dir() and not child.name.startswith("."):
                    repository.tools[child.name] = load_tool(child)
        except OSError as error:
            raise ConfigurationError(f"Failed to load URL repository {path}: {error}") from error
        logger.info("Loaded URL repository %s with %d tools", path, len(repository.tools))
        return repository

    def get_or_create_tool(self, name: str) -> UrlTool:
        tool = self.tools.get(name)
        if tool is None:
            tool = UrlTool(name=name, path=self.path / name)
            self.tools[name] = tool
        return tool

    def iter_modified_versions(self) -> list[UrlVersion]:
        return [
            version
            for tool in self.tools.values()
            for edition in tool.editions.values()
            for version in edition.versions.values()
            if version.modified
        ]

    def save(self) -> int:
        """Write modified versions to disk and return how many were written."""

        modified = self.iter_modified_versions()
        for version in modified:
            version.save()
        logger.info("Saved %d modified versions to %s", len(modified), self.path)
        return len(modified)
