"""In-memory tree of the URL repository: tool -> edition -> version -> urls."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

URLS_SUFFIX = ".urls"
PLATFORM_INDEPENDENT = "urls"


def urls_file_name(os_name: str | None = None, arch: str | None = None) -> str:
    """File name for one platform; no OS means a platform-independent download."""

    if os_name is None:
        return PLATFORM_INDEPENDENT
    return f"{os_name}_{arch or 'x64'}{URLS_SUFFIX}"


@dataclass(slots=True)
class UrlVersion:
    """Download URLs of one version, keyed by urls file name."""

    name: str
    path: Path
    urls: dict[str, list[str]] = field(default_factory=dict)
    modified: bool = False

    def set_urls(self, file_name: str, urls: list[str]) -> None:
        cleaned = [url.strip() for url in urls if url.strip()]
        if self.urls.get(file_name) == cleaned:
            return
        self.urls[file_name] = cleaned
        self.modified = True

    def save(self) -> None:
        if not self.modified:
            return
        self.path.mkdir(parents=True, exist_ok=True)
        for file_name, urls in self.urls.items():
            (self.path / file_name).write_text("\n".join(urls) + "\n", encoding="utf-8")
        self.modified = False


@dataclass(slots=True)
class UrlEdition:
    name: str
    path: Path
    versions: dict[str, UrlVersion] = field(default_factory=dict)

    def get_version(self, name: str) -> UrlVersion | None:
        return self.versions.get(name)

    def get_or_create_version(self, name: str) -> UrlVersion:
        version = self.versions.get(name)
        if version is None:
            version = UrlVersion(name=name, path=self.path / name)
            self.versions[name] = version
        return version


@dataclass(slots=True)
class UrlTool:
    name: str
    path: Path
    editions: dict[str, UrlEdition] = field(default_factory=dict)

    def get_or_create_edition(self, name: str) -> UrlEdition:
        edition = self.editions.get(name)
        if edition is None:
            edition = UrlEdition(name=name, path=self.path / name)
            self.editions[name] = edition
        return edition


def load_version(path: Path) -> UrlVersion:
    version = UrlVersion(name=path.name, path=path)
    for child in sorted(path.iterdir()):
        if not child.is_file():
            continue
        if child.name != PLATFORM_INDEPENDENT and not child.name.endswith(URLS_SUFFIX):
            continue
        lines = child.read_text(encoding="utf-8").splitlines()
        version.urls[child.name] = [line.strip() for line in lines if line.strip()]
    return version


def load_edition(path: Path) -> UrlEdition:
    edition = UrlEdition(name=path.name, path=path)
    for child in sorted(path.iterdir()):
        if child.is_dir():
            edition.versions[child.name] = load_version(child)
    return edition


def load_tool(path: Path) -> UrlTool:
    tool = UrlTool(name=path.name, path=path)
    for child in sorted(path.iterdir()):
        if child.is_dir():
            tool.editions[child.name] = load_edition(child)
    return tool
