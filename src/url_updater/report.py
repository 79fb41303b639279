"""Consolidated report of per-updater outcomes for one run."""

from __future__ import annotations

import json
from collections import OrderedDict
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path


class UpdateOutcome(str, Enum):
    """Kinds of report entries written by updaters and the manager."""

    ADDED = "added"
    FAILED = "failed"
    EXPIRED = "expired"


@dataclass(slots=True, frozen=True)
class UrlUpdateOutcome:
    """One report entry."""

    tool_identity: str
    outcome: UpdateOutcome
    detail: str = ""


@dataclass(slots=True)
class ToolReportSummary:
    """Counts of outcomes for one tool identity."""

    tool_identity: str
    added: int = 0
    failed: int = 0
    expired: int = 0

    @property
    def total(self) -> int:
        return self.added + self.failed + self.expired


@dataclass(slots=True)
class UrlFinalReport:
    """Append-only report sink shared by every updater of a run.

    Entries are committed as soon as they are appended: an updater that
    raises after writing keeps its earlier entries.
    """

    _entries: list[UrlUpdateOutcome] = field(default_factory=list)

    def append(self, entry: UrlUpdateOutcome) -> None:
        self._entries.append(entry)

    def add(self, tool_identity: str, outcome: UpdateOutcome, detail: str = "") -> None:
        self.append(UrlUpdateOutcome(tool_identity=tool_identity, outcome=outcome, detail=detail))

    @property
    def entries(self) -> tuple[UrlUpdateOutcome, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def summaries(self) -> list[ToolReportSummary]:
        by_tool: OrderedDict[str, ToolReportSummary] = OrderedDict()
        for entry in self._entries:
            summary = by_tool.setdefault(
                entry.tool_identity,
                ToolReportSummary(tool_identity=entry.tool_identity),
            )
            if entry.outcome is UpdateOutcome.ADDED:
                summary.added += 1
            elif entry.outcome is UpdateOutcome.FAILED:
                summary.failed += 1
            else:
                summary.expired += 1
        return list(by_tool.values())

    def render_lines(self) -> list[str]:
        summaries = self.summaries()
        if not summaries:
            return ["URL update report: no entries"]
        lines = [f"URL update report: tools={len(summaries)} entries={len(self._entries)}"]
        for summary in summaries:
            lines.append(
                f"  tool={summary.tool_identity} added={summary.added} "
                f"failed={summary.failed} expired={summary.expired}",
            )
        return lines

    def to_json(self) -> str:
        payload = {
            "entries": [
                {**asdict(entry), "outcome": entry.outcome.value} for entry in self._entries
            ],
            "summary": [
                {
                    "tool": summary.tool_identity,
                    "added": summary.added,
                    "failed": summary.failed,
                    "expired": summary.expired,
                }
                for summary in self.summaries()
            ],
        }
        return json.dumps(payload, indent=2, ensure_ascii=False)

    def write_json(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json() + "\n", encoding="utf-8")
