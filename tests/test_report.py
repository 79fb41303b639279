from __future__ import annotations

import json
from pathlib import Path

import allure

from url_updater.report import UpdateOutcome, UrlFinalReport, UrlUpdateOutcome

pytestmark = [
    allure.epic("URL Update"),
    allure.feature("Final Report"),
]


def _report() -> UrlFinalReport:
    report = UrlFinalReport()
    report.add("docker", UpdateOutcome.ADDED, "4.31.0")
    report.add("gh", UpdateOutcome.FAILED, "2.50.0: HTTP 404")
    report.append(UrlUpdateOutcome("docker", UpdateOutcome.ADDED, "4.31.1"))
    report.add("gh", UpdateOutcome.EXPIRED, "2.49.0")
    return report


def test_summaries_group_by_tool_in_first_seen_order() -> None:
    summaries = _report().summaries()

    assert [summary.tool_identity for summary in summaries] == ["docker", "gh"]
    assert (summaries[0].added, summaries[0].failed, summaries[0].expired) == (2, 0, 0)
    assert (summaries[1].added, summaries[1].failed, summaries[1].expired) == (0, 1, 1)
    assert summaries[1].total == 2


def test_render_lines() -> None:
    assert _report().render_lines() == [
        "URL update report: tools=2 entries=4",
        "  tool=docker added=2 failed=0 expired=0",
        "  tool=gh added=0 failed=1 expired=1",
    ]
    assert UrlFinalReport().render_lines() == ["URL update report: no entries"]


def test_write_json(tmp_path: Path) -> None:
    path = tmp_path / "out" / "report.json"

    _report().write_json(path)

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["entries"][1] == {
        "tool_identity": "gh",
        "outcome": "failed",
        "detail": "2.50.0: HTTP 404",
    }
    assert payload["summary"][0] == {"tool": "docker", "added": 2, "failed": 0, "expired": 0}
