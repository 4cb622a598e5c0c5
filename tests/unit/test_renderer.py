"""Unit tests for changelog markdown rendering."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from github_milestone_changelog.changelog.classifier import Section
from github_milestone_changelog.changelog.github.models import Issue
from github_milestone_changelog.changelog.renderer import render, render_section

HEADER = (
    "\n## [1.2.0](https://github.com/octo-org/octo-repo/releases/tag/1.2.0) (03/05/2024)"
    "\nReleased on Tuesday, March 05, 2024. All issues associated with this milestone "
    "can be found using this [filter](https://github.com/octo-org/octo-repo/issues"
    "?q=milestone%3A1.2.0+is%3Aclosed).\n"
)


def test_render_without_sections_is_heading_and_release_line(release_time: datetime) -> None:
    assert render("1.2.0", "octo-org", "octo-repo", [], release_time) == HEADER


def test_render_section_lists_each_issue(make_issue: Callable[..., Issue]) -> None:
    section = Section(
        name="Fixed",
        issues=(
            make_issue("Fix crash", 12, ["Fixed"], login="al"),
            make_issue("Fix leak", 13, ["Fixed"], login="bo"),
        ),
    )

    assert render_section(section) == (
        "\n### Fixed\n"
        "* Fix crash\n"
        " * Fixed by [al](https://github.com/al) in "
        "[#12](https://github.com/octo-org/octo-repo/issues/12).\n"
        "* Fix leak\n"
        " * Fixed by [bo](https://github.com/bo) in "
        "[#13](https://github.com/octo-org/octo-repo/issues/13).\n"
    )


def test_render_concatenates_sections_in_order(
    make_issue: Callable[..., Issue], release_time: datetime
) -> None:
    added = Section(name="Added", issues=(make_issue("Export", 1, ["Added"]),))
    rest = Section(name="Additional Changes", issues=(make_issue("Docs", 2),))

    changelog = render("1.2.0", "octo-org", "octo-repo", [added, rest], release_time)

    assert changelog == HEADER + render_section(added) + render_section(rest)
    assert changelog.index("### Added") < changelog.index("### Additional Changes")


def test_render_contains_issue_bullet_lines(
    make_issue: Callable[..., Issue], release_time: datetime
) -> None:
    section = Section(name="Fixed", issues=(make_issue("Fix crash", 12, ["Fixed"], login="al"),))

    lines = render("1.2.0", "octo-org", "octo-repo", [section], release_time).split("\n")

    idx = lines.index("* Fix crash")
    assert lines[idx + 1].startswith(" * Fixed by [al](")
    assert "in [#12](" in lines[idx + 1]
