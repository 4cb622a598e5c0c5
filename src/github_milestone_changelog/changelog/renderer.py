"""Markdown rendering for milestone changelogs."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from github_milestone_changelog.changelog.classifier import Section

GITHUB_WEB_URL = "https://github.com"


def render_section(section: Section) -> str:
    lines = [f"\n### {section.name}\n"]
    for issue in section.issues:
        lines.append(f"* {issue.title}\n")
        lines.append(
            f" * Fixed by [{issue.user.login}]({issue.user.html_url})"
            f" in [#{issue.number}]({issue.html_url}).\n"
        )
    return "".join(lines)


def render(
    milestone: str,
    organization: str,
    repository: str,
    sections: Sequence[Section],
    now: datetime,
) -> str:
    """Render the changelog for a milestone.

    The output is a heading linking to the release tag, a release-date line with a
    link to the closed-issue filter, and one bullet list per section.
    """

    repo_url = f"{GITHUB_WEB_URL}/{organization}/{repository}"
    changelog = (
        f"\n## [{milestone}]({repo_url}/releases/tag/{milestone})"
        f" ({now.strftime('%m/%d/%Y')})"
    )
    changelog += (
        f"\nReleased on {now.strftime('%A, %B %d, %Y')}. All issues associated with this"
        f" milestone can be found using this"
        f" [filter]({repo_url}/issues?q=milestone%3A{milestone}+is%3Aclosed).\n"
    )
    for section in sections:
        changelog += render_section(section)
    return changelog
