"""Partition milestone issues into changelog sections by label."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from github_milestone_changelog.changelog.github.models import Issue
from github_milestone_changelog.github_labels import (
    ADDITIONAL_REMAINDER_SECTION,
    REMAINDER_SECTION,
)


@dataclass(frozen=True, slots=True)
class Section:
    """A named group of issues in the rendered changelog."""

    name: str
    issues: tuple[Issue, ...]


def classify(issues: Sequence[Issue], labels: Sequence[str]) -> list[Section]:
    """Group issues into sections, one per matching label in priority order.

    Each issue is placed in the section of the earliest label it carries. Issues
    carrying none of the labels are collected into a trailing remainder section,
    titled "Changes" when it is the only section and "Additional Changes" otherwise.
    Issue order inside a section is the input order.
    """

    pool = list(issues)
    sections: list[Section] = []

    for label_name in labels:
        selected = [issue for issue in pool if issue.has_label(label_name)]
        if not selected:
            continue
        sections.append(Section(name=label_name, issues=tuple(selected)))
        pool = [issue for issue in pool if not issue.has_label(label_name)]

    if pool:
        name = ADDITIONAL_REMAINDER_SECTION if sections else REMAINDER_SECTION
        sections.append(Section(name=name, issues=tuple(pool)))

    return sections
