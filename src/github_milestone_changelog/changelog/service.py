"""Milestone changelog generation.

Runs the whole action: validate the target file, fetch the milestone's closed
issues, group them by label, render markdown and optionally insert it into a file.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

from github_milestone_changelog.changelog.classifier import classify
from github_milestone_changelog.changelog.errors import EmptyResultError
from github_milestone_changelog.changelog.github.client import GitHubClient
from github_milestone_changelog.changelog.patcher import (
    DEFAULT_DELIMITER,
    patch_file,
    require_existing_file,
)
from github_milestone_changelog.changelog.renderer import render
from github_milestone_changelog.github_labels import DEFAULT_LABEL_PRIORITY

logger = logging.getLogger(__name__)

# Name under which the rendered markdown is published as the action's output.
GITHUB_MILESTONE_CHANGELOG = "GITHUB_MILESTONE_CHANGELOG"


class ChangelogService:
    """High-level, testable changelog generation."""

    def __init__(
        self,
        *,
        github: GitHubClient,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._github = github
        self._clock = clock

    def generate(
        self,
        *,
        organization: str,
        repository: str,
        milestone: str,
        labels: Iterable[str] = DEFAULT_LABEL_PRIORITY,
        changelog_file_path: Path | None = None,
        changelog_file_delimiter: str = DEFAULT_DELIMITER,
    ) -> str:
        """Generate the markdown changelog for a milestone.

        Returns:
            The formatted markdown changelog.

        Raises:
            FileNotFoundError: If `changelog_file_path` is given but does not exist.
            EmptyResultError: If the milestone has no closed issues.
            NetworkError: If the issue search fails.
            SearchResponseError: If the issue search response is malformed.
        """

        if changelog_file_path is not None:
            require_existing_file(changelog_file_path)

        issues = self._github.search_closed_milestone_issues(
            organization=organization,
            repository=repository,
            milestone=milestone,
        )
        if not issues:
            raise EmptyResultError(milestone=milestone, repository=f"{organization}/{repository}")

        sections = classify(issues, list(labels))
        logger.debug(
            "Classified milestone issues",
            extra={"sections": {section.name: len(section.issues) for section in sections}},
        )

        changelog = render(milestone, organization, repository, sections, self._clock())

        if changelog_file_path is not None:
            inserted = patch_file(changelog_file_path, changelog_file_delimiter, changelog)
            if not inserted:
                logger.warning(
                    "Changelog delimiter not found; changelog file not modified",
                    extra={
                        "path": str(changelog_file_path),
                        "delimiter": changelog_file_delimiter,
                    },
                )
            logger.info(
                "Changelog file updated",
                extra={"path": str(changelog_file_path), "milestone": milestone},
            )

        return changelog
