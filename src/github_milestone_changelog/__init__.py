"""GitHub Milestone Changelog.

Generates a markdown changelog section for a GitHub milestone, grouping its closed
issues by label, and optionally inserts it into an existing changelog file.
"""

__version__ = "0.1.0"

from github_milestone_changelog.changelog.config import ChangelogSettings
from github_milestone_changelog.changelog.service import (
    GITHUB_MILESTONE_CHANGELOG,
    ChangelogService,
)

__all__ = ["__version__", "ChangelogService", "ChangelogSettings", "GITHUB_MILESTONE_CHANGELOG"]
