"""Configuration for milestone changelog generation.

Configuration is loaded from:
- keyword arguments (the CLI passes the flags it was given)
- environment variables prefixed with `MILESTONE_CHANGELOG_`
- and a local `.env` file (if present)
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_milestone_changelog.changelog.github.client import DEFAULT_BASE_URL
from github_milestone_changelog.changelog.patcher import (
    DEFAULT_DELIMITER,
    require_existing_file,
)
from github_milestone_changelog.github_labels import (
    LABEL_ADDED,
    LABEL_CHANGED,
    LABEL_FIXED,
    LABEL_REMOVED,
    LABEL_UPDATED,
    LabelPriority,
)


class ChangelogSettings(BaseSettings):
    """Settings for a single changelog run.

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `ChangelogSettings(_env_file=None)`.
    """

    # Defaults are intentionally empty; validation below enforces that values are provided.
    github_organization: str = Field(
        default="",
        description="GitHub organization owning the repository",
    )
    github_repository: str = Field(
        default="",
        description="GitHub repository containing the milestone",
    )
    milestone: str = Field(
        default="",
        description="Milestone to generate changelog notes for",
    )

    added_label_name: str = Field(
        default=LABEL_ADDED,
        description="GitHub label name for all issues added during this milestone",
    )
    updated_label_name: str = Field(
        default=LABEL_UPDATED,
        description="GitHub label name for all issues updated during this milestone",
    )
    changed_label_name: str = Field(
        default=LABEL_CHANGED,
        description="GitHub label name for all issues changed during this milestone",
    )
    fixed_label_name: str = Field(
        default=LABEL_FIXED,
        description="GitHub label name for all issues fixed during this milestone",
    )
    removed_label_name: str = Field(
        default=LABEL_REMOVED,
        description="GitHub label name for all issues removed during this milestone",
    )

    changelog_file_path: Path | None = Field(
        default=None,
        description="Path of the changelog file to insert the milestone changelog into",
    )
    changelog_file_delimiter: str = Field(
        default=DEFAULT_DELIMITER,
        description=(
            "Regular expression matched at the start of a line; the changelog is "
            "inserted after its first match"
        ),
    )

    github_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="MILESTONE_CHANGELOG_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("changelog_file_path")
    @classmethod
    def _require_changelog_file(cls, value: Path | None) -> Path | None:
        # FileNotFoundError is not a ValueError, so pydantic lets it propagate as-is.
        if value is None:
            return None
        return require_existing_file(value)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @model_validator(mode="after")
    def _require_milestone_target(self) -> ChangelogSettings:
        missing = [
            name
            for name in ("github_organization", "github_repository", "milestone")
            if not getattr(self, name).strip()
        ]
        if missing:
            raise ValueError(f"Missing required settings: {', '.join(missing)}")
        return self

    @property
    def label_priority(self) -> LabelPriority:
        """Configured label names in classification order."""

        return LabelPriority(
            added=self.added_label_name,
            updated=self.updated_label_name,
            changed=self.changed_label_name,
            fixed=self.fixed_label_name,
            removed=self.removed_label_name,
        )
