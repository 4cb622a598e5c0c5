"""Typed views over GitHub issue search results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from github_milestone_changelog.github_labels import label_matches


class IssueLabel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str


class IssueUser(BaseModel):
    """The user who reported an issue."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str
    html_url: str


class Issue(BaseModel):
    """Minimal closed-issue metadata needed to render a changelog entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    number: int
    html_url: str
    user: IssueUser
    labels: tuple[IssueLabel, ...] = Field(default_factory=tuple)

    def has_label(self, name: str) -> bool:
        """Return True if any label matches `name`, ignoring case."""

        return any(label_matches(label.name, name) for label in self.labels)
