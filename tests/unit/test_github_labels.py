"""Unit tests for label conventions."""

from __future__ import annotations

from github_milestone_changelog.github_labels import (
    DEFAULT_LABEL_PRIORITY,
    LabelPriority,
    label_matches,
)


def test_default_priority_order() -> None:
    assert list(DEFAULT_LABEL_PRIORITY) == ["Added", "Updated", "Changed", "Fixed", "Removed"]
    assert len(DEFAULT_LABEL_PRIORITY) == 5


def test_priority_overrides_keep_position() -> None:
    labels = LabelPriority(updated="enhancement", removed="deprecated")

    assert labels.names == ("Added", "enhancement", "Changed", "Fixed", "deprecated")


def test_label_matches_ignores_case() -> None:
    assert label_matches("fixed", "Fixed")
    assert not label_matches("fix", "Fixed")


def test_label_matches_does_not_trim_whitespace() -> None:
    assert not label_matches("Fixed ", "Fixed")
