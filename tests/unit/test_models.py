"""Unit tests for the issue models."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from pydantic import ValidationError

from github_milestone_changelog.changelog.github.models import Issue


def test_issue_ignores_unknown_fields(make_payload: Callable[..., dict[str, Any]]) -> None:
    issue = Issue.model_validate(make_payload("Fix crash", 12, ["Fixed"], login="al"))

    assert issue.title == "Fix crash"
    assert issue.user.login == "al"
    assert [label.name for label in issue.labels] == ["Fixed"]


def test_issue_without_labels_field_has_no_labels(
    make_payload: Callable[..., dict[str, Any]],
) -> None:
    payload = make_payload("Fix crash", 12)
    del payload["labels"]

    assert Issue.model_validate(payload).labels == ()


@pytest.mark.parametrize("field", ["title", "number", "html_url", "user"])
def test_issue_requires_core_fields(
    field: str, make_payload: Callable[..., dict[str, Any]]
) -> None:
    payload = make_payload("Fix crash", 12)
    del payload[field]

    with pytest.raises(ValidationError):
        Issue.model_validate(payload)


def test_issue_is_immutable(make_payload: Callable[..., dict[str, Any]]) -> None:
    issue = Issue.model_validate(make_payload("Fix crash", 12))

    with pytest.raises(ValidationError):
        issue.title = "Other"  # type: ignore[misc]


def test_has_label_ignores_case(make_payload: Callable[..., dict[str, Any]]) -> None:
    issue = Issue.model_validate(make_payload("Fix crash", 12, ["Fixed"]))

    assert issue.has_label("FIXED")
    assert not issue.has_label("Added")
