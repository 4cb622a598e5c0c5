"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any
from unittest.mock import Mock

import pytest

from github_milestone_changelog.changelog.github.models import Issue


def issue_payload(
    title: str,
    number: int,
    labels: list[str] | None = None,
    *,
    login: str = "octocat",
) -> dict[str, Any]:
    """Build an issue as it appears in GitHub's search `items` array."""
    return {
        "title": title,
        "number": number,
        "html_url": f"https://github.com/octo-org/octo-repo/issues/{number}",
        "state": "closed",
        "user": {"login": login, "html_url": f"https://github.com/{login}", "id": 1},
        "labels": [{"name": name, "color": "ededed"} for name in labels or []],
    }


@pytest.fixture
def make_issue() -> Callable[..., Issue]:
    """Provide a factory for validated Issue models."""

    def _make(
        title: str, number: int, labels: list[str] | None = None, *, login: str = "octocat"
    ) -> Issue:
        return Issue.model_validate(issue_payload(title, number, labels, login=login))

    return _make


@pytest.fixture
def release_time() -> datetime:
    """Provide a fixed timestamp (a Tuesday)."""
    return datetime(2024, 3, 5, 14, 30)


@pytest.fixture
def search_session() -> Callable[..., Mock]:
    """Provide a factory for a mocked requests session returning a search payload."""

    def _make(payload: Any) -> Mock:
        response = Mock()
        response.json.return_value = payload
        response.text = str(payload)
        session = Mock()
        session.headers = {}
        session.get.return_value = response
        return session

    return _make


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    """Provide the raw search-item factory."""
    return issue_payload
