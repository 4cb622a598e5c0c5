"""GitHub issue search client.

This intentionally wraps a `requests.Session` to keep GitHub calls out of the
changelog logic and make tests easy (inject a mock session).
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from github_milestone_changelog.changelog.errors import NetworkError, SearchResponseError
from github_milestone_changelog.changelog.github.models import Issue

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"


class GitHubClient:
    """Small wrapper around the GitHub search API for milestone issues."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        self._rest_base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "github-milestone-changelog",
            }
        )

    @property
    def search_url(self) -> str:
        return f"{self._rest_base_url}/search/issues"

    @staticmethod
    def milestone_query(*, organization: str, repository: str, milestone: str) -> str:
        """Build the search query for closed issues in a milestone."""

        return f"repo:{organization}/{repository} milestone:{milestone} state:closed"

    def search_closed_milestone_issues(
        self,
        *,
        organization: str,
        repository: str,
        milestone: str,
    ) -> list[Issue]:
        """Return the closed issues for a milestone, in the order GitHub lists them.

        Raises:
            NetworkError: If the request fails or GitHub answers with a non-2xx status.
            SearchResponseError: If the response body is not a valid search result.
        """

        query = self.milestone_query(
            organization=organization, repository=repository, milestone=milestone
        )
        logger.debug("Searching closed milestone issues", extra={"query": query})

        try:
            resp = self._session.get(self.search_url, params={"q": query}, timeout=30)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"Error fetching remote file: {e}") from e

        try:
            data: Any = resp.json()
        except ValueError as e:
            raise SearchResponseError(
                f"Issue search returned a non-JSON response: {resp.text[:200]!r}"
            ) from e

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise SearchResponseError("Unexpected search response: missing items")

        issues: list[Issue] = []
        for item in items:
            try:
                issues.append(Issue.model_validate(item))
            except ValidationError as e:
                raise SearchResponseError(f"Unexpected issue in search response: {e}") from e

        logger.info(
            "Fetched closed milestone issues",
            extra={
                "repo": f"{organization}/{repository}",
                "milestone": milestone,
                "count": len(issues),
            },
        )
        return issues

    def close(self) -> None:
        self._session.close()
