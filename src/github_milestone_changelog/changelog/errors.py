"""Errors raised while generating a milestone changelog.

Missing changelog files are reported with the builtin `FileNotFoundError`.
"""

from __future__ import annotations


class ChangelogError(Exception):
    """Base class for changelog generation failures."""


class NetworkError(ChangelogError):
    """The issue search request could not be completed."""


class SearchResponseError(ChangelogError):
    """The issue search response did not have the expected shape."""


class EmptyResultError(ChangelogError):
    """No closed issues were found for the requested milestone."""

    def __init__(self, *, milestone: str, repository: str) -> None:
        super().__init__(f"No closed issues found for {milestone} in {repository}")
        self.milestone = milestone
        self.repository = repository
