"""Label conventions used to group milestone issues into changelog sections.

Section order follows the priority order below: an issue carrying several of
these labels lands in the section of whichever label comes first.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

LABEL_ADDED = "Added"
LABEL_UPDATED = "Updated"
LABEL_CHANGED = "Changed"
LABEL_FIXED = "Fixed"
LABEL_REMOVED = "Removed"

REMAINDER_SECTION = "Changes"
ADDITIONAL_REMAINDER_SECTION = "Additional Changes"


@dataclass(frozen=True, slots=True)
class LabelPriority:
    """The five configurable label names, in classification order."""

    added: str = LABEL_ADDED
    updated: str = LABEL_UPDATED
    changed: str = LABEL_CHANGED
    fixed: str = LABEL_FIXED
    removed: str = LABEL_REMOVED

    @property
    def names(self) -> tuple[str, str, str, str, str]:
        return (self.added, self.updated, self.changed, self.fixed, self.removed)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


DEFAULT_LABEL_PRIORITY = LabelPriority()


def label_matches(candidate: str, configured: str) -> bool:
    return candidate.lower() == configured.lower()
