"""Insert a rendered changelog into an existing changelog file.

The transform is pure (`insert_after_delimiter`); `patch_file` only adds the
read/write around it.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "---"


def require_existing_file(path: Path | str) -> Path:
    """Return `path` as a Path, or raise FileNotFoundError if it is not a file."""

    resolved = Path(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"Couldn't find file at path '{path}'")
    return resolved


def insert_after_delimiter(content: str, delimiter: str, changelog: str) -> str:
    """Append `changelog` to the first line-start match of the `delimiter` regex.

    Matching is case-insensitive and multiline. Only the first match is replaced;
    content without a match is returned unchanged.
    """

    pattern = re.compile(f"^{delimiter}", re.IGNORECASE | re.MULTILINE)
    return pattern.sub(lambda match: f"{match.group(0)} {changelog}", content, count=1)


def patch_file(path: Path | str, delimiter: str, changelog: str) -> bool:
    """Insert `changelog` into the file at `path`.

    Returns:
        True if the file was rewritten, False if the delimiter was not found.
    """

    target = require_existing_file(path)
    # newline="" keeps the file's own line endings on both read and write.
    with target.open(encoding="utf-8", newline="") as fh:
        content = fh.read()
    updated = insert_after_delimiter(content, delimiter, changelog)
    if updated == content:
        logger.debug(
            "Changelog delimiter not found; file left unchanged",
            extra={"path": str(target), "delimiter": delimiter},
        )
        return False

    with target.open("w", encoding="utf-8", newline="") as fh:
        fh.write(updated)
    return True
