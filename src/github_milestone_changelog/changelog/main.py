"""CLI entrypoint for milestone changelog generation.

Flags override `MILESTONE_CHANGELOG_*` environment variables and `.env` values.
The rendered changelog is printed to stdout; logs go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from github_milestone_changelog import __version__
from github_milestone_changelog.changelog.config import ChangelogSettings
from github_milestone_changelog.changelog.errors import (
    EmptyResultError,
    NetworkError,
    SearchResponseError,
)
from github_milestone_changelog.changelog.github.client import GitHubClient
from github_milestone_changelog.changelog.logging import configure_logging
from github_milestone_changelog.changelog.service import (
    GITHUB_MILESTONE_CHANGELOG,
    ChangelogService,
)

logger = logging.getLogger(__name__)

# Maps CLI destinations onto ChangelogSettings fields.
_SETTINGS_FLAGS: dict[str, str] = {
    "organization": "github_organization",
    "repository": "github_repository",
    "milestone": "milestone",
    "added_label": "added_label_name",
    "updated_label": "updated_label_name",
    "changed_label": "changed_label_name",
    "fixed_label": "fixed_label_name",
    "removed_label": "removed_label_name",
    "changelog_file": "changelog_file_path",
    "delimiter": "changelog_file_delimiter",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="milestone-changelog",
        description=(
            "Generate a markdown formatted changelog for a specific milestone "
            "in a GitHub repository"
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"github-milestone-changelog {__version__}"
    )
    parser.add_argument(
        "--org",
        "--organization",
        dest="organization",
        default=None,
        help="GitHub organization for the repository",
    )
    parser.add_argument(
        "--repo",
        "--repository",
        dest="repository",
        default=None,
        help="GitHub repository containing the milestone",
    )
    parser.add_argument("--milestone", default=None, help="Milestone to generate notes for")

    for kind in ("added", "updated", "changed", "fixed", "removed"):
        parser.add_argument(
            f"--{kind}-label",
            default=None,
            help=f"GitHub label name for issues {kind} during this milestone",
        )

    parser.add_argument(
        "--changelog-file",
        default=None,
        help="Existing changelog file to insert the generated section into",
    )
    parser.add_argument(
        "--delimiter",
        default=None,
        help="Line-start regex marking where the section is inserted (default: '---')",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Also write the generated changelog to this file",
    )
    return parser


def _settings_overrides(args: argparse.Namespace) -> dict[str, Any]:
    return {
        field: getattr(args, dest)
        for dest, field in _SETTINGS_FLAGS.items()
        if getattr(args, dest) is not None
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ChangelogSettings(**_settings_overrides(args))
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your flags or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2
    except FileNotFoundError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    github = GitHubClient(base_url=settings.github_base_url)
    try:
        service = ChangelogService(github=github)
        changelog = service.generate(
            organization=settings.github_organization,
            repository=settings.github_repository,
            milestone=settings.milestone,
            labels=settings.label_priority,
            changelog_file_path=settings.changelog_file_path,
            changelog_file_delimiter=settings.changelog_file_delimiter,
        )

        if args.output:
            Path(args.output).write_text(changelog, encoding="utf-8")
            logger.info(
                "Changelog written",
                extra={"path": args.output, "output": GITHUB_MILESTONE_CHANGELOG},
            )

        print(changelog)
        return 0

    except EmptyResultError as e:
        logger.error(str(e), extra={"milestone": e.milestone, "repo": e.repository})
        print(str(e), file=sys.stderr)
        return 3

    except NetworkError as e:
        logger.error(str(e))
        print(str(e), file=sys.stderr)
        return 4

    except SearchResponseError as e:
        logger.error(str(e))
        print(str(e), file=sys.stderr)
        return 5

    except FileNotFoundError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    except Exception:
        logger.exception("Changelog generation failed")
        return 1

    finally:
        github.close()


if __name__ == "__main__":
    raise SystemExit(main())
