"""Command-line argument parsing for the Cronos merge-duration reporter."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .config import DEFAULT_TIMEOUT_SECONDS


def _positive_int(value: str) -> int:
    """Parse and validate a positive integer CLI value.

    Raises:
        argparse.ArgumentTypeError: If value is not a positive integer.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be an integer") from exc

    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")

    return parsed


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Every value is optional; anything left unset is asked for interactively
    unless ``--no-input`` is given.
    """
    parser = argparse.ArgumentParser(
        prog="cronos",
        description=(
            "Measure how long merged GitLab merge requests took to go from their "
            "origin commit to being merged between two branches."
        ),
    )

    parser.add_argument(
        "--source-branch",
        help="Branch the merge requests were opened from (default: main).",
    )
    parser.add_argument(
        "--target-branch",
        help="Branch the merge requests were merged into (default: production).",
    )
    parser.add_argument(
        "--project-id",
        help="GitLab project id or 'namespace/project' path (default: $GITLAB_PROJECT_ID).",
    )
    parser.add_argument(
        "--base-url",
        help="GitLab instance URL (default: $GITLAB_BASE_URL or https://gitlab.com).",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_int,
        default=DEFAULT_TIMEOUT_SECONDS,
        help=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT_SECONDS}).",
    )
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; use flags, environment variables and defaults.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print plain text without ANSI colors.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    return parser.parse_args(argv)
