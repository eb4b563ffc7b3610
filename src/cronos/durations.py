"""Merge duration computation for GitLab merge requests.

A merge request's duration runs from its origin commit to its ``merged_at``
timestamp. The origin commit is chosen as follows:
- Commits whose message reads ``Merge branch '<any>' into '<source_branch>'``
  (case-insensitive) are candidates.
- When candidates exist, the last one in API order is the origin.
- Otherwise the first commit in API order is the origin.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Pattern, Sequence

from .errors import ConfigurationError, EmptyCommitListError
from .models import Commit, MergeRequest

logger = logging.getLogger(__name__)


def build_merge_pattern(source_branch: str) -> Pattern[str]:
    """Compile the merge-commit message pattern for ``source_branch``.

    The branch name is interpolated as-is, so regex metacharacters in it keep
    their regex meaning.

    Raises:
        ConfigurationError: If the branch name produces an invalid pattern.
    """
    pattern = f"merge branch '.*' into '{source_branch}'".lower()
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(
            f"Branch name {source_branch!r} does not form a valid merge-commit pattern: {exc}"
        ) from exc


def select_origin(commits: Sequence[Commit], source_branch: str) -> datetime:
    """Return the creation time of the commit the merge duration is measured from.

    Raises:
        EmptyCommitListError: If ``commits`` is empty.
    """
    if not commits:
        raise EmptyCommitListError("No commits to select an origin commit from.")

    pattern = build_merge_pattern(source_branch)
    candidates = [commit for commit in commits if pattern.search(commit.message.lower())]

    if candidates:
        logger.debug(
            "Using last merge commit as origin",
            extra={"candidates": len(candidates), "commits": len(commits)},
        )
        return candidates[-1].created_at

    logger.debug(
        "No merge commit found; using first commit as origin",
        extra={"commits": len(commits)},
    )
    return commits[0].created_at


def compute_merge_duration(
    merge_request: MergeRequest,
    commits: Sequence[Commit],
    source_branch: str,
) -> timedelta:
    """Compute the signed time between the origin commit and the merge.

    Negative durations are returned unchanged.

    Raises:
        EmptyCommitListError: If the merge request has no commits.
    """
    if not commits:
        raise EmptyCommitListError(
            f"Merge request !{merge_request.iid} has no commits; cannot determine its origin commit."
        )

    origin = select_origin(commits, source_branch)
    duration = merge_request.merged_at - origin

    if duration < timedelta(0):
        logger.warning(
            "Merge request merged before its origin commit",
            extra={"iid": merge_request.iid, "duration_seconds": duration.total_seconds()},
        )

    return duration
