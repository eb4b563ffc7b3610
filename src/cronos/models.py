"""Domain models for GitLab merge-duration reporting.

These dataclasses intentionally model only the subset of API payload fields that
are required to time a merge request.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class MergeRequest:
    """Represents a merged GitLab merge request."""

    iid: int
    merged_at: datetime


@dataclass(frozen=True)
class Commit:
    """Represents one commit belonging to a merge request."""

    created_at: datetime
    message: str


@dataclass(frozen=True)
class DurationRecord:
    """Represents the measured merge duration of one merge request."""

    iid: int
    duration: timedelta
