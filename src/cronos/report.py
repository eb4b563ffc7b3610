"""Duration formatting and terminal reporting for merge durations.

This module provides utilities for:
- Splitting a duration into hours, minutes and seconds with Euclidean division.
- Averaging accumulated durations without dividing by zero.
- Printing one colorized line per merge request and a closing average line.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Tuple

from .models import DurationRecord
from .terminal import random_color

logger = logging.getLogger(__name__)


def whole_seconds(duration: timedelta) -> int:
    """Return the whole seconds in ``duration``, truncated toward zero."""
    seconds = duration.days * 86400 + duration.seconds
    if seconds < 0 and duration.microseconds:
        seconds += 1
    return seconds


def split_duration(duration: timedelta) -> Tuple[int, int, int]:
    """Split a duration into ``(hours, minutes, seconds)``.

    Uses floor division with non-negative remainders, so for a negative
    duration only ``hours`` is negative and the rendered text does not carry
    an overall sign.
    """
    hours, remainder = divmod(whole_seconds(duration), 3600)
    minutes, seconds = divmod(remainder, 60)
    return hours, minutes, seconds


def format_duration(duration: timedelta) -> str:
    """Format a duration as ``"H hours and M minutes S seconds"``."""
    hours, minutes, seconds = split_duration(duration)
    return f"{hours} hours and {minutes} minutes {seconds} seconds"


def average_duration(total: timedelta, count: int) -> timedelta:
    """Return ``total / count`` truncated toward zero, or zero when ``count`` is 0."""
    if count <= 0:
        return timedelta(0)

    total_microseconds = (total.days * 86400 + total.seconds) * 1_000_000 + total.microseconds
    quotient = abs(total_microseconds) // count
    if total_microseconds < 0:
        quotient = -quotient
    return timedelta(microseconds=quotient)


class DurationReport:
    """Accumulates per-merge-request durations and prints them as they arrive."""

    def __init__(self, source_branch: str, target_branch: str, use_color: bool = True) -> None:
        self.source_branch = source_branch
        self.target_branch = target_branch
        self.use_color = use_color
        self.total = timedelta(0)
        self.count = 0

    @property
    def average(self) -> timedelta:
        return average_duration(self.total, self.count)

    def _paint(self, *fragments: object) -> str:
        return "".join(random_color(fragment, enabled=self.use_color) for fragment in fragments)

    def add(self, record: DurationRecord) -> None:
        self.total += record.duration
        self.count += 1

    def format_one(self, record: DurationRecord) -> str:
        return self._paint(
            "Merge Request #",
            record.iid,
            ": The time it took to merge ",
            self.source_branch,
            " to ",
            self.target_branch,
            " was ",
            format_duration(record.duration),
            ".",
        )

    def format_average(self) -> str:
        hours, minutes, seconds = split_duration(self.average)
        return self._paint(
            "The average duration of the merge request from ",
            self.source_branch,
            " to ",
            self.target_branch,
            " is ",
            hours,
            " hours ",
            minutes,
            " minutes, and ",
            seconds,
            " seconds.",
        )

    def report_one(self, record: DurationRecord) -> None:
        """Fold ``record`` into the running total and print its line."""
        self.add(record)
        print(self.format_one(record))

    def report_average(self) -> None:
        """Print the average duration across all reported merge requests."""
        logger.info(
            "Merge duration summary",
            extra={
                "count": self.count,
                "total_seconds": self.total.total_seconds(),
                "average_seconds": self.average.total_seconds(),
            },
        )
        print(self.format_average())
