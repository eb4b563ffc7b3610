"""Tests for duration formatting and report rendering."""

import re
import sys
from datetime import timedelta
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cronos.models import DurationRecord
from cronos.report import (
    DurationReport,
    average_duration,
    format_duration,
    split_duration,
    whole_seconds,
)

ANSI = re.compile(r"\x1b\[[0-9;]*m")


@pytest.mark.parametrize("total", [0, 59, 60, 3599, 3600, 3661, 183600, 987654])
def test_split_duration_recombines_to_total(total):
    """Verify hours*3600 + minutes*60 + seconds equals the total with bounded remainders."""
    hours, minutes, seconds = split_duration(timedelta(seconds=total))

    assert hours * 3600 + minutes * 60 + seconds == total
    assert 0 <= minutes < 60
    assert 0 <= seconds < 60


def test_split_duration_negative_uses_floor_division():
    """Verify negative durations decompose with non-negative remainders."""
    assert split_duration(timedelta(seconds=-1)) == (-1, 59, 59)
    assert split_duration(timedelta(hours=-2)) == (-2, 0, 0)


def test_whole_seconds_truncates_toward_zero():
    """Verify sub-second parts are dropped toward zero for both signs."""
    assert whole_seconds(timedelta(seconds=1, microseconds=900000)) == 1
    assert whole_seconds(timedelta(seconds=-1, microseconds=-900000)) == -1
    assert whole_seconds(timedelta(microseconds=-500000)) == 0


def test_format_duration_text():
    """Verify the hours/minutes/seconds wording."""
    assert format_duration(timedelta(hours=51)) == "51 hours and 0 minutes 0 seconds"
    assert format_duration(timedelta(seconds=3661)) == "1 hours and 1 minutes 1 seconds"


def test_average_of_zero_requests_is_zero():
    """Verify averaging with no samples returns zero instead of failing."""
    assert average_duration(timedelta(hours=5), 0) == timedelta(0)


def test_average_of_identical_durations_is_that_duration():
    """Verify N identical durations average to the same duration."""
    duration = timedelta(hours=7, minutes=3, seconds=11)

    assert average_duration(duration * 3, 3) == duration


def test_average_truncates_toward_zero():
    """Verify division truncates at microsecond precision for both signs."""
    assert average_duration(timedelta(microseconds=10), 3) == timedelta(microseconds=3)
    assert average_duration(timedelta(microseconds=-10), 3) == timedelta(microseconds=-3)


def test_report_one_prints_line_and_accumulates(capsys):
    """Verify each merge request line is printed and folded into the totals."""
    report = DurationReport("main", "production", use_color=False)

    report.report_one(DurationRecord(iid=42, duration=timedelta(hours=51)))
    report.report_one(DurationRecord(iid=43, duration=timedelta(hours=1)))

    output = capsys.readouterr().out.splitlines()
    assert output[0] == (
        "Merge Request #42: The time it took to merge main to production "
        "was 51 hours and 0 minutes 0 seconds."
    )
    assert report.count == 2
    assert report.total == timedelta(hours=52)
    assert report.average == timedelta(hours=26)


def test_report_average_text(capsys):
    """Verify the closing average line wording."""
    report = DurationReport("main", "production", use_color=False)
    report.add(DurationRecord(iid=1, duration=timedelta(hours=1, minutes=2, seconds=3)))

    report.report_average()

    assert capsys.readouterr().out.strip() == (
        "The average duration of the merge request from main to production "
        "is 1 hours 2 minutes, and 3 seconds."
    )


def test_report_average_with_no_requests(capsys):
    """Verify an empty report prints a zero average."""
    DurationReport("main", "production", use_color=False).report_average()

    assert "is 0 hours 0 minutes, and 0 seconds." in capsys.readouterr().out


def test_colored_output_strips_to_plain_text():
    """Verify colored rendering only adds ANSI codes around the same text."""
    record = DurationRecord(iid=7, duration=timedelta(minutes=5))
    colored = DurationReport("main", "production", use_color=True).format_one(record)
    plain = DurationReport("main", "production", use_color=False).format_one(record)

    assert "\x1b[" in colored
    assert ANSI.sub("", colored) == plain
