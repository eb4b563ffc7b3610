"""ISO-8601 timestamp parsing for GitLab payloads."""

from __future__ import annotations

from datetime import datetime

from .errors import TimestampParseError


def parse_timestamp(value: object) -> datetime:
    """Parse a GitLab ISO-8601 timestamp into a timezone-aware datetime.

    GitLab renders UTC instants with a trailing ``Z`` and millisecond precision,
    e.g. ``2024-01-08T09:00:00.000Z``. Timestamps without an offset are
    rejected rather than assumed to be UTC.

    Raises:
        TimestampParseError: If ``value`` is not a string, is malformed, or has
            no UTC offset.
    """
    if not isinstance(value, str) or not value.strip():
        raise TimestampParseError(f"Expected an ISO-8601 timestamp, got {value!r}.")

    text = value.strip()
    normalized = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise TimestampParseError(f"Invalid ISO-8601 timestamp: {value!r}.") from exc

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise TimestampParseError(f"Timestamp has no UTC offset: {value!r}.")

    return parsed
