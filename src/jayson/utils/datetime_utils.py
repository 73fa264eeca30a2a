"""Datetime utilities for timestamps written into generated files."""

from datetime import UTC, datetime


def get_current_datetime_utc_iso() -> str:
    """Get the current UTC time as ISO 8601 with milliseconds and ``Z``.

    Returns:
        Timestamp string, for example "2026-02-04T11:02:04.556Z"

    """
    now = datetime.now(UTC)
    millis = now.microsecond // 1000
    return f"{now.strftime('%Y-%m-%dT%H:%M:%S')}.{millis:03d}Z"
