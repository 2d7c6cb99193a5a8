from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the TIMESTAMP columns (no time zone)."""
    return datetime.now(UTC).replace(tzinfo=None)
