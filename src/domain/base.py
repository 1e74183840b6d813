from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns used by every table."""
    return datetime.now(UTC).replace(tzinfo=None)
