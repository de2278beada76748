"""Module: timeutils."""

from datetime import UTC, datetime


# Database timestamps are stored as naive UTC.
def utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
