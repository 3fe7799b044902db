from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_timestamp(previous: datetime | None) -> datetime:
    """Return the current time, nudged past ``previous`` if the clock has not moved."""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class Base(DeclarativeBase):
    pass
