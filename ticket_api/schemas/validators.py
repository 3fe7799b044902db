import re
from datetime import date

EVENT_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
EVENT_DATE_MESSAGE = "time must be a valid date in YYYY-MM-DD format"


def is_event_date(value: object) -> bool:
    """True for ``YYYY-MM-DD`` strings that name a real calendar date."""
    if not isinstance(value, str) or not EVENT_DATE_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_event_date(value: str) -> str:
    if not is_event_date(value):
        raise ValueError(EVENT_DATE_MESSAGE)
    return value


def reject_null(value: object) -> object:
    # Optional update fields may be omitted, but not sent as null.
    if value is None:
        raise ValueError("must not be null")
    return value
