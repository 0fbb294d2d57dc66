import logging
from datetime import date, datetime, timezone
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

DAY_FORMAT = "%Y-%m-%d"
DAY_START = "00:00:00"
DAY_END = "23:59:59"


def today(now: Optional[datetime] = None) -> date:
    """Local calendar date of the invocation instant."""
    return (now or datetime.now()).date()


def parse_day(value: Union[str, date, datetime]) -> date:
    """
    Parse a calendar day.

    Args:
        value (str | date | datetime): A YYYY-MM-DD string or a date object

    Returns:
        date: The calendar day (time of day is dropped)

    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip(), DAY_FORMAT).date()
    except ValueError:
        raise ValueError(f"Invalid date {value!r}. Use format YYYY-MM-DD")


def format_day(day: date) -> str:
    return day.strftime(DAY_FORMAT)


def day_bounds(day: date) -> Tuple[str, str]:
    """Closed interval covering a whole day, as understood by git --since/--until."""
    d = format_day(day)
    return f"{d} {DAY_START}", f"{d} {DAY_END}"


def to_epoch_millis(ts: datetime) -> int:
    return int(round(ts.timestamp() * 1000))


def to_iso_millis(ts: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    ts = ts.astimezone(timezone.utc).replace(tzinfo=None)
    return ts.isoformat(timespec="milliseconds") + "Z"
