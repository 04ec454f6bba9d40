from datetime import date, datetime, time, timezone
from typing import Optional, Union

from dateutil.relativedelta import relativedelta


def utc_now() -> datetime:
    # timestamps are stored as naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def add_interval(base: Union[date, datetime], frequency: int, unit: str):
    """Shift ``base`` forward by ``frequency`` days/weeks/months/years.

    Month and year steps clamp to the end of the target month, so
    2024-01-31 + 1 month is 2024-02-29.
    """
    if unit not in ("days", "weeks", "months", "years"):
        raise ValueError(f"Unsupported frequency unit: {unit}")
    return base + relativedelta(**{unit: frequency})


def day_range(start: date, end: date):
    """Inclusive datetime bounds covering the whole of both days."""
    return datetime.combine(start, time.min), datetime.combine(end, time.max)
