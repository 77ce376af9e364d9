from datetime import date, datetime, timedelta, timezone

JST = timezone(timedelta(hours=9))


def utc_to_jst_date(instant: datetime) -> date:
    """Convert a UTC instant to its calendar date in Japan (UTC+9).

    Naive datetimes are taken to be UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(JST).date()


def parse_date_bound(value: str) -> date:
    """Parse a ``YYYY`` or ``YYYY-MM-DD`` string into a date.

    A bare year maps to January 1st of that year.
    """
    value = value.strip()
    if value.isdigit():
        year = int(value)
        if not 1 <= year <= 9999:
            raise ValueError(f"Year out of range: {value}")
        return date(year, 1, 1)
    return date.fromisoformat(value)
