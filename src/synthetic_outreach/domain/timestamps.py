"""ISO-8601 helpers shared by the generator, deriver and codec.

Timestamps travel as strings with millisecond precision and a ``Z`` suffix
(``2024-01-08T10:15:00.000Z``).  Parsing accepts any ISO-8601 form
understood by :meth:`datetime.fromisoformat`; naive values are read as UTC.
"""

from __future__ import annotations

import datetime

MS_PER_DAY = 1000 * 60 * 60 * 24

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.UTC)


def format_iso(moment: datetime.datetime) -> str:
    """Render *moment* as UTC ISO-8601 with milliseconds and ``Z``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=datetime.UTC)
    moment = moment.astimezone(datetime.UTC)
    millis = moment.microsecond // 1000
    return moment.strftime("%Y-%m-%dT%H:%M:%S") + f".{millis:03d}Z"


def parse_iso(value: str) -> datetime.datetime:
    """Parse an ISO-8601 string into an aware UTC ``datetime``.

    Raises
    ------
    ValueError
        If *value* is not a valid ISO-8601 timestamp.
    """
    moment = datetime.datetime.fromisoformat(value.strip())
    if moment.tzinfo is None:
        return moment.replace(tzinfo=datetime.UTC)
    return moment.astimezone(datetime.UTC)


def to_epoch_ms(moment: datetime.datetime) -> float:
    """Milliseconds since the Unix epoch."""
    return (moment - _EPOCH) / datetime.timedelta(milliseconds=1)


def start_of_week(moment: datetime.datetime) -> datetime.datetime:
    """Monday 00:00 UTC of the week containing *moment*."""
    day = moment.astimezone(datetime.UTC).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    return day - datetime.timedelta(days=day.weekday())
