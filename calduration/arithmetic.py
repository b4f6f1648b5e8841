"""Calendar-aware application of a Duration to a timestamp.

Years and months are applied first, keeping the day of the month and
clamping it to the last valid day when the target month is shorter
(``1 month before March 31`` is the end of February). Days are then applied
as plain calendar days and seconds as a plain clock shift. The order is
fixed: clamping only makes sense at the month step.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Callable, Literal, overload

from dateutil.relativedelta import relativedelta

from calduration.duration import Duration

logger = logging.getLogger(__name__)


def _coerce_timestamp(
    timestamp: datetime | date | int,
) -> tuple[datetime, Callable[[datetime], datetime | int]]:
    """Convert a timestamp to a datetime plus a function restoring its kind.

    Accepts:
    - datetime: Used as-is, naive or aware (no zone conversion is done)
    - date: Promoted to midnight of that day, result stays a datetime
    - int: Unix seconds, interpreted in UTC and converted back to int

    Raises:
        TypeError: If timestamp is an unsupported type
    """
    if isinstance(timestamp, datetime):
        return timestamp, lambda moment: moment
    if isinstance(timestamp, date):
        return datetime.combine(timestamp, time.min), lambda moment: moment
    if isinstance(timestamp, int) and not isinstance(timestamp, bool):
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
        return moment, lambda shifted: int(shifted.timestamp())
    raise TypeError(
        f"Timestamp must be datetime, date, or int (Unix seconds).\n"
        f"Got {type(timestamp).__name__!r}: {timestamp!r}\n"
        f"Examples:\n"
        f"  days(1).after(datetime(2025, 1, 31, 9, 30))\n"
        f"  months(1).before(date(2025, 3, 31))\n"
        f"  hours(2).after(1735689600)  # int (Unix seconds)"
    )


def _shift(
    duration: Duration, timestamp: datetime | date | int, sign: Literal[1, -1]
) -> datetime | int:
    """Move ``timestamp`` by ``duration`` in the direction of ``sign``.

    Years and months come only from the months field, days and seconds only
    from the seconds field. Each field is applied exactly as stored, so a long
    run of days is never turned into months (``days(400)`` stays 400 days).
    """
    moment, restore = _coerce_timestamp(timestamp)

    # Decompose each domain on its own so nothing is approximated
    calendar = Duration(months=duration.months).to_units("years", "months")
    clock = Duration(seconds=duration.seconds).to_units("days", "seconds")
    logger.debug(
        "Shifting %s by %s%r (calendar=%r, clock=%r)",
        moment,
        "+" if sign > 0 else "-",
        duration,
        calendar,
        clock,
    )

    # relativedelta carries whole years and clamps the day to the month end
    shifted = moment + relativedelta(
        years=sign * calendar["years"], months=sign * calendar["months"]
    )
    shifted += timedelta(days=sign * clock["days"])
    shifted += timedelta(seconds=sign * clock["seconds"])

    logger.debug("Shifted %s to %s", moment, shifted)
    return restore(shifted)


@overload
def after(duration: Duration, timestamp: datetime | date) -> datetime: ...


@overload
def after(duration: Duration, timestamp: int) -> int: ...


def after(duration: Duration, timestamp: datetime | date | int) -> datetime | int:
    """Return the timestamp ``duration`` later than ``timestamp``.

    Example:
        >>> after(months(1), datetime(2000, 1, 31, 3, 45))
        datetime.datetime(2000, 2, 29, 3, 45)
    """
    return _shift(duration, timestamp, 1)


@overload
def before(duration: Duration, timestamp: datetime | date) -> datetime: ...


@overload
def before(duration: Duration, timestamp: int) -> int: ...


def before(duration: Duration, timestamp: datetime | date | int) -> datetime | int:
    """Return the timestamp ``duration`` earlier than ``timestamp``.

    Example:
        >>> before(months(1), datetime(2000, 3, 31, 3, 45))
        datetime.datetime(2000, 2, 29, 3, 45)
    """
    return _shift(duration, timestamp, -1)


def ago(duration: Duration, tz: tzinfo | None = None) -> datetime:
    """Return the moment ``duration`` before now (local time unless tz is given)."""
    return _shift(duration, datetime.now(tz), -1)  # type: ignore[return-value]


def from_now(duration: Duration, tz: tzinfo | None = None) -> datetime:
    """Return the moment ``duration`` after now (local time unless tz is given)."""
    return _shift(duration, datetime.now(tz), 1)  # type: ignore[return-value]
