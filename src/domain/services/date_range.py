"""Resolve named time frames to concrete ``[start, end]`` windows.

"This" windows start at the beginning of the current period and end at
``now``; "Last" windows cover the whole previous period. ``Custom`` uses
the supplied bounds verbatim. Missing custom bounds and unknown tokens
resolve to the widest range (epoch start to ``now``).
"""

from calendar import monthrange
from datetime import date, datetime, time, timedelta

from src.domain.constants import DEFAULT_WEEK_START
from src.domain.models.filters import DateRange, TimeFrame, parse_time_frame


EPOCH_START = datetime(1970, 1, 1)


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def start_of_week(day: date, week_starts_on: int = DEFAULT_WEEK_START) -> date:
    """Return the first day of the week containing ``day``.

    Args:
        day: Any day of the week.
        week_starts_on: ``date.weekday()`` number of the first weekday.
    """
    offset = (day.weekday() - week_starts_on) % 7
    return day - timedelta(days=offset)


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    return day.replace(day=monthrange(day.year, day.month)[1])


def shift_months(day: date, months: int) -> date:
    """Move ``day`` by whole months, clamping to the month length."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    last_day = monthrange(year, month + 1)[1]
    return date(year, month + 1, min(day.day, last_day))


def start_of_quarter(day: date) -> date:
    first_month = ((day.month - 1) // 3) * 3 + 1
    return date(day.year, first_month, 1)


def widest_range(now: datetime) -> DateRange:
    """Return the full-history window ending at ``now``."""
    return DateRange(start=EPOCH_START, end=now)


def _as_instant(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return start_of_day(value)


def resolve_date_range(
    time_frame,
    custom_start: date | datetime | None = None,
    custom_end: date | datetime | None = None,
    *,
    now: datetime | None = None,
    week_starts_on: int = DEFAULT_WEEK_START,
) -> DateRange:
    """Map a time frame token to an inclusive window.

    Args:
        time_frame: ``TimeFrame`` member or its string value. Any other
            value resolves to the widest range.
        custom_start: Lower bound used with ``Custom``.
        custom_end: Upper bound used with ``Custom``.
        now: Anchor instant; defaults to the current local time.
        week_starts_on: ``date.weekday()`` number of the first weekday.

    Returns:
        DateRange: Resolved window. Never raises.
    """
    now = now or datetime.now()
    today = now.date()
    frame = parse_time_frame(time_frame)

    if frame is TimeFrame.THIS_WEEK:
        return DateRange(
            start=start_of_day(start_of_week(today, week_starts_on)),
            end=now,
        )
    if frame is TimeFrame.LAST_WEEK:
        first = start_of_week(today - timedelta(weeks=1), week_starts_on)
        return DateRange(
            start=start_of_day(first),
            end=end_of_day(first + timedelta(days=6)),
        )
    if frame is TimeFrame.THIS_MONTH:
        return DateRange(start=start_of_day(start_of_month(today)), end=now)
    if frame is TimeFrame.LAST_MONTH:
        previous = shift_months(start_of_month(today), -1)
        return DateRange(
            start=start_of_day(previous),
            end=end_of_day(end_of_month(previous)),
        )
    if frame is TimeFrame.THIS_QUARTER:
        return DateRange(start=start_of_day(start_of_quarter(today)), end=now)
    if frame is TimeFrame.LAST_QUARTER:
        previous = shift_months(start_of_quarter(today), -3)
        last_month = shift_months(previous, 2)
        return DateRange(
            start=start_of_day(previous),
            end=end_of_day(end_of_month(last_month)),
        )
    if frame is TimeFrame.THIS_YEAR:
        return DateRange(start=start_of_day(date(today.year, 1, 1)), end=now)
    if frame is TimeFrame.LAST_YEAR:
        year = today.year - 1
        return DateRange(
            start=start_of_day(date(year, 1, 1)),
            end=end_of_day(date(year, 12, 31)),
        )
    if frame is TimeFrame.CUSTOM and custom_start and custom_end:
        return DateRange(
            start=_as_instant(custom_start),
            end=_as_instant(custom_end),
        )
    return widest_range(now)


__all__ = [
    "EPOCH_START",
    "resolve_date_range",
    "widest_range",
    "start_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_quarter",
    "shift_months",
    "start_of_day",
    "end_of_day",
]
