"""Tests for the time frame resolver."""

from datetime import date, datetime, time

import pytest

from src.domain.constants import MONDAY, SUNDAY
from src.domain.models.filters import TimeFrame
from src.domain.services.date_range import (
    EPOCH_START,
    resolve_date_range,
    shift_months,
    start_of_week,
)


NOW = datetime(2024, 3, 15, 14, 30)  # Friday


def _end(day: date) -> datetime:
    return datetime.combine(day, time.max)


def test_this_month_starts_on_first_day_and_ends_now() -> None:
    """This Month should cover the first of the month up to now."""
    result = resolve_date_range(TimeFrame.THIS_MONTH, now=NOW)

    assert result.start == datetime(2024, 3, 1)
    assert result.end == NOW


def test_last_month_covers_full_previous_month() -> None:
    """Last Month should end at the last instant of the previous month."""
    result = resolve_date_range("Last Month", now=NOW)

    assert result.start == datetime(2024, 2, 1)
    assert result.end == _end(date(2024, 2, 29))


def test_last_month_in_january_rolls_back_a_year() -> None:
    """Last Month should cross year boundaries."""
    result = resolve_date_range(
        TimeFrame.LAST_MONTH,
        now=datetime(2024, 1, 10),
    )

    assert result.start == datetime(2023, 12, 1)
    assert result.end == _end(date(2023, 12, 31))


def test_this_week_defaults_to_sunday_start() -> None:
    """Weeks start on Sunday unless configured otherwise."""
    result = resolve_date_range(TimeFrame.THIS_WEEK, now=NOW)

    assert result.start == datetime(2024, 3, 10)
    assert result.end == NOW


def test_this_week_honors_monday_start() -> None:
    """A Monday week start should shift the window."""
    result = resolve_date_range(
        TimeFrame.THIS_WEEK,
        now=NOW,
        week_starts_on=MONDAY,
    )

    assert result.start == datetime(2024, 3, 11)


def test_last_week_spans_seven_days() -> None:
    """Last Week should cover the seven days before the current week."""
    result = resolve_date_range(TimeFrame.LAST_WEEK, now=NOW)

    assert result.start == datetime(2024, 3, 3)
    assert result.end == _end(date(2024, 3, 9))


@pytest.mark.parametrize(
    ("frame", "expected_start", "expected_end"),
    [
        (TimeFrame.THIS_QUARTER, datetime(2024, 1, 1), NOW),
        (
            TimeFrame.LAST_QUARTER,
            datetime(2023, 10, 1),
            _end(date(2023, 12, 31)),
        ),
        (TimeFrame.THIS_YEAR, datetime(2024, 1, 1), NOW),
        (TimeFrame.LAST_YEAR, datetime(2023, 1, 1), _end(date(2023, 12, 31))),
    ],
)
def test_quarter_and_year_windows(frame, expected_start, expected_end) -> None:
    """Quarter and year frames should align to calendar boundaries."""
    result = resolve_date_range(frame, now=NOW)

    assert result.start == expected_start
    assert result.end == expected_end


def test_last_quarter_from_august() -> None:
    """Last Quarter in Q3 should be April through June."""
    result = resolve_date_range(
        TimeFrame.LAST_QUARTER,
        now=datetime(2024, 8, 20),
    )

    assert result.start == datetime(2024, 4, 1)
    assert result.end == _end(date(2024, 6, 30))


def test_custom_uses_bounds_verbatim() -> None:
    """Custom should use both bounds as given, dates at midnight."""
    result = resolve_date_range(
        TimeFrame.CUSTOM,
        date(2024, 1, 5),
        date(2024, 2, 10),
        now=NOW,
    )

    assert result.start == datetime(2024, 1, 5)
    assert result.end == datetime(2024, 2, 10)


def test_custom_missing_bound_falls_back_to_widest_range() -> None:
    """A missing custom bound should yield the full history."""
    result = resolve_date_range(TimeFrame.CUSTOM, date(2024, 1, 5), None,
                                now=NOW)

    assert result.start == EPOCH_START
    assert result.end == NOW


def test_unknown_token_falls_back_to_widest_range() -> None:
    """Unknown tokens should never raise."""
    result = resolve_date_range("All Time", now=NOW)

    assert result.start == EPOCH_START
    assert result.end == NOW


def test_start_of_week_on_start_day_is_identity() -> None:
    """A Sunday is the start of its own Sunday-based week."""
    sunday = date(2024, 3, 10)

    assert start_of_week(sunday, SUNDAY) == sunday
    assert start_of_week(sunday, MONDAY) == date(2024, 3, 4)


def test_shift_months_clamps_day() -> None:
    """Shifting from a long month clamps to the shorter month."""
    assert shift_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
    assert shift_months(date(2023, 11, 30), 3) == date(2024, 2, 29)
