"""Domain models for time windows and filter configuration."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum


class TimeFrame(str, Enum):
    """Named time windows offered by the dashboard."""

    THIS_WEEK = "This Week"
    LAST_WEEK = "Last Week"
    THIS_MONTH = "This Month"
    LAST_MONTH = "Last Month"
    THIS_QUARTER = "This Quarter"
    LAST_QUARTER = "Last Quarter"
    THIS_YEAR = "This Year"
    LAST_YEAR = "Last Year"
    CUSTOM = "Custom"


def parse_time_frame(value) -> TimeFrame | None:
    """Return the matching ``TimeFrame`` or None for unknown tokens."""
    if isinstance(value, TimeFrame):
        return value
    try:
        return TimeFrame(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class DateRange:
    """Inclusive ``[start, end]`` window of instants."""

    start: datetime
    end: datetime

    def contains(self, day: date) -> bool:
        """Return True when ``day`` (at midnight) lies inside the window."""
        instant = datetime.combine(day, time.min)
        return self.start <= instant <= self.end


@dataclass(frozen=True)
class FilterConfig:
    """Active filter combination for the drill-down and trend views.

    Attributes:
        time_frame: Named window, or any other token (widest range).
        custom_start: Lower bound used with ``TimeFrame.CUSTOM``.
        custom_end: Upper bound used with ``TimeFrame.CUSTOM``.
        excluded_categories: Group or sub-category names to hide.
        show_income: Keep transactions with ``amount >= 0``.
        show_expense: Keep transactions with ``amount < 0``.
    """

    time_frame: TimeFrame | str = TimeFrame.THIS_MONTH
    custom_start: date | datetime | None = None
    custom_end: date | datetime | None = None
    excluded_categories: frozenset[str] = field(default_factory=frozenset)
    show_income: bool = True
    show_expense: bool = True


__all__ = ["TimeFrame", "DateRange", "FilterConfig", "parse_time_frame"]
