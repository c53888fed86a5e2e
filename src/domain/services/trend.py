"""Calendar bucketing for the trend view."""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import DEFAULT_WEEK_START
from src.domain.models.filters import DateRange
from src.domain.models.transactions import Transaction
from src.domain.models.trend import (
    GroupBy,
    TransactionSlice,
    TrendPoint,
    TrendSeries,
)
from src.domain.services.colors import category_color
from src.domain.services.date_range import (
    end_of_day,
    end_of_month,
    start_of_day,
    start_of_month,
    start_of_week,
)


def bucket_start(
    day: date,
    group_by: GroupBy,
    week_starts_on: int = DEFAULT_WEEK_START,
) -> date:
    """Return the first day of the bucket containing ``day``."""
    if group_by == "month":
        return start_of_month(day)
    if group_by == "week":
        return start_of_week(day, week_starts_on)
    return day


def bucket_end(bucket: date, group_by: GroupBy) -> date:
    if group_by == "month":
        return end_of_month(bucket)
    if group_by == "week":
        return bucket + timedelta(days=6)
    return bucket


def bucket_label(bucket: date, group_by: GroupBy) -> str:
    """Human label for a bucket, e.g. ``Week of Oct 12, 2025``."""
    day_label = f"{bucket:%b} {bucket.day}, {bucket.year}"
    if group_by == "month":
        return f"{bucket:%B} {bucket.year}"
    if group_by == "week":
        return f"Week of {day_label}"
    return day_label


def build_trend_series(
    transactions: Iterable[Transaction],
    group_by: GroupBy = "week",
    week_starts_on: int = DEFAULT_WEEK_START,
) -> TrendSeries:
    """Aggregate absolute amounts per bucket and category group.

    Args:
        transactions: Filtered transactions.
        group_by: ``day``, ``week`` or ``month``.
        week_starts_on: ``date.weekday()`` number of the first weekday.

    Returns:
        TrendSeries: Groups sorted by name, points oldest first.
    """
    items = list(transactions)
    groups = sorted({transaction.category_group for transaction in items})
    totals: dict[date, dict[str, Decimal]] = {}
    for transaction in items:
        bucket = bucket_start(transaction.date, group_by, week_starts_on)
        row = totals.get(bucket)
        if row is None:
            row = {group: Decimal("0") for group in groups}
            totals[bucket] = row
        row[transaction.category_group] += transaction.absolute_amount

    points = [
        TrendPoint(
            bucket=bucket,
            label=bucket_label(bucket, group_by),
            totals_by_group=row,
            total=sum(row.values(), start=Decimal("0")),
        )
        for bucket, row in sorted(totals.items())
    ]
    return TrendSeries(
        group_by=group_by,
        groups=groups,
        points=points,
        colors={group: category_color(group) for group in groups},
    )


def slice_bucket(
    transactions: Iterable[Transaction],
    bucket: date,
    group_by: GroupBy,
    week_starts_on: int = DEFAULT_WEEK_START,
) -> TransactionSlice:
    """Return the transactions behind one bucket, newest first."""
    matching = [
        transaction
        for transaction in transactions
        if bucket_start(transaction.date, group_by, week_starts_on) == bucket
    ]
    matching.sort(key=lambda transaction: transaction.date, reverse=True)
    return TransactionSlice(
        label=bucket_label(bucket, group_by),
        total=sum(
            (transaction.absolute_amount for transaction in matching),
            start=Decimal("0"),
        ),
        transactions=matching,
        date_range=DateRange(
            start=start_of_day(bucket),
            end=end_of_day(bucket_end(bucket, group_by)),
        ),
    )


__all__ = [
    "bucket_start",
    "bucket_end",
    "bucket_label",
    "build_trend_series",
    "slice_bucket",
]
