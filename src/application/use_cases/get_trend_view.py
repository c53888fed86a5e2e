"""Use case to compute the trend (time-series) view."""

from collections.abc import Iterable
from datetime import date, datetime

from src.domain.constants import DEFAULT_WEEK_START
from src.domain.models.filters import FilterConfig
from src.domain.models.transactions import Transaction
from src.domain.models.trend import GroupBy, TransactionSlice, TrendSeries
from src.domain.services.transaction_filter import apply_filter_config
from src.domain.services.trend import build_trend_series, slice_bucket
from src.infrastructure.logging.logger import get_app_logger


class GetTrendViewUseCase:
    """Bucket filtered transactions by day, week or month."""

    def __init__(
        self,
        logger=None,
        week_starts_on: int = DEFAULT_WEEK_START,
    ) -> None:
        self._logger = logger or get_app_logger()
        self._week_starts_on = week_starts_on

    def execute(
        self,
        transactions: Iterable[Transaction],
        config: FilterConfig,
        group_by: GroupBy = "week",
        now: datetime | None = None,
    ) -> TrendSeries:
        """Return the trend series for the active filters."""
        _, filtered = apply_filter_config(
            transactions,
            config,
            now=now,
            week_starts_on=self._week_starts_on,
        )
        series = build_trend_series(
            filtered,
            group_by=group_by,
            week_starts_on=self._week_starts_on,
        )
        self._logger.info(
            f"Trend series by {group_by}: {len(series.points)} buckets, "
            f"{len(series.groups)} groups"
        )
        return series

    def slice(
        self,
        transactions: Iterable[Transaction],
        config: FilterConfig,
        bucket: date,
        group_by: GroupBy = "week",
        now: datetime | None = None,
    ) -> TransactionSlice:
        """Return the filtered transactions behind one bucket."""
        _, filtered = apply_filter_config(
            transactions,
            config,
            now=now,
            week_starts_on=self._week_starts_on,
        )
        return slice_bucket(
            filtered,
            bucket,
            group_by,
            week_starts_on=self._week_starts_on,
        )


__all__ = ["GetTrendViewUseCase"]
