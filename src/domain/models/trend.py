"""Domain models for the trend (time-series) view."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Literal

from src.domain.models.filters import DateRange
from src.domain.models.transactions import Transaction


GroupBy = Literal["day", "week", "month"]


@dataclass(frozen=True)
class TrendPoint:
    """Totals for one calendar bucket."""

    bucket: date
    label: str
    totals_by_group: dict[str, Decimal]
    total: Decimal


@dataclass(frozen=True)
class TrendSeries:
    """Bucketed totals per category group, oldest bucket first."""

    group_by: GroupBy
    groups: list[str]
    points: list[TrendPoint]
    colors: dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.points


@dataclass(frozen=True)
class TransactionSlice:
    """Transactions behind one clicked trend bucket."""

    label: str
    total: Decimal
    transactions: list[Transaction]
    date_range: DateRange


__all__ = ["GroupBy", "TrendPoint", "TrendSeries", "TransactionSlice"]
