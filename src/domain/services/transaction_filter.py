"""Filter transactions by date window, category exclusion and sign."""

from collections.abc import Collection, Iterable
from datetime import datetime

from src.domain.constants import DEFAULT_WEEK_START
from src.domain.models.filters import DateRange, FilterConfig
from src.domain.models.transactions import Transaction
from src.domain.services.date_range import resolve_date_range


def passes_filter(
    transaction: Transaction,
    date_range: DateRange,
    excluded_categories: Collection[str],
    show_income: bool,
    show_expense: bool,
) -> bool:
    """Return True when a transaction satisfies every filter condition."""
    if not date_range.contains(transaction.date):
        return False
    if transaction.category_group in excluded_categories:
        return False
    if transaction.category_sub in excluded_categories:
        return False
    if transaction.is_expense:
        return show_expense
    return show_income


def filter_transactions(
    transactions: Iterable[Transaction],
    date_range: DateRange,
    excluded_categories: Collection[str] = frozenset(),
    show_income: bool = True,
    show_expense: bool = True,
) -> list[Transaction]:
    """Return the transactions passing all filters, in input order.

    Args:
        transactions: Source transactions (not mutated).
        date_range: Inclusive window on transaction dates.
        excluded_categories: Group or sub-category names to drop.
        show_income: Keep transactions with ``amount >= 0``.
        show_expense: Keep transactions with ``amount < 0``.

    Returns:
        list[Transaction]: Stable, order-preserving subset.
    """
    excluded = frozenset(excluded_categories)
    return [
        transaction
        for transaction in transactions
        if passes_filter(
            transaction,
            date_range,
            excluded,
            show_income,
            show_expense,
        )
    ]


def apply_filter_config(
    transactions: Iterable[Transaction],
    config: FilterConfig,
    *,
    now: datetime | None = None,
    week_starts_on: int = DEFAULT_WEEK_START,
) -> tuple[DateRange, list[Transaction]]:
    """Resolve the configured window and filter in one step.

    Returns:
        tuple[DateRange, list[Transaction]]: The resolved window and the
        filtered transactions.
    """
    date_range = resolve_date_range(
        config.time_frame,
        config.custom_start,
        config.custom_end,
        now=now,
        week_starts_on=week_starts_on,
    )
    filtered = filter_transactions(
        transactions,
        date_range,
        config.excluded_categories,
        show_income=config.show_income,
        show_expense=config.show_expense,
    )
    return date_range, filtered


__all__ = ["filter_transactions", "passes_filter", "apply_filter_config"]
