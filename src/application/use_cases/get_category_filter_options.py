"""Use case to list the category exclusion options of a file."""

from collections.abc import Iterable

from src.domain.models.filter_options import FilterOption
from src.domain.models.transactions import Transaction
from src.domain.services.category_exclusion import (
    collect_category_labels,
    resolve_filter_options,
)


class GetCategoryFilterOptionsUseCase:
    """Resolve the exclusion rows for every category seen in the data."""

    def execute(
        self,
        transactions: Iterable[Transaction],
        excluded: Iterable[str] = (),
    ) -> list[FilterOption]:
        """Return header and item rows with their effective state.

        Args:
            transactions: All transactions of the active file, unfiltered so
                that excluded categories stay visible in the list.
            excluded: Explicit exclusion list.

        Returns:
            list[FilterOption]: Rows in display order.
        """
        labels = collect_category_labels(transactions)
        return resolve_filter_options(labels, excluded)


__all__ = ["GetCategoryFilterOptionsUseCase"]
