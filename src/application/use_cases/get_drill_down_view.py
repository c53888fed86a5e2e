"""Use case to compute the category drill-down view."""

from collections.abc import Iterable
from datetime import datetime

from src.domain.constants import DEFAULT_WEEK_START, EMPTY_VIEW_MESSAGE
from src.domain.models.drill_down import DrillDownView
from src.domain.models.filters import FilterConfig
from src.domain.models.navigation import NavigationState, RootView
from src.domain.models.transactions import Transaction
from src.domain.services.category_tree import build_category_tree
from src.domain.services.navigation import (
    breadcrumb,
    display_node,
    reconcile,
    resolve_selected_node,
)
from src.domain.services.transaction_filter import apply_filter_config
from src.infrastructure.logging.logger import get_app_logger


class GetDrillDownViewUseCase:
    """Filter transactions, rebuild the tree and reconcile navigation."""

    def __init__(
        self,
        logger=None,
        week_starts_on: int = DEFAULT_WEEK_START,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            week_starts_on: ``date.weekday()`` number of the first weekday.
        """
        self._logger = logger or get_app_logger()
        self._week_starts_on = week_starts_on

    def execute(
        self,
        transactions: Iterable[Transaction],
        config: FilterConfig,
        state: NavigationState | None = None,
        now: datetime | None = None,
    ) -> DrillDownView:
        """Return the drill-down view for the current inputs.

        Args:
            transactions: All transactions of the active file.
            config: Active filter combination.
            state: Navigation state from the previous render.
            now: Anchor instant for named time frames.

        Returns:
            DrillDownView: Tree, reconciled state and the selection details.
        """
        date_range, filtered = apply_filter_config(
            transactions,
            config,
            now=now,
            week_starts_on=self._week_starts_on,
        )
        tree = build_category_tree(filtered)
        self._logger.info(
            f"Built category tree from {len(filtered)} transactions: "
            f"groups={len(tree.groups)}, total={tree.root.total}"
        )

        reconciliation = reconcile(state or RootView(), tree)
        if reconciliation.notice:
            self._logger.warning(reconciliation.notice)
        current = reconciliation.state

        selected = resolve_selected_node(tree, current.selected_node_id)
        selected_transactions = (
            sorted(
                selected.transactions,
                key=lambda transaction: transaction.date,
                reverse=True,
            )
            if selected is not None
            else []
        )
        return DrillDownView(
            tree=tree,
            state=current,
            date_range=date_range,
            display_node=display_node(current, tree),
            selected_node=selected,
            breadcrumb=breadcrumb(current, tree),
            transactions=selected_transactions,
            notice=reconciliation.notice,
            empty_message=EMPTY_VIEW_MESSAGE if tree.is_empty else None,
        )


__all__ = ["GetDrillDownViewUseCase", "DrillDownView"]
