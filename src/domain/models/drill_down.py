"""Read model handed to the rendering adapter for the drill-down view."""

from dataclasses import dataclass, field

from src.domain.models.category_tree import CategoryNode, CategoryTree
from src.domain.models.filters import DateRange
from src.domain.models.navigation import NavigationState
from src.domain.models.transactions import Transaction


@dataclass(frozen=True)
class DrillDownView:
    """Everything the drill-down chart and its detail table need.

    Attributes:
        tree: Category tree built from the filtered transactions.
        state: Navigation state after reconciliation with ``tree``.
        date_range: Window the transactions were filtered with.
        display_node: Node at the center of the chart (root or group).
        selected_node: Node whose transactions are listed, if any.
        breadcrumb: Display names from ``Total`` down to the selection.
        transactions: Selected node transactions, newest first.
        notice: Transient message raised by reconciliation.
        empty_message: Set when the filtered set is empty.
    """

    tree: CategoryTree
    state: NavigationState
    date_range: DateRange
    display_node: CategoryNode
    selected_node: CategoryNode | None = None
    breadcrumb: list[str] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    notice: str | None = None
    empty_message: str | None = None


__all__ = ["DrillDownView"]
