"""Domain services package."""

from .category_exclusion import (
    clear_exclusions,
    collect_category_labels,
    resolve_filter_options,
    toggle_option,
)
from .category_tree import build_category_tree
from .date_range import resolve_date_range
from .navigation import (
    breadcrumb,
    click_node,
    display_node,
    go_back,
    reconcile,
    resolve_selected_node,
)
from .transaction_filter import apply_filter_config, filter_transactions
from .trend import build_trend_series, slice_bucket

__all__ = [
    "apply_filter_config",
    "breadcrumb",
    "build_category_tree",
    "build_trend_series",
    "clear_exclusions",
    "click_node",
    "collect_category_labels",
    "display_node",
    "filter_transactions",
    "go_back",
    "reconcile",
    "resolve_date_range",
    "resolve_filter_options",
    "resolve_selected_node",
    "slice_bucket",
    "toggle_option",
]
