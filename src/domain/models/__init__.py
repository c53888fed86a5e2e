"""Domain models package."""

from .category_tree import CategoryNode, CategoryTree
from .drill_down import DrillDownView
from .filter_options import FilterOption
from .filters import DateRange, FilterConfig, TimeFrame, parse_time_frame
from .navigation import (
    LeafAtRoot,
    NavigationState,
    Reconciliation,
    RootView,
    ZoomedSelection,
    ZoomedView,
)
from .transactions import FileRecord, Transaction, split_category
from .trend import TransactionSlice, TrendPoint, TrendSeries

__all__ = [
    "CategoryNode",
    "CategoryTree",
    "DrillDownView",
    "FilterOption",
    "DateRange",
    "FilterConfig",
    "TimeFrame",
    "parse_time_frame",
    "NavigationState",
    "RootView",
    "ZoomedView",
    "ZoomedSelection",
    "LeafAtRoot",
    "Reconciliation",
    "FileRecord",
    "Transaction",
    "split_category",
    "TransactionSlice",
    "TrendPoint",
    "TrendSeries",
]
