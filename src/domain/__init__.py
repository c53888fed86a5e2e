"""Domain package for business rules and core models."""

from .constants import DEFAULT_WEEK_START, NONE_CATEGORY, ROOT_NODE_ID
from .models import (
    CategoryNode,
    CategoryTree,
    DateRange,
    FileRecord,
    FilterConfig,
    TimeFrame,
    Transaction,
)
from .services import (
    build_category_tree,
    filter_transactions,
    resolve_date_range,
    resolve_filter_options,
)

__all__ = [
    "CategoryNode",
    "CategoryTree",
    "DateRange",
    "FileRecord",
    "FilterConfig",
    "TimeFrame",
    "Transaction",
    "DEFAULT_WEEK_START",
    "NONE_CATEGORY",
    "ROOT_NODE_ID",
    "build_category_tree",
    "filter_transactions",
    "resolve_date_range",
    "resolve_filter_options",
]
