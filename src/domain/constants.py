"""Domain constants for the category drill-down and trend views."""

NONE_CATEGORY = "<none>"
CATEGORY_SEPARATOR = " - "

ROOT_NODE_ID = "Total"
ROOT_NODE_COLOR = "#ffffff"
GENERAL_NODE_NAME = "General"
GENERAL_NODE_FALLBACK_SUFFIX = " (direct)"
NODE_ID_SEPARATOR = "."

# Base hues for category groups, as (hue, saturation %, lightness %).
GROUP_PALETTE = (
    (217, 91, 50),
    (142, 71, 40),
    (32, 95, 50),
    (270, 60, 55),
    (340, 80, 50),
    (180, 80, 35),
    (45, 95, 45),
    (0, 75, 50),
    (195, 85, 45),
    (240, 50, 50),
    (80, 70, 40),
    (300, 60, 40),
    (20, 80, 45),
    (160, 60, 40),
    (200, 30, 40),
)
CHILD_LIGHTNESS_OFFSET = 10
CHILD_LIGHTNESS_CEILING = 92

TREND_PALETTE = (
    "#3b82f6",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#ec4899",
    "#14b8a6",
    "#eab308",
    "#ef4444",
    "#06b6d4",
    "#6366f1",
    "#84cc16",
    "#d946ef",
    "#f97316",
    "#10b981",
    "#64748b",
)

# date.weekday() numbering.
MONDAY = 0
SUNDAY = 6
DEFAULT_WEEK_START = SUNDAY

EMPTY_VIEW_MESSAGE = "No data for this period."


__all__ = [
    "NONE_CATEGORY",
    "CATEGORY_SEPARATOR",
    "ROOT_NODE_ID",
    "ROOT_NODE_COLOR",
    "GENERAL_NODE_NAME",
    "GENERAL_NODE_FALLBACK_SUFFIX",
    "NODE_ID_SEPARATOR",
    "GROUP_PALETTE",
    "CHILD_LIGHTNESS_OFFSET",
    "CHILD_LIGHTNESS_CEILING",
    "TREND_PALETTE",
    "MONDAY",
    "SUNDAY",
    "DEFAULT_WEEK_START",
    "EMPTY_VIEW_MESSAGE",
]
