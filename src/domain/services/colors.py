"""Deterministic colors for category groups and their children."""

from src.domain.constants import (
    CHILD_LIGHTNESS_CEILING,
    CHILD_LIGHTNESS_OFFSET,
    GROUP_PALETTE,
    TREND_PALETTE,
)


def _format_number(value: float) -> str:
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:g}"


def hsl(hue: float, saturation: float, lightness: float) -> str:
    """Return a CSS ``hsl()`` color string."""
    return (
        f"hsl({_format_number(hue)}, {_format_number(saturation)}%, "
        f"{_format_number(lightness)}%)"
    )


def group_base(index: int) -> tuple[int, int, int]:
    """Return the palette entry for the ``index``-th group (cyclic)."""
    return GROUP_PALETTE[index % len(GROUP_PALETTE)]


def group_color(index: int) -> str:
    return hsl(*group_base(index))


def child_lightness(base_lightness: float, position: int, count: int) -> float:
    """Lightness of the ``position``-th of ``count`` children.

    Children spread linearly from slightly lighter than the parent up to
    a near-white ceiling; a single child only gets the first step.
    """
    lowest = base_lightness + CHILD_LIGHTNESS_OFFSET
    if count <= 1:
        return lowest
    step = (CHILD_LIGHTNESS_CEILING - lowest) / (count - 1)
    return lowest + position * step


def child_colors(group_index: int, count: int) -> list[str]:
    """Return ``count`` shades of the group's hue, darkest first."""
    hue, saturation, lightness = group_base(group_index)
    return [
        hsl(hue, saturation, child_lightness(lightness, position, count))
        for position in range(count)
    ]


def _string_hash(value: str) -> int:
    # 32-bit signed rolling hash (hash * 31 + code point).
    result = 0
    for char in value:
        result = (ord(char) + ((result << 5) - result)) & 0xFFFFFFFF
    if result >= 0x80000000:
        result -= 0x100000000
    return result


def category_color(name: str) -> str:
    """Return a stable hex color for a category name."""
    return TREND_PALETTE[abs(_string_hash(name)) % len(TREND_PALETTE)]


__all__ = [
    "hsl",
    "group_base",
    "group_color",
    "child_lightness",
    "child_colors",
    "category_color",
]
