"""Resolve the hierarchical category exclusion list.

The exclusion list stores bare group names and bare sub-category names,
the same names the transaction filter checks. Sub-categories inherit the
exclusion of their group and are locked while it applies. Groups that
only ever appear as a prefix get a virtual header that toggles all of
its children at once and is never stored itself.

Sub-category keys are bare names, so excluding ``Other`` under one group
also excludes every other group's ``Other``.
"""

from collections.abc import Iterable, Sequence

from src.domain.constants import CATEGORY_SEPARATOR, NONE_CATEGORY
from src.domain.models.filter_options import FilterOption
from src.domain.models.transactions import Transaction, split_category


def option_sort_key(name: str) -> tuple[bool, str]:
    """Sort names case-insensitively with ``<none>`` always last."""
    return (name == NONE_CATEGORY, name.casefold())


def collect_category_labels(transactions: Iterable[Transaction]) -> list[str]:
    """Return distinct raw categories in first-seen order."""
    seen: dict[str, None] = {}
    for transaction in transactions:
        seen.setdefault(transaction.category, None)
    return list(seen)


def _index_labels(
    labels: Iterable[str],
) -> tuple[list[str], set[str], dict[str, list[str]]]:
    groups: dict[str, None] = {}
    bare_groups: set[str] = set()
    subs_by_group: dict[str, dict[str, None]] = {}
    for label in labels:
        group, sub = split_category(label)
        groups.setdefault(group, None)
        subs = subs_by_group.setdefault(group, {})
        if CATEGORY_SEPARATOR in label and sub != group:
            subs.setdefault(sub, None)
        else:
            bare_groups.add(group)
    ordered_subs = {
        group: sorted(subs, key=option_sort_key)
        for group, subs in subs_by_group.items()
    }
    return sorted(groups, key=option_sort_key), bare_groups, ordered_subs


def resolve_filter_options(
    labels: Iterable[str],
    excluded: Iterable[str] = (),
) -> list[FilterOption]:
    """Build the rows of the exclusion list with their effective state.

    Args:
        labels: Raw categories seen in the data (``"Group"`` or
            ``"Group - Sub"``).
        excluded: Explicit exclusion list.

    Returns:
        list[FilterOption]: Header rows each followed by their items.
    """
    explicit = set(excluded)
    groups, bare_groups, subs_by_group = _index_labels(labels)
    options: list[FilterOption] = []
    for group in groups:
        child_keys = tuple(subs_by_group.get(group, ()))
        group_excluded = group in explicit
        if group in bare_groups:
            options.append(
                FilterOption(
                    key=group,
                    label=group,
                    kind="HEADER",
                    group=group,
                    excluded=group_excluded,
                    child_keys=child_keys,
                )
            )
        else:
            options.append(
                FilterOption(
                    key=group,
                    label=group,
                    kind="VIRTUAL_HEADER",
                    group=group,
                    excluded=all(key in explicit for key in child_keys),
                    child_keys=child_keys,
                )
            )
        for sub in child_keys:
            options.append(
                FilterOption(
                    key=sub,
                    label=sub,
                    kind="ITEM",
                    group=group,
                    excluded=sub in explicit or group_excluded,
                    locked=group_excluded,
                )
            )
    return options


def toggle_option(
    option: FilterOption,
    excluded: Sequence[str],
) -> tuple[str, ...]:
    """Return the exclusion list after toggling ``option``.

    Locked items are left unchanged. Virtual headers add or remove all of
    their children together.
    """
    current = list(dict.fromkeys(excluded))
    if option.locked:
        return tuple(current)
    if option.kind == "VIRTUAL_HEADER":
        if option.excluded:
            children = set(option.child_keys)
            return tuple(key for key in current if key not in children)
        additions = [key for key in option.child_keys if key not in current]
        return tuple(current + additions)
    if option.key in current:
        return tuple(key for key in current if key != option.key)
    return tuple(current + [option.key])


def clear_exclusions() -> tuple[str, ...]:
    """Return an empty exclusion list."""
    return ()


__all__ = [
    "collect_category_labels",
    "resolve_filter_options",
    "toggle_option",
    "clear_exclusions",
    "option_sort_key",
]
