"""Tests for the hierarchical category exclusion list."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.models.filters import DateRange
from src.domain.models.transactions import Transaction
from src.domain.services.category_exclusion import (
    clear_exclusions,
    collect_category_labels,
    resolve_filter_options,
    toggle_option,
)
from src.domain.services.transaction_filter import filter_transactions


LABELS = [
    "Food",
    "Food - Groceries",
    "Food - Takeout",
    "Travel - Flights",
    "Travel - Hotels",
    "<none>",
    "auto",
]


def _by_key(options, kind=None):
    return {
        (option.kind, option.key): option
        for option in options
        if kind is None or option.kind == kind
    }


def test_headers_sorted_with_none_last() -> None:
    """Groups sort case-insensitively and ``<none>`` comes last."""
    options = resolve_filter_options(LABELS)
    headers = [option.key for option in options if option.is_header]

    assert headers == ["auto", "Food", "Travel", "<none>"]


def test_none_category_is_its_own_bare_group() -> None:
    """``<none>`` appears as a header without children."""
    options = resolve_filter_options(["<none>"])

    assert len(options) == 1
    assert options[0].kind == "HEADER"
    assert options[0].child_keys == ()


def test_bare_and_prefix_only_groups_get_different_headers() -> None:
    """A group seen only as a prefix gets a virtual header."""
    options = _by_key(resolve_filter_options(LABELS))

    assert options[("HEADER", "Food")].child_keys == ("Groceries", "Takeout")
    assert options[("VIRTUAL_HEADER", "Travel")].child_keys == (
        "Flights",
        "Hotels",
    )


def test_excluded_group_locks_its_items() -> None:
    """Items inherit and lock the exclusion of their group."""
    options = _by_key(resolve_filter_options(LABELS, ["Food"]), "ITEM")

    groceries = options[("ITEM", "Groceries")]
    assert groceries.excluded
    assert groceries.locked
    assert toggle_option(groceries, ["Food"]) == ("Food",)


def test_virtual_header_excluded_only_when_all_children_are() -> None:
    """A virtual header reflects its children's explicit state."""
    partial = _by_key(resolve_filter_options(LABELS, ["Flights"]))
    full = _by_key(resolve_filter_options(LABELS, ["Flights", "Hotels"]))

    assert not partial[("VIRTUAL_HEADER", "Travel")].excluded
    assert full[("VIRTUAL_HEADER", "Travel")].excluded
    assert not full[("ITEM", "Flights")].locked


def test_toggle_virtual_header_adds_and_removes_children() -> None:
    """Toggling a virtual header acts on all of its children."""
    header = _by_key(resolve_filter_options(LABELS, ["Flights"]))[
        ("VIRTUAL_HEADER", "Travel")
    ]

    added = toggle_option(header, ["Flights"])
    assert added == ("Flights", "Hotels")

    header = _by_key(resolve_filter_options(LABELS, added))[
        ("VIRTUAL_HEADER", "Travel")
    ]
    assert toggle_option(header, ["Food", *added]) == ("Food",)


def test_toggle_plain_options() -> None:
    """Headers and items toggle their own key."""
    options = _by_key(resolve_filter_options(LABELS))

    excluded = toggle_option(options[("HEADER", "Food")], [])
    assert excluded == ("Food",)
    assert toggle_option(options[("ITEM", "Hotels")], excluded) == (
        "Food",
        "Hotels",
    )
    assert toggle_option(options[("ITEM", "Hotels")], ["Hotels"]) == ()


def test_clear_exclusions_is_empty() -> None:
    assert clear_exclusions() == ()


def test_excluding_group_hides_all_its_transactions() -> None:
    """Excluding a group drops bare and prefixed categories alike."""
    transactions = [
        Transaction.from_category(
            id=str(index),
            date=date(2024, 3, 1),
            category=category,
            amount=Decimal("-1"),
        )
        for index, category in enumerate(
            ["Food", "Food - Groceries", "Food - Takeout", "Rent"]
        )
    ]
    window = DateRange(start=datetime(2024, 1, 1), end=datetime(2024, 12, 31))

    result = filter_transactions(transactions, window, {"Food"})

    assert [t.category for t in result] == ["Rent"]
    assert collect_category_labels(transactions) == [
        "Food",
        "Food - Groceries",
        "Food - Takeout",
        "Rent",
    ]


def test_sub_name_exclusion_applies_across_groups() -> None:
    """A bare sub name excludes that sub in every group sharing it."""
    labels = ["Food - Other", "Food - Groceries", "Travel - Other"]
    options = _by_key(resolve_filter_options(labels))
    food_other = next(
        option
        for option in resolve_filter_options(labels)
        if option.kind == "ITEM" and option.group == "Food"
        and option.key == "Other"
    )

    excluded = toggle_option(food_other, [])
    resolved = resolve_filter_options(labels, excluded)
    travel_items = [
        option for option in resolved
        if option.kind == "ITEM" and option.group == "Travel"
    ]
    travel_header = _by_key(resolved)[("VIRTUAL_HEADER", "Travel")]

    assert excluded == ("Other",)
    assert not options[("VIRTUAL_HEADER", "Travel")].excluded
    assert [(o.key, o.excluded, o.locked) for o in travel_items] == [
        ("Other", True, False),
    ]
    assert travel_header.excluded
