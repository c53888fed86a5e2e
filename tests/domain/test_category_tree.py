"""Tests for the category tree builder and its colors."""

from datetime import date
from decimal import Decimal

from src.domain.constants import ROOT_NODE_COLOR, ROOT_NODE_ID
from src.domain.models.transactions import Transaction
from src.domain.services.category_tree import build_category_tree, walk
from src.domain.services.colors import (
    category_color,
    child_colors,
    child_lightness,
    group_color,
    hsl,
)


def _txn(txn_id: str, category: str, amount: str) -> Transaction:
    return Transaction.from_category(
        id=txn_id,
        date=date(2024, 3, 1),
        category=category,
        amount=Decimal(amount),
    )


def test_direct_amounts_become_general_child() -> None:
    """A group with subs and direct amounts gets a General child."""
    tree = build_category_tree(
        [
            _txn("1", "Food", "-20"),
            _txn("2", "Food - Groceries", "-30"),
        ]
    )

    (food,) = tree.groups
    assert food.total == Decimal("50")
    assert food.value is None
    assert [child.name for child in food.children] == ["Groceries", "General"]
    assert [child.total for child in food.children] == [
        Decimal("30"),
        Decimal("20"),
    ]
    general = food.children[1]
    assert general.id == "Food.General"
    assert general.is_synthetic
    assert [t.id for t in general.transactions] == ["1"]


def test_empty_input_yields_empty_root() -> None:
    """No transactions produce a zero-total root without children."""
    tree = build_category_tree([])

    assert tree.is_empty
    assert tree.root.total == Decimal("0")
    assert tree.root.color == ROOT_NODE_COLOR
    assert tree.nodes == {ROOT_NODE_ID: tree.root}


def test_totals_use_absolute_amounts_and_sum_up() -> None:
    """Node totals use absolute amounts and add up to the parent."""
    tree = build_category_tree(
        [
            _txn("1", "Food - Groceries", "-30"),
            _txn("2", "Income - Salary", "1000"),
            _txn("3", "Food - Dining", "-12.50"),
            _txn("4", "Transport", "-40"),
        ]
    )

    assert tree.root.total == Decimal("1082.50")
    assert tree.group_ids() == ["Income", "Transport", "Food"]
    for node in walk(tree.root):
        if node.children:
            assert node.total == sum(
                (child.total for child in node.children),
                start=Decimal("0"),
            )


def test_childless_groups_carry_value() -> None:
    """Only childless nodes carry a chart value."""
    tree = build_category_tree([_txn("1", "Transport", "-40")])

    (transport,) = tree.groups
    assert transport.children == ()
    assert transport.value == Decimal("40")
    assert tree.root.value is None


def test_zero_amounts_are_skipped() -> None:
    """Zero amounts contribute no node."""
    tree = build_category_tree([_txn("1", "Misc", "0")])

    assert tree.is_empty


def test_group_with_only_direct_amounts_has_no_general_child() -> None:
    """A General child is only added next to real subs."""
    tree = build_category_tree(
        [_txn("1", "Rent", "-900"), _txn("2", "Rent", "-100")]
    )

    (rent,) = tree.groups
    assert rent.children == ()
    assert rent.total == Decimal("1000")


def test_real_general_sub_does_not_collide_with_synthetic_node() -> None:
    """A real General sub keeps its id; the direct node gets a suffix."""
    tree = build_category_tree(
        [
            _txn("1", "Shopping - General", "-10"),
            _txn("2", "Shopping", "-5"),
        ]
    )

    ids = [child.id for child in tree.groups[0].children]
    assert ids == ["Shopping.General", "Shopping.General (direct)"]
    assert len(set(tree.nodes)) == len(list(walk(tree.root)))


def test_node_arena_and_color_index_cover_tree() -> None:
    """Every non-root node is indexed with its color."""
    tree = build_category_tree(
        [
            _txn("1", "Food - Groceries", "-30"),
            _txn("2", "Food - Dining", "-10"),
            _txn("3", "Transport", "-5"),
        ]
    )

    assert list(tree.nodes)[0] == ROOT_NODE_ID
    assert tree.find("Food.Dining").parent_id == "Food"
    assert tree.parent_of(tree.find("Food.Dining")).id == "Food"
    assert tree.color_index["Food"] == group_color(0)
    assert tree.color_index["Transport"] == group_color(1)
    assert tree.color_index["Food.Groceries"] == child_colors(0, 2)[0]
    assert tree.find("missing") is None


def test_root_collects_all_transactions() -> None:
    """The root's transaction list holds every contributing transaction."""
    tree = build_category_tree(
        [_txn("1", "A", "-1"), _txn("2", "B - C", "-2")]
    )

    assert sorted(t.id for t in tree.root.transactions) == ["1", "2"]


def test_hsl_formatting() -> None:
    """Whole numbers render without decimals."""
    assert hsl(217, 91, 50) == "hsl(217, 91%, 50%)"
    assert hsl(217, 91, 62.5) == "hsl(217, 91%, 62.5%)"


def test_child_lightness_spreads_to_ceiling() -> None:
    """Children spread from the parent lightness plus ten up to 92."""
    assert child_lightness(50, 0, 1) == 60
    assert child_lightness(50, 0, 3) == 60
    assert child_lightness(50, 2, 3) == 92
    assert child_colors(0, 2) == [
        "hsl(217, 91%, 60%)",
        "hsl(217, 91%, 92%)",
    ]


def test_group_palette_cycles() -> None:
    """Group colors cycle through the palette."""
    assert group_color(0) == group_color(15)
    assert group_color(0) != group_color(1)


def test_category_color_is_stable() -> None:
    """The same name always maps to the same hex color."""
    assert category_color("Food") == category_color("Food")
    assert category_color("Food").startswith("#")


def test_equal_total_groups_keep_first_seen_order() -> None:
    """Ties between groups and between children keep first-seen order."""
    tree = build_category_tree(
        [
            _txn("1", "B", "-10"),
            _txn("2", "A", "-10"),
            _txn("3", "Food - Zucchini", "-15"),
            _txn("4", "Food - Apples", "-15"),
        ]
    )

    assert tree.group_ids() == ["Food", "B", "A"]
    assert [child.name for child in tree.find("Food").children] == [
        "Zucchini",
        "Apples",
    ]


def test_leaf_transactions_match_their_category() -> None:
    """Each leaf holds exactly the transactions of its group and sub."""
    source = [
        _txn("1", "Food - Groceries", "-30"),
        _txn("2", "Food - Dining", "-12"),
        _txn("3", "Food - Groceries", "-8"),
        _txn("4", "Food", "-5"),
        _txn("5", "Travel - Dining", "-20"),
    ]

    tree = build_category_tree(source)

    for node in walk(tree.root):
        if node.depth != 2:
            continue
        expected = {
            t.id
            for t in source
            if t.category_group == node.parent_id
            and (
                t.is_direct
                if node.is_synthetic
                else t.category_sub == node.name
            )
        }
        assert {t.id for t in node.transactions} == expected
        assert node.is_leaf


def test_colliding_leaf_ids_are_made_unique() -> None:
    """Dotted names that produce the same leaf id stay distinct nodes."""
    tree = build_category_tree(
        [
            _txn("1", "A - B.C", "-10"),
            _txn("2", "A.B - C", "-5"),
        ]
    )

    ids = [node.id for node in walk(tree.root)]
    assert len(ids) == len(set(ids))
    assert len(tree.nodes) == len(ids)
    assert tree.find("A.B.C").parent_id == "A"
    assert tree.find("A.B.C (2)").parent_id == "A.B"


def test_leaf_id_never_shadows_group_name() -> None:
    """A leaf id equal to another group's name gets a suffix."""
    tree = build_category_tree(
        [
            _txn("1", "A - B", "-10"),
            _txn("2", "A.B", "-50"),
        ]
    )

    assert tree.find("A.B").depth == 1
    assert tree.find("A.B (2)").parent_id == "A"
