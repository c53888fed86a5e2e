"""Build the two-level category tree behind the drill-down chart.

The build runs in two passes. Transactions are first accumulated into
ordered group buckets, then the buckets are finalized into frozen nodes
(sorted, colored) stored in an arena keyed by node id.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.constants import (
    GENERAL_NODE_FALLBACK_SUFFIX,
    GENERAL_NODE_NAME,
    NODE_ID_SEPARATOR,
    ROOT_NODE_COLOR,
    ROOT_NODE_ID,
)
from src.domain.models.category_tree import (
    CategoryNode,
    CategoryTree,
    empty_tree,
)
from src.domain.models.transactions import Transaction
from src.domain.services.colors import child_colors, group_color


@dataclass
class _SubBucket:
    name: str
    total: Decimal = Decimal("0")
    transactions: list[Transaction] = field(default_factory=list)


@dataclass
class _GroupBucket:
    name: str
    total: Decimal = Decimal("0")
    direct: Decimal = Decimal("0")
    transactions: list[Transaction] = field(default_factory=list)
    direct_transactions: list[Transaction] = field(default_factory=list)
    subs: dict[str, _SubBucket] = field(default_factory=dict)


def leaf_id(group: str, sub: str) -> str:
    return f"{group}{NODE_ID_SEPARATOR}{sub}"


def unique_id(candidate: str, used: set[str]) -> str:
    """Return ``candidate``, suffixed with `` (2)``, `` (3)``... if taken."""
    node_id = candidate
    counter = 2
    while node_id in used:
        node_id = f"{candidate} ({counter})"
        counter += 1
    return node_id


def _accumulate(transactions: Iterable[Transaction]) -> list[_GroupBucket]:
    buckets: dict[str, _GroupBucket] = {}
    for transaction in transactions:
        amount = transaction.absolute_amount
        if amount == 0:
            continue
        group = buckets.get(transaction.category_group)
        if group is None:
            group = _GroupBucket(name=transaction.category_group)
            buckets[group.name] = group
        group.total += amount
        group.transactions.append(transaction)
        if transaction.is_direct:
            group.direct += amount
            group.direct_transactions.append(transaction)
            continue
        sub = group.subs.get(transaction.category_sub)
        if sub is None:
            sub = _SubBucket(name=transaction.category_sub)
            group.subs[sub.name] = sub
        sub.total += amount
        sub.transactions.append(transaction)
    return list(buckets.values())


def _child_buckets(group: _GroupBucket) -> list[tuple[str, _SubBucket, bool]]:
    """Return ``(node_id, bucket, is_synthetic)`` for a group's children."""
    children = [
        (leaf_id(group.name, sub.name), sub, False)
        for sub in group.subs.values()
    ]
    if children and group.direct != 0:
        general_id = leaf_id(group.name, GENERAL_NODE_NAME)
        if GENERAL_NODE_NAME in group.subs:
            general_id += GENERAL_NODE_FALLBACK_SUFFIX
        general = _SubBucket(
            name=GENERAL_NODE_NAME,
            total=group.direct,
            transactions=list(group.direct_transactions),
        )
        children.append((general_id, general, True))
    return sorted(children, key=lambda child: child[1].total, reverse=True)


def build_category_tree(transactions: Iterable[Transaction]) -> CategoryTree:
    """Build the category tree and its color index.

    Args:
        transactions: Filtered transactions; zero amounts are skipped.

    Returns:
        CategoryTree: Root node ``Total`` with groups sorted by descending
        total, each group's children sorted the same way. Only childless
        nodes carry a chart ``value``.
    """
    groups = sorted(
        _accumulate(transactions),
        key=lambda bucket: bucket.total,
        reverse=True,
    )
    if not groups:
        return empty_tree(ROOT_NODE_COLOR)

    nodes: dict[str, CategoryNode] = {}
    color_index: dict[str, str] = {}
    group_nodes: list[CategoryNode] = []
    all_transactions: list[Transaction] = []
    # Group ids are group names; leaf ids yield on collision.
    used_ids = {ROOT_NODE_ID} | {group.name for group in groups}

    for index, group in enumerate(groups):
        child_entries = _child_buckets(group)
        shades = child_colors(index, len(child_entries))
        children: list[CategoryNode] = []
        for (candidate, bucket, synthetic), color in zip(child_entries, shades):
            node_id = unique_id(candidate, used_ids)
            used_ids.add(node_id)
            child = CategoryNode(
                id=node_id,
                name=bucket.name,
                total=bucket.total,
                value=bucket.total,
                color=color,
                depth=2,
                parent_id=group.name,
                transactions=tuple(bucket.transactions),
                is_synthetic=synthetic,
            )
            children.append(child)

        color = group_color(index)
        group_node = CategoryNode(
            id=group.name,
            name=group.name,
            total=group.total,
            value=None if children else group.total,
            color=color,
            depth=1,
            parent_id=ROOT_NODE_ID,
            transactions=tuple(group.transactions),
            children=tuple(children),
        )
        nodes[group_node.id] = group_node
        color_index[group_node.id] = color
        for child in children:
            nodes[child.id] = child
            color_index[child.id] = child.color
        group_nodes.append(group_node)
        all_transactions.extend(group.transactions)

    root = CategoryNode(
        id=ROOT_NODE_ID,
        name=ROOT_NODE_ID,
        total=sum((group.total for group in group_nodes), start=Decimal("0")),
        color=ROOT_NODE_COLOR,
        depth=0,
        transactions=tuple(all_transactions),
        children=tuple(group_nodes),
    )
    # The root sentinel wins over a group literally named "Total".
    arena = {root.id: root}
    arena.update(
        (node_id, node) for node_id, node in nodes.items()
        if node_id != root.id
    )
    return CategoryTree(root=root, nodes=arena, color_index=color_index)


def walk(node: CategoryNode) -> Iterable[CategoryNode]:
    """Yield ``node`` and its descendants depth-first."""
    yield node
    for child in node.children:
        yield from walk(child)


__all__ = ["build_category_tree", "leaf_id", "unique_id", "walk"]
