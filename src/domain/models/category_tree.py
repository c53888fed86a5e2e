"""Domain models for the hierarchical category tree."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.constants import ROOT_NODE_ID
from src.domain.models.transactions import Transaction


@dataclass(frozen=True)
class CategoryNode:
    """Node of the two-level category tree.

    Attributes:
        id: ``Total`` for the root, the group name for a group, and
            ``"{group}.{sub}"`` for a leaf.
        name: Display label.
        total: Sum of absolute amounts in or under the node.
        color: CSS color assigned at build time.
        depth: 0 for the root, 1 for groups, 2 for sub-categories.
        value: Chart weight; only set on nodes without children.
        parent_id: Id of the parent node, None for the root.
        transactions: Transactions contributing to the node.
        children: Child nodes sorted by descending total.
        is_synthetic: True for the ``General`` node holding direct amounts.
    """

    id: str
    name: str
    total: Decimal
    color: str
    depth: int
    value: Decimal | None = None
    parent_id: str | None = None
    transactions: tuple[Transaction, ...] = ()
    children: tuple["CategoryNode", ...] = ()
    is_synthetic: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class CategoryTree:
    """Finalized category tree plus its node arena and color index."""

    root: CategoryNode
    nodes: dict[str, CategoryNode] = field(default_factory=dict)
    color_index: dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.root.children

    @property
    def groups(self) -> tuple[CategoryNode, ...]:
        return self.root.children

    def find(self, node_id: str | None) -> CategoryNode | None:
        """Return the node with ``node_id`` or None."""
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    def group_ids(self) -> list[str]:
        return [group.id for group in self.root.children]

    def has_group(self, group_id: str | None) -> bool:
        return any(group.id == group_id for group in self.root.children)

    def parent_of(self, node: CategoryNode) -> CategoryNode | None:
        return self.find(node.parent_id)


def empty_tree(color: str) -> CategoryTree:
    """Return a tree with a zero-total root and no children."""
    root = CategoryNode(
        id=ROOT_NODE_ID,
        name=ROOT_NODE_ID,
        total=Decimal("0"),
        color=color,
        depth=0,
    )
    return CategoryTree(root=root, nodes={root.id: root}, color_index={})


__all__ = ["CategoryNode", "CategoryTree", "empty_tree"]
