"""Drill navigation state machine for the category sunburst.

States hold node ids only. After every tree rebuild ``reconcile`` checks
those ids against the new tree and falls back to the root view when the
zoomed group disappeared.
"""

from src.domain.constants import ROOT_NODE_ID
from src.domain.models.category_tree import CategoryNode, CategoryTree
from src.domain.models.navigation import (
    LeafAtRoot,
    NavigationState,
    Reconciliation,
    RootView,
    ZoomedSelection,
    ZoomedView,
)


def missing_group_notice(group_id: str) -> str:
    return f'No transactions for "{group_id}" in the selected time frame.'


def resolve_selected_node(
    tree: CategoryTree,
    node_id: str | None,
) -> CategoryNode | None:
    """Resolve a node id against the tree.

    Search order: root sentinel, then groups, then sub-categories of any
    group. Unknown ids resolve to None.
    """
    if node_id is None:
        return None
    if node_id == tree.root.id:
        return tree.root
    for group in tree.groups:
        if group.id == node_id:
            return group
    for group in tree.groups:
        for child in group.children:
            if child.id == node_id:
                return child
    return None


def click_node(
    state: NavigationState,
    tree: CategoryTree,
    node_id: str,
    depth: int,
) -> NavigationState:
    """Apply a click on the node at ``depth`` relative to the current view.

    Args:
        state: Current navigation state.
        tree: Tree currently displayed.
        node_id: Id of the clicked node.
        depth: 0 for the center, 1 for the inner ring, 2+ for leaves.

    Returns:
        NavigationState: New state; unchanged for unknown nodes.
    """
    if depth <= 0 or node_id == ROOT_NODE_ID:
        return RootView()

    zoomed_group_id = state.zoomed_group_id
    if depth == 1:
        if zoomed_group_id is not None:
            return ZoomedView(group_id=zoomed_group_id)
        node = resolve_selected_node(tree, node_id)
        if node is None or node.depth != 1:
            return state
        if not node.is_leaf:
            return ZoomedView(group_id=node.id)
        return LeafAtRoot(leaf_id=node.id)

    node = resolve_selected_node(tree, node_id)
    if node is None or node.depth != 2:
        return state
    if zoomed_group_id is not None:
        return ZoomedSelection(group_id=node.parent_id, leaf_id=node.id)
    return LeafAtRoot(leaf_id=node.id)


def go_back(state: NavigationState) -> NavigationState:
    """Return to the root view from any state."""
    _ = state
    return RootView()


def reconcile(state: NavigationState, tree: CategoryTree) -> Reconciliation:
    """Validate ``state`` against a freshly rebuilt tree.

    A zoomed group missing from the tree resets to the root view with a
    notice. A selected leaf missing from the tree is dropped silently.
    """
    zoomed_group_id = state.zoomed_group_id
    if zoomed_group_id is not None and not tree.has_group(zoomed_group_id):
        return Reconciliation(
            state=RootView(),
            notice=missing_group_notice(zoomed_group_id),
        )
    if isinstance(state, ZoomedSelection):
        if resolve_selected_node(tree, state.leaf_id) is None:
            return Reconciliation(state=ZoomedView(group_id=state.group_id))
        return Reconciliation(state=state)
    if isinstance(state, LeafAtRoot):
        if resolve_selected_node(tree, state.leaf_id) is None:
            return Reconciliation(state=RootView())
    return Reconciliation(state=state)


def display_node(state: NavigationState, tree: CategoryTree) -> CategoryNode:
    """Return the node shown at the center of the chart."""
    group = resolve_selected_node(tree, state.zoomed_group_id)
    return group if group is not None else tree.root


def breadcrumb(state: NavigationState, tree: CategoryTree) -> list[str]:
    """Return display names from the root down to the selection."""
    node = resolve_selected_node(tree, state.selected_node_id)
    if node is None:
        return [tree.root.name]
    trail: list[str] = []
    current: CategoryNode | None = node
    while current is not None:
        trail.append(current.name)
        if current is tree.root:
            break
        current = tree.find(current.parent_id)
    return list(reversed(trail))


__all__ = [
    "click_node",
    "go_back",
    "reconcile",
    "resolve_selected_node",
    "display_node",
    "breadcrumb",
    "missing_group_notice",
]
