"""Navigation states for the category drill-down view.

The drill-down view is always in exactly one of four states. Each state
holds node ids only; nodes are re-resolved against the latest tree.
"""

from dataclasses import dataclass
from typing import Literal, Union


NavigationKind = Literal["ROOT", "GROUP_SELECTED", "LEAF_SELECTED"]


@dataclass(frozen=True)
class RootView:
    """Full tree displayed, nothing selected."""

    @property
    def zoomed_group_id(self) -> str | None:
        return None

    @property
    def selected_node_id(self) -> str | None:
        return None

    @property
    def kind(self) -> NavigationKind:
        return "ROOT"


@dataclass(frozen=True)
class ZoomedView:
    """Zoomed into a group; the group itself is the selection."""

    group_id: str

    @property
    def zoomed_group_id(self) -> str | None:
        return self.group_id

    @property
    def selected_node_id(self) -> str | None:
        return self.group_id

    @property
    def kind(self) -> NavigationKind:
        return "GROUP_SELECTED"


@dataclass(frozen=True)
class ZoomedSelection:
    """Zoomed into a group with one of its sub-categories selected."""

    group_id: str
    leaf_id: str

    @property
    def zoomed_group_id(self) -> str | None:
        return self.group_id

    @property
    def selected_node_id(self) -> str | None:
        return self.leaf_id

    @property
    def kind(self) -> NavigationKind:
        return "LEAF_SELECTED"


@dataclass(frozen=True)
class LeafAtRoot:
    """Not zoomed, a leaf (or childless group) selected."""

    leaf_id: str

    @property
    def zoomed_group_id(self) -> str | None:
        return None

    @property
    def selected_node_id(self) -> str | None:
        return self.leaf_id

    @property
    def kind(self) -> NavigationKind:
        return "LEAF_SELECTED"


NavigationState = Union[RootView, ZoomedView, ZoomedSelection, LeafAtRoot]


@dataclass(frozen=True)
class Reconciliation:
    """Result of validating a navigation state against a rebuilt tree."""

    state: NavigationState
    notice: str | None = None


__all__ = [
    "NavigationKind",
    "NavigationState",
    "RootView",
    "ZoomedView",
    "ZoomedSelection",
    "LeafAtRoot",
    "Reconciliation",
]
