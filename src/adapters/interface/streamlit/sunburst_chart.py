"""Category sunburst presentation logic for the Streamlit UI.

This module contains pure, testable transformations from a
``DrillDownView`` produced by ``GetDrillDownViewUseCase`` to a sunburst
model and Plotly figure.

The UI is responsible for:
    - computing the ``DrillDownView`` (no IO here),
    - persisting the navigation state in ``st.session_state``,
    - applying click events to update the state.

The chart always has the ``Total`` sentinel at its center. When zoomed,
the inner ring holds only the zoomed group and the outer ring its
children; otherwise every group and sub-category is shown.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from src.domain.models.category_tree import CategoryNode
from src.domain.models.drill_down import DrillDownView
from src.domain.models.navigation import NavigationState
from src.domain.services.navigation import click_node
from src.utils.decimal_utils import safe_percentage

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


@dataclass(frozen=True)
class SunburstModel:
    """Model used by the UI to render a sunburst with stable indices."""

    ids: list[str]
    labels: list[str]
    parents: list[str]
    values: list[Decimal]
    totals: list[Decimal]
    colors: list[str]
    depth_by_id: dict[str, int]
    key_by_index: dict[int, str]
    center_label: str

    def share_labels(self) -> list[str]:
        """Return each node's share of the root total as ``"12.5%"``."""
        root_total = self.totals[0] if self.totals else Decimal("0")
        return [
            f"{safe_percentage(total, root_total):.1f}%"
            for total in self.totals
        ]


def _append(
    model_lists: dict[str, list],
    node: CategoryNode,
    parent_id: str,
) -> None:
    model_lists["ids"].append(node.id)
    model_lists["labels"].append(node.name)
    model_lists["parents"].append(parent_id)
    model_lists["values"].append(node.value or Decimal("0"))
    model_lists["totals"].append(node.total)
    model_lists["colors"].append(node.color)


def build_sunburst_model(view: DrillDownView) -> SunburstModel:
    """Build a stable sunburst model from a drill-down view.

    Args:
        view: View produced by the drill-down use case.

    Returns:
        SunburstModel: Nodes, weights and metadata for click decoding.
    """
    root = view.tree.root
    model_lists: dict[str, list] = {
        "ids": [],
        "labels": [],
        "parents": [],
        "values": [],
        "totals": [],
        "colors": [],
    }
    _append(model_lists, root, "")

    display = view.display_node
    groups = (display,) if display is not root else root.children
    for group in groups:
        _append(model_lists, group, root.id)
        for child in group.children:
            _append(model_lists, child, group.id)

    depth_by_id = {root.id: 0}
    for group in groups:
        depth_by_id[group.id] = 1
        for child in group.children:
            depth_by_id[child.id] = 2

    return SunburstModel(
        ids=model_lists["ids"],
        labels=model_lists["labels"],
        parents=model_lists["parents"],
        values=model_lists["values"],
        totals=model_lists["totals"],
        colors=model_lists["colors"],
        depth_by_id=depth_by_id,
        key_by_index=dict(enumerate(model_lists["ids"])),
        center_label=display.name,
    )


def build_plotly_figure(model: SunburstModel) -> "go.Figure":
    """Build a Plotly sunburst figure from a sunburst model.

    Args:
        model: Precomputed sunburst model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Sunburst(
                ids=model.ids,
                labels=model.labels,
                parents=model.parents,
                values=[float(value) for value in model.values],
                branchvalues="remainder",
                marker=dict(
                    colors=model.colors,
                    line=dict(color="white", width=1),
                ),
                customdata=[
                    [f"{float(total):,.2f}", share]
                    for total, share in zip(
                        model.totals,
                        model.share_labels(),
                    )
                ],
                hovertemplate=(
                    "%{label}: $%{customdata[0]} (%{customdata[1]})"
                    "<extra></extra>"
                ),
                insidetextorientation="radial",
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=600,
    )
    return fig


def apply_click(
    *,
    state: NavigationState,
    view: DrillDownView,
    model: SunburstModel,
    node_index: int,
) -> NavigationState:
    """Return the navigation state after a click on a chart node.

    Args:
        state: Current navigation state.
        view: View the model was built from.
        model: Model containing click metadata.
        node_index: Clicked node index.

    Returns:
        NavigationState: Updated state; unchanged for unknown indices.
    """
    node_id = model.key_by_index.get(node_index)
    if node_id is None:
        return state
    depth = model.depth_by_id.get(node_id, 0)
    return click_node(state, view.tree, node_id, depth)


__all__ = [
    "SunburstModel",
    "build_sunburst_model",
    "build_plotly_figure",
    "apply_click",
]
