"""Streamlit dashboard entry point."""

from collections.abc import Collection, Sequence
from datetime import date
from decimal import Decimal
import io

import streamlit as st
import altair as alt

from src.application.use_cases.get_category_filter_options import (
    GetCategoryFilterOptionsUseCase,
)
from src.application.use_cases.manage_files import (
    ClearFilesUseCase,
    DeleteFileUseCase,
    ImportCsvFileUseCase,
    ListFilesUseCase,
    LoadFileUseCase,
)
from src.adapters.interface.streamlit.sunburst_chart import (
    SunburstModel,
    apply_click,
    build_plotly_figure,
    build_sunburst_model,
)
from src.domain.constants import EMPTY_VIEW_MESSAGE
from src.domain.models.drill_down import DrillDownView
from src.domain.models.filters import FilterConfig, TimeFrame
from src.domain.models.navigation import RootView
from src.domain.models.transactions import FileRecord, Transaction
from src.domain.models.trend import TrendSeries
from src.domain.services.category_exclusion import (
    clear_exclusions,
    toggle_option,
)
from src.domain.services.navigation import go_back
from src.infrastructure.container import (
    build_drill_down_use_case,
    build_file_repository,
    build_transaction_parser,
    build_trend_use_case,
)
from src.infrastructure.csv_transactions import CsvImportError
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import VisualizerSettings


ACTIVE_FILE_KEY = "active_file_id"
NAVIGATION_KEY = "navigation"
EXCLUDED_KEY = "excluded_categories"
HIDDEN_GROUPS_KEY = "trend_hidden_groups"

DRILL_VIEW = "Category Drill-Down"
TREND_VIEW = "Trend Analysis"


def _load_settings() -> VisualizerSettings:
    return VisualizerSettings.from_env()


def _fetch_files() -> list[FileRecord]:
    """Fetch stored files from the local store."""
    use_case = ListFilesUseCase(build_file_repository())
    return use_case.execute()


def _fetch_file(file_id: str) -> FileRecord | None:
    """Fetch one stored file with its transactions."""
    use_case = LoadFileUseCase(build_file_repository())
    return use_case.execute(file_id)


@st.cache_data(show_spinner=False)
def _load_file(file_id: str) -> FileRecord | None:
    """Cached wrapper around _fetch_file for Streamlit sessions."""
    return _fetch_file(file_id)


def _format_currency(value: Decimal) -> str:
    """Format amounts for display, e.g. ``$1,234.56``."""
    return f"${abs(value):,.2f}"


def _transaction_rows(
    transactions: Sequence[Transaction],
) -> list[dict[str, str]]:
    """Rows for the transaction detail table."""
    return [
        {
            "Date": transaction.date.isoformat(),
            "Description": transaction.description,
            "Category": transaction.category,
            "Account": transaction.account,
            "Amount": _format_currency(transaction.amount),
            "Type": "Income" if transaction.is_income else "Expense",
        }
        for transaction in transactions
    ]


def _visible_groups(
    series: TrendSeries,
    hidden: Collection[str] = (),
) -> list[str]:
    return [group for group in series.groups if group not in hidden]


def _trend_chart_data(
    series: TrendSeries,
    hidden: Collection[str] = (),
) -> list[dict[str, str | float]]:
    """Flatten a trend series into Altair-ready records.

    Args:
        series: Bucketed totals per group.
        hidden: Groups left out of the chart.
    """
    groups = _visible_groups(series, hidden)
    data: list[dict[str, str | float]] = []
    for point in series.points:
        for group in groups:
            amount = point.totals_by_group.get(group, Decimal("0"))
            data.append(
                {
                    "bucket": point.bucket.isoformat(),
                    "label": point.label,
                    "group": group,
                    "amount": float(amount),
                    "amount_label": _format_currency(amount),
                }
            )
    return data


def _build_trend_chart(
    series: TrendSeries,
    chart_type: str,
    hidden: Collection[str] = (),
):
    """Return a stacked bar or line chart of the visible groups."""
    labels = [point.label for point in series.points]
    groups = _visible_groups(series, hidden)
    base = alt.Chart(alt.Data(values=_trend_chart_data(series, hidden)))
    mark = (
        base.mark_line(point=True, strokeWidth=3)
        if chart_type == "Lines"
        else base.mark_bar()
    )
    return mark.encode(
        x=alt.X("label:N", sort=labels, title=None),
        y=alt.Y("amount:Q", title="Amount ($)", stack=chart_type != "Lines"),
        color=alt.Color(
            "group:N",
            scale=alt.Scale(
                domain=groups,
                range=[series.colors[group] for group in groups],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("group:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(height=400)


def _import_upload(uploaded_file) -> FileRecord | None:
    """Import an uploaded CSV into the local store."""
    use_case = ImportCsvFileUseCase(
        build_file_repository(),
        build_transaction_parser(),
    )
    content = uploaded_file.getvalue().decode("utf-8-sig")
    try:
        return use_case.execute(uploaded_file.name, io.StringIO(content))
    except CsvImportError as exc:
        get_app_logger().error(f"Parse error for {uploaded_file.name}: {exc}")
        st.error("Error parsing file. Check format.")
        return None


def _open_file(file_id: str | None) -> None:
    st.session_state[ACTIVE_FILE_KEY] = file_id
    st.session_state[NAVIGATION_KEY] = RootView()
    st.session_state[EXCLUDED_KEY] = clear_exclusions()


def _render_file_library(files: Sequence[FileRecord]) -> None:
    """Render the upload area and the import history."""
    st.subheader("Import CSV")
    uploaded_file = st.file_uploader("Click to import CSV", type=["csv"])
    if uploaded_file is not None and st.button("Import"):
        record = _import_upload(uploaded_file)
        if record is not None:
            _open_file(record.id)
            st.rerun()

    st.subheader("Previous Imports")
    if not files:
        st.info("No files stored locally.")
        return

    repository = build_file_repository()
    for record in files:
        name_col, open_col, delete_col = st.columns([4, 1, 1])
        name_col.write(
            f"**{record.file_name}** · "
            f"{record.upload_date:%Y-%m-%d} · {record.row_count} txns"
        )
        if open_col.button("Open", key=f"open:{record.id}"):
            _open_file(record.id)
            st.rerun()
        if delete_col.button("Delete", key=f"delete:{record.id}"):
            DeleteFileUseCase(repository).execute(record.id)
            _load_file.clear()
            st.rerun()

    confirm = st.checkbox("I understand deleting all files cannot be undone")
    if st.button("Delete All", disabled=not confirm):
        ClearFilesUseCase(repository).execute()
        _load_file.clear()
        st.rerun()


def _render_exclusions(transactions: Sequence[Transaction]) -> tuple[str, ...]:
    """Render the category exclusion list and return the explicit list."""
    excluded = tuple(st.session_state.get(EXCLUDED_KEY, ()))
    options = GetCategoryFilterOptionsUseCase().execute(
        transactions,
        excluded,
    )
    with st.sidebar.expander(f"Exclude Categories ({len(excluded)})"):
        if excluded and st.button("Clear"):
            st.session_state[EXCLUDED_KEY] = clear_exclusions()
            st.rerun()
        for option in options:
            label = option.label if option.is_header else f"↳ {option.label}"
            checked = st.checkbox(
                label,
                value=option.excluded,
                disabled=option.locked,
                key=f"exclude:{option.kind}:{option.group}:{option.key}",
            )
            if checked != option.excluded:
                st.session_state[EXCLUDED_KEY] = toggle_option(
                    option,
                    excluded,
                )
                st.rerun()
    return excluded


def _render_filters(
    transactions: Sequence[Transaction],
    settings: VisualizerSettings,
) -> FilterConfig:
    """Render the sidebar filters and return the active configuration."""
    frames = list(TimeFrame)
    time_frame = st.sidebar.selectbox(
        "Time Frame",
        frames,
        index=frames.index(settings.default_time_frame),
        format_func=lambda frame: frame.value,
    )
    custom_start: date | None = None
    custom_end: date | None = None
    if time_frame is TimeFrame.CUSTOM:
        custom_start = st.sidebar.date_input("From", value=None)
        custom_end = st.sidebar.date_input("To", value=None)
    show_income = st.sidebar.checkbox("Show income", value=True)
    show_expense = st.sidebar.checkbox("Show expenses", value=True)
    excluded = _render_exclusions(transactions)
    return FilterConfig(
        time_frame=time_frame,
        custom_start=custom_start,
        custom_end=custom_end,
        excluded_categories=frozenset(excluded),
        show_income=show_income,
        show_expense=show_expense,
    )


def _render_selection(view: DrillDownView) -> None:
    """Render the transaction table of the selected node."""
    node = view.selected_node
    if node is None or not view.transactions:
        st.caption("Select a category to view transactions")
        return
    st.subheader(
        f"Details: {' › '.join(view.breadcrumb[1:]) or node.name} "
        f"({_format_currency(node.total)})"
    )
    st.caption(f"{len(view.transactions)} transactions found")
    st.dataframe(
        _transaction_rows(view.transactions),
        use_container_width=True,
        hide_index=True,
    )


def _ring_label(model: SunburstModel, index: int, node_id: str) -> str:
    """Label a chart node button; outer ring labels name their group."""
    label = model.labels[index]
    if model.depth_by_id[node_id] == 2:
        return f"{model.parents[index]} › {label}"
    return label


def _render_drill_down(
    transactions: Sequence[Transaction],
    config: FilterConfig,
    settings: VisualizerSettings,
) -> None:
    """Render the sunburst, its navigation controls and the detail table."""
    use_case = build_drill_down_use_case(settings)
    state = st.session_state.get(NAVIGATION_KEY, RootView())
    view = use_case.execute(transactions, config, state)
    st.session_state[NAVIGATION_KEY] = view.state
    if view.notice:
        st.info(view.notice)
    if view.empty_message:
        st.info(view.empty_message)
        return

    model = build_sunburst_model(view)
    st.caption(" › ".join(view.breadcrumb))
    st.plotly_chart(build_plotly_figure(model), use_container_width=True)

    if view.state.kind != "ROOT" and st.button("← Back"):
        st.session_state[NAVIGATION_KEY] = go_back(view.state)
        st.rerun()

    ring = [
        (index, node_id)
        for index, node_id in model.key_by_index.items()
        if model.depth_by_id[node_id] >= 1
    ]
    columns = st.columns(min(len(ring), 4) or 1)
    for position, (index, node_id) in enumerate(ring):
        label = _ring_label(model, index, node_id)
        column = columns[position % len(columns)]
        if column.button(label, key=f"node:{node_id}"):
            st.session_state[NAVIGATION_KEY] = apply_click(
                state=view.state,
                view=view,
                model=model,
                node_index=index,
            )
            st.rerun()

    _render_selection(view)


def _render_trend(
    transactions: Sequence[Transaction],
    config: FilterConfig,
    settings: VisualizerSettings,
) -> None:
    """Render the trend chart and the bucket detail table."""
    group_by = st.radio("Group By", ["day", "week", "month"], index=1,
                        horizontal=True)
    chart_type = st.radio("Type", ["Stacked", "Lines"], horizontal=True)
    use_case = build_trend_use_case(settings)
    series = use_case.execute(transactions, config, group_by=group_by)
    if series.is_empty:
        st.info(EMPTY_VIEW_MESSAGE)
        return

    # Widget state must only hold groups present in the current series.
    st.session_state[HIDDEN_GROUPS_KEY] = [
        group
        for group in st.session_state.get(HIDDEN_GROUPS_KEY, [])
        if group in series.groups
    ]
    if st.button("Show all categories"):
        st.session_state[HIDDEN_GROUPS_KEY] = []
        st.rerun()
    hidden = st.multiselect(
        "Hide categories",
        series.groups,
        key=HIDDEN_GROUPS_KEY,
    )
    st.altair_chart(
        _build_trend_chart(series, chart_type, hidden),
        use_container_width=True,
    )

    labels = {point.label: point.bucket for point in series.points}
    selected = st.selectbox("Show transactions for", [""] + list(labels))
    if not selected:
        return
    transaction_slice = use_case.slice(
        transactions,
        config,
        labels[selected],
        group_by=group_by,
    )
    st.subheader(
        f"{transaction_slice.label} "
        f"({_format_currency(transaction_slice.total)})"
    )
    st.dataframe(
        _transaction_rows(transaction_slice.transactions),
        use_container_width=True,
        hide_index=True,
    )


def _render_dashboard(
    record: FileRecord,
    settings: VisualizerSettings,
) -> None:
    if st.sidebar.button("← Back to File Selection"):
        _open_file(None)
        st.rerun()
    st.header(record.file_name)
    config = _render_filters(record.transactions, settings)
    view_name = st.radio("View", [DRILL_VIEW, TREND_VIEW], horizontal=True)
    if view_name == DRILL_VIEW:
        _render_drill_down(record.transactions, config, settings)
    else:
        _render_trend(record.transactions, config, settings)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Visualizer", layout="wide")
    st.title("Finance Visualizer")

    settings = _load_settings()
    active_file_id = st.session_state.get(ACTIVE_FILE_KEY)
    if active_file_id is None:
        _render_file_library(_fetch_files())
        return

    record = _load_file(active_file_id)
    if record is None:
        st.warning("The selected file is no longer stored locally.")
        _open_file(None)
        return
    _render_dashboard(record, settings)


if __name__ == "__main__":  # pragma: no cover
    main()
