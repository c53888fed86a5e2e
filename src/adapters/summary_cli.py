"""CLI adapter printing category totals of a stored file.

Usage: ``python -m src.adapters.summary_cli FILE_ID ["Last Month"]``
"""

import sys
from collections.abc import Sequence

from src.application.use_cases.get_drill_down_view import (
    GetDrillDownViewUseCase,
)
from src.application.use_cases.manage_files import LoadFileUseCase
from src.domain.models.category_tree import CategoryNode
from src.domain.models.filters import FilterConfig, parse_time_frame
from src.infrastructure.container import (
    build_drill_down_use_case,
    build_file_repository,
)
from src.infrastructure.settings import VisualizerSettings


def format_summary(root: CategoryNode) -> list[str]:
    """Return one indented line per node, largest totals first."""
    lines = [f"{root.name}: {root.total:,.2f}"]
    for group in root.children:
        lines.append(f"  {group.name}: {group.total:,.2f}")
        for child in group.children:
            lines.append(f"    {child.name}: {child.total:,.2f}")
    return lines


def main(
    argv: Sequence[str] | None = None,
    use_case: GetDrillDownViewUseCase | None = None,
) -> int:
    """Print the category tree of a stored file for a time frame."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: summary_cli FILE_ID [TIME_FRAME]")
        return 2

    settings = VisualizerSettings.from_env()
    time_frame = settings.default_time_frame
    if len(args) > 1:
        time_frame = parse_time_frame(args[1])
        if time_frame is None:
            print(f"Unknown time frame: {args[1]}")
            return 2

    record = LoadFileUseCase(build_file_repository()).execute(args[0])
    if record is None:
        print(f"No stored file with id {args[0]}.")
        return 1

    resolved_use_case = use_case or build_drill_down_use_case(settings)
    view = resolved_use_case.execute(
        record.transactions,
        FilterConfig(time_frame=time_frame),
    )
    print(
        f"{record.file_name} · {time_frame.value} · "
        f"{view.date_range.start:%Y-%m-%d} to {view.date_range.end:%Y-%m-%d}"
    )
    if view.empty_message:
        print(view.empty_message)
        return 0
    for line in format_summary(view.tree.root):
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
