"""Tests for the summary_cli adapter."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters import summary_cli
from src.application.use_cases.get_drill_down_view import (
    GetDrillDownViewUseCase,
)
from src.domain.models.filters import TimeFrame
from src.domain.models.transactions import FileRecord, Transaction
from src.infrastructure.settings import VisualizerSettings


RECORD = FileRecord(
    id="f1",
    file_name="history.csv",
    upload_date=datetime(2024, 3, 5),
    row_count=2,
    transactions=(
        Transaction.from_category(
            id="1",
            date=date(2020, 5, 1),
            category="Food - Groceries",
            amount=Decimal("-12.5"),
        ),
        Transaction.from_category(
            id="2",
            date=date(2020, 5, 2),
            category="Rent",
            amount=Decimal("-900"),
        ),
    ),
)


@pytest.fixture
def store(monkeypatch):
    repository = MagicMock()
    repository.get_file.side_effect = lambda file_id: (
        RECORD if file_id == RECORD.id else None
    )
    monkeypatch.setattr(summary_cli, "build_file_repository", lambda: repository)
    monkeypatch.setattr(
        summary_cli.VisualizerSettings,
        "from_env",
        classmethod(lambda cls: VisualizerSettings(db_url="sqlite://")),
    )
    return repository


def test_main_prints_tree_totals(store, capsys):
    """The tree is printed with groups sorted by total."""
    use_case = GetDrillDownViewUseCase(logger=MagicMock())

    exit_code = summary_cli.main(
        ["f1", TimeFrame.CUSTOM.value],
        use_case=use_case,
    )

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines[1:] == [
        "Total: 912.50",
        "  Rent: 900.00",
        "  Food: 12.50",
        "    Groceries: 12.50",
    ]


def test_main_reports_unknown_file_and_time_frame(store, capsys):
    assert summary_cli.main(["nope"], use_case=MagicMock()) == 1
    assert summary_cli.main(["f1", "Forever"], use_case=MagicMock()) == 2
    out = capsys.readouterr().out
    assert "No stored file" in out
    assert "Unknown time frame" in out


def test_main_prints_empty_message(store, capsys):
    """A window without data prints the empty message."""
    use_case = GetDrillDownViewUseCase(logger=MagicMock())

    assert summary_cli.main(["f1", "This Week"], use_case=use_case) == 0
    assert "No data for this period." in capsys.readouterr().out
