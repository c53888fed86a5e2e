"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.file_repository import FileRepositoryPort
from src.application.ports.transaction_parser import TransactionParserPort
from src.application.use_cases.get_drill_down_view import (
    GetDrillDownViewUseCase,
)
from src.application.use_cases.get_trend_view import GetTrendViewUseCase
from src.infrastructure.csv_transactions import CsvTransactionParser
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.file_repository import SqlAlchemyFileRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import VisualizerSettings


def build_database_adapter(db_url: str | None = None) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(db_url)


def build_file_repository(
    db_port: DatabaseEnginePort | None = None,
) -> FileRepositoryPort:
    """Return the configured file store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFileRepository(resolved_db)


def build_transaction_parser() -> TransactionParserPort:
    """Return the CSV parser with the default id strategy."""
    return CsvTransactionParser(logger=get_app_logger())


def build_drill_down_use_case(
    settings: VisualizerSettings | None = None,
) -> GetDrillDownViewUseCase:
    """Return the drill-down use case honoring the week start setting."""
    resolved = settings or VisualizerSettings.from_env()
    return GetDrillDownViewUseCase(
        logger=get_app_logger(),
        week_starts_on=resolved.week_starts_on,
    )


def build_trend_use_case(
    settings: VisualizerSettings | None = None,
) -> GetTrendViewUseCase:
    """Return the trend use case honoring the week start setting."""
    resolved = settings or VisualizerSettings.from_env()
    return GetTrendViewUseCase(
        logger=get_app_logger(),
        week_starts_on=resolved.week_starts_on,
    )


__all__ = [
    "build_database_adapter",
    "build_file_repository",
    "build_transaction_parser",
    "build_drill_down_use_case",
    "build_trend_use_case",
]
