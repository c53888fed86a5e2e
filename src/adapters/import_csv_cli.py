"""CLI adapter to import CSV exports into the local file store.

Usage: ``python -m src.adapters.import_csv_cli export.csv [more.csv ...]``
"""

import sys
from collections.abc import Sequence
from pathlib import Path

from src.application.use_cases.manage_files import ImportCsvFileUseCase
from src.infrastructure.container import (
    build_file_repository,
    build_transaction_parser,
)
from src.infrastructure.csv_transactions import CsvImportError
from src.infrastructure.logging.logger import get_app_logger


def main(argv: Sequence[str] | None = None) -> int:
    """Import every CSV path given on the command line.

    Returns:
        int: 0 when every file was imported, 1 otherwise.
    """
    logger = get_app_logger()
    paths = list(sys.argv[1:] if argv is None else argv)
    if not paths:
        print("Usage: import_csv_cli FILE.csv [FILE.csv ...]")
        return 2

    use_case = ImportCsvFileUseCase(
        build_file_repository(),
        build_transaction_parser(),
        logger=logger,
    )
    failures = 0
    for raw_path in paths:
        path = Path(raw_path)
        try:
            with path.open(encoding="utf-8-sig", newline="") as stream:
                record = use_case.execute(path.name, stream)
        except (OSError, CsvImportError) as exc:
            logger.error(f"Failed to import {path}: {exc}")
            print(f"Failed to import {path}: {exc}")
            failures += 1
            continue
        print(
            f"Imported {record.row_count} transactions from {path.name} "
            f"as {record.id}."
        )
    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
