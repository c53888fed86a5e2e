"""Use cases managing the local library of imported CSV files."""

import uuid
from collections.abc import Callable
from datetime import datetime
from typing import TextIO

from src.application.ports.file_repository import FileRepositoryPort
from src.application.ports.transaction_parser import TransactionParserPort
from src.domain.models.transactions import FileRecord
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class ImportCsvFileUseCase:
    """Parse a CSV export and store it as a new file record."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        parser: TransactionParserPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], datetime] = datetime.now,
        file_id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        """Initialize the use case.

        Args:
            file_repository: Port storing file records.
            parser: Port turning CSV text into transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
            clock: Returns the upload timestamp.
            file_id_factory: Returns a new file id.
        """
        self._file_repository = file_repository
        self._parser = parser
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock
        self._file_id_factory = file_id_factory

    def execute(self, file_name: str, stream: TextIO) -> FileRecord:
        """Import ``stream`` under ``file_name``.

        Args:
            file_name: Original file name shown in the history.
            stream: Text stream with the CSV content.

        Returns:
            FileRecord: The stored record.
        """
        transactions = self._parser.parse(stream)
        record = FileRecord(
            id=self._file_id_factory(),
            file_name=file_name,
            upload_date=self._clock(),
            row_count=len(transactions),
            transactions=tuple(transactions),
        )
        self._file_repository.save_file(record)
        self._logger.info(
            f"Imported {record.row_count} transactions from {file_name}"
        )
        self._usage_logger.info(f"import file_id={record.id} name={file_name}")
        return record


class ListFilesUseCase:
    """Return the stored files, newest upload first."""

    def __init__(self, file_repository: FileRepositoryPort) -> None:
        self._file_repository = file_repository

    def execute(self) -> list[FileRecord]:
        return self._file_repository.list_files()


class LoadFileUseCase:
    """Return one stored file with its transactions."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger=None,
    ) -> None:
        self._file_repository = file_repository
        self._logger = logger or get_app_logger()

    def execute(self, file_id: str) -> FileRecord | None:
        record = self._file_repository.get_file(file_id)
        if record is None:
            self._logger.warning(f"Stored file not found: {file_id}")
        return record


class DeleteFileUseCase:
    """Delete one stored file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        usage_logger=None,
    ) -> None:
        self._file_repository = file_repository
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self, file_id: str) -> None:
        self._file_repository.delete_file(file_id)
        self._usage_logger.info(f"delete file_id={file_id}")


class ClearFilesUseCase:
    """Delete every stored file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        usage_logger=None,
    ) -> None:
        self._file_repository = file_repository
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self) -> None:
        self._file_repository.clear_all()
        self._usage_logger.info("clear all files")


__all__ = [
    "ImportCsvFileUseCase",
    "ListFilesUseCase",
    "LoadFileUseCase",
    "DeleteFileUseCase",
    "ClearFilesUseCase",
]
