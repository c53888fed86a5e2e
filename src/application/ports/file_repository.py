"""Port for the local store of imported files."""

from typing import Protocol

from src.domain.models.transactions import FileRecord


class FileRepositoryPort(Protocol):
    """Key-value style store of imported CSV files."""

    def list_files(self) -> list[FileRecord]:
        """Return stored files, newest upload first."""

    def get_file(self, file_id: str) -> FileRecord | None:
        """Return one stored file with its transactions."""

    def save_file(self, record: FileRecord) -> None:
        """Insert or replace a stored file."""

    def delete_file(self, file_id: str) -> None:
        """Delete one stored file."""

    def clear_all(self) -> None:
        """Delete every stored file."""


__all__ = ["FileRepositoryPort"]
