"""SQLAlchemy-backed store of imported CSV files."""

import json
from datetime import date, datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.file_repository import FileRepositoryPort
from src.domain.models.transactions import FileRecord, Transaction
from src.utils.decimal_utils import coerce_decimal


CREATE_FILES_SQL = """
CREATE TABLE IF NOT EXISTS files (
    id TEXT PRIMARY KEY,
    file_name TEXT NOT NULL,
    upload_date TEXT NOT NULL,
    row_count INTEGER NOT NULL
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    file_id TEXT NOT NULL REFERENCES files(id) ON DELETE CASCADE,
    position INTEGER NOT NULL,
    id TEXT NOT NULL,
    date TEXT NOT NULL,
    description TEXT,
    account TEXT,
    category TEXT NOT NULL,
    category_group TEXT NOT NULL,
    category_sub TEXT NOT NULL,
    tags TEXT,
    amount TEXT NOT NULL,
    PRIMARY KEY (file_id, position)
)
"""

SELECT_FILES_SQL = text(
    """
    SELECT id, file_name, upload_date, row_count
    FROM files
    ORDER BY upload_date DESC
    """
)

SELECT_FILE_SQL = text(
    """
    SELECT id, file_name, upload_date, row_count
    FROM files
    WHERE id = :file_id
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, date, description, account, category, category_group,
           category_sub, tags, amount
    FROM transactions
    WHERE file_id = :file_id
    ORDER BY position
    """
)

INSERT_FILE_SQL = text(
    """
    INSERT INTO files (id, file_name, upload_date, row_count)
    VALUES (:id, :file_name, :upload_date, :row_count)
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        file_id,
        position,
        id,
        date,
        description,
        account,
        category,
        category_group,
        category_sub,
        tags,
        amount
    )
    VALUES (
        :file_id,
        :position,
        :id,
        :date,
        :description,
        :account,
        :category,
        :category_group,
        :category_sub,
        :tags,
        :amount
    )
    """
)

DELETE_FILE_TRANSACTIONS_SQL = text(
    "DELETE FROM transactions WHERE file_id = :file_id"
)
DELETE_FILE_SQL = text("DELETE FROM files WHERE id = :file_id")
DELETE_ALL_TRANSACTIONS_SQL = text("DELETE FROM transactions")
DELETE_ALL_FILES_SQL = text("DELETE FROM files")


class SqlAlchemyFileRepository(FileRepositoryPort):
    """File store backed by SQLAlchemy Core statements."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the local engine.
        """
        self._db_port = db_port
        self._schema_ready = False

    def _ensure_schema(self, conn) -> None:
        if self._schema_ready:
            return
        conn.execute(text(CREATE_FILES_SQL))
        conn.execute(text(CREATE_TRANSACTIONS_SQL))
        self._schema_ready = True

    def list_files(self) -> list[FileRecord]:
        """Return stored files, newest upload first, without transactions."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            self._ensure_schema(conn)
            rows = conn.execute(SELECT_FILES_SQL).all()
        return [self._to_record(row, ()) for row in rows]

    def get_file(self, file_id: str) -> FileRecord | None:
        """Return one stored file with its transactions."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            self._ensure_schema(conn)
            row = conn.execute(SELECT_FILE_SQL, {"file_id": file_id}).first()
            if row is None:
                return None
            transaction_rows = conn.execute(
                SELECT_TRANSACTIONS_SQL,
                {"file_id": file_id},
            ).all()
        transactions = tuple(
            self._to_transaction(transaction_row)
            for transaction_row in transaction_rows
        )
        return self._to_record(row, transactions)

    def save_file(self, record: FileRecord) -> None:
        """Insert or replace a file and its transactions."""
        params = [
            {
                "file_id": record.id,
                "position": position,
                "id": transaction.id,
                "date": transaction.date.isoformat(),
                "description": transaction.description,
                "account": transaction.account,
                "category": transaction.category,
                "category_group": transaction.category_group,
                "category_sub": transaction.category_sub,
                "tags": json.dumps(list(transaction.tags)),
                "amount": str(transaction.amount),
            }
            for position, transaction in enumerate(record.transactions)
        ]
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            self._ensure_schema(conn)
            conn.execute(DELETE_FILE_TRANSACTIONS_SQL, {"file_id": record.id})
            conn.execute(DELETE_FILE_SQL, {"file_id": record.id})
            conn.execute(
                INSERT_FILE_SQL,
                {
                    "id": record.id,
                    "file_name": record.file_name,
                    "upload_date": record.upload_date.isoformat(),
                    "row_count": record.row_count,
                },
            )
            if params:
                conn.execute(INSERT_TRANSACTION_SQL, params)

    def delete_file(self, file_id: str) -> None:
        """Delete one file and its transactions."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            self._ensure_schema(conn)
            conn.execute(DELETE_FILE_TRANSACTIONS_SQL, {"file_id": file_id})
            conn.execute(DELETE_FILE_SQL, {"file_id": file_id})

    def clear_all(self) -> None:
        """Delete every stored file."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            self._ensure_schema(conn)
            conn.execute(DELETE_ALL_TRANSACTIONS_SQL)
            conn.execute(DELETE_ALL_FILES_SQL)

    @staticmethod
    def _to_record(row, transactions: tuple[Transaction, ...]) -> FileRecord:
        return FileRecord(
            id=row.id,
            file_name=row.file_name,
            upload_date=datetime.fromisoformat(row.upload_date),
            row_count=row.row_count,
            transactions=transactions,
        )

    @staticmethod
    def _to_transaction(row) -> Transaction:
        return Transaction(
            id=row.id,
            date=date.fromisoformat(row.date),
            description=row.description or "",
            account=row.account or "",
            category=row.category,
            category_group=row.category_group,
            category_sub=row.category_sub,
            tags=tuple(json.loads(row.tags or "[]")),
            amount=coerce_decimal(row.amount),
        )


__all__ = ["SqlAlchemyFileRepository"]
