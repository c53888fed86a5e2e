"""CSV import adapter producing typed transactions.

Expected header (case-insensitive, extra columns ignored):
``Date, Description, Category, Account, Tags, Amount``

Rows without a date or amount, or with an unparseable date, are dropped.
Categories follow ``"Group - Sub"``; a missing category becomes
``<none>``.
"""

import csv
import hashlib
import re
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Protocol, TextIO

from src.application.ports.transaction_parser import TransactionParserPort
from src.domain.constants import NONE_CATEGORY
from src.domain.models.transactions import Transaction
from src.infrastructure.logging.logger import get_app_logger


REQUIRED_COLUMNS = ("date", "amount")
DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%m/%d/%y")
DEFAULT_DESCRIPTION = "Unknown"


class CsvImportError(ValueError):
    """Raised when a CSV export cannot be imported at all."""


class TransactionIdFactory(Protocol):
    """Strategy assigning ids to parsed rows."""

    def __call__(self, index: int, row: Mapping[str, str]) -> str:
        """Return the id of the row at ``index``."""


class ContentHashIdFactory:
    """Ids derived from the row position and content (reproducible)."""

    def __call__(self, index: int, row: Mapping[str, str]) -> str:
        payload = "\x1f".join(
            [str(index)] + [f"{key}={row[key]}" for key in sorted(row)]
        )
        digest = hashlib.sha1(payload.encode("utf-8")).hexdigest()
        return f"txn-{digest[:16]}"


class SequentialIdFactory:
    """Ids ``txn-1``, ``txn-2``... in parse order."""

    def __init__(self, prefix: str = "txn") -> None:
        self._prefix = prefix
        self._counter = 0

    def __call__(self, index: int, row: Mapping[str, str]) -> str:
        _ = (index, row)
        self._counter += 1
        return f"{self._prefix}-{self._counter}"


def parse_amount(raw_value: str | None) -> Decimal:
    """Parse ``"$ -28.00"``, ``"-$28.00"`` or ``"(28.00)"`` to Decimal.

    Unparseable values yield ``Decimal("0")``.
    """
    if not raw_value:
        return Decimal("0")
    cleaned = re.sub(r"[$,\s]", "", raw_value)
    negative = cleaned.startswith("(") and cleaned.endswith(")")
    if negative:
        cleaned = cleaned[1:-1]
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    return -amount if negative else amount


def parse_date(raw_value: str | None) -> date | None:
    """Parse the supported date formats; None when invalid."""
    if not raw_value:
        return None
    value = raw_value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


def parse_tags(raw_value: str | None) -> tuple[str, ...]:
    if not raw_value:
        return ()
    return tuple(tag.strip() for tag in raw_value.split(",") if tag.strip())


def _clean_text(value: str | None) -> str:
    if value is None:
        return ""
    return re.sub(r"\s+", " ", value).strip()


class CsvTransactionParser(TransactionParserPort):
    """Parse CSV exports into transactions."""

    def __init__(
        self,
        id_factory: TransactionIdFactory | None = None,
        logger=None,
    ) -> None:
        """Initialize the parser.

        Args:
            id_factory: Strategy assigning transaction ids. Defaults to
                ``ContentHashIdFactory``.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._id_factory = id_factory or ContentHashIdFactory()
        self._logger = logger or get_app_logger()

    def parse(self, stream: TextIO) -> list[Transaction]:
        """Return the well-formed transactions of a CSV stream.

        Args:
            stream: Text stream positioned at the header row.

        Returns:
            list[Transaction]: Parsed transactions in file order.

        Raises:
            CsvImportError: If the header lacks the Date or Amount column.
        """
        reader = csv.DictReader(stream)
        columns = {
            name.strip().lower(): name
            for name in (reader.fieldnames or [])
            if name
        }
        missing = [name for name in REQUIRED_COLUMNS if name not in columns]
        if missing:
            raise CsvImportError(
                f"Missing required CSV columns: {', '.join(missing)}"
            )

        transactions: list[Transaction] = []
        skipped = 0
        for index, raw_row in enumerate(reader):
            row = {
                key: (raw_row.get(original) or "")
                for key, original in columns.items()
            }
            if not any(value.strip() for value in row.values()):
                continue
            transaction = self._build_transaction(index, row)
            if transaction is None:
                skipped += 1
                continue
            transactions.append(transaction)

        if skipped:
            self._logger.warning(
                f"Skipped {skipped} CSV rows with a missing or invalid "
                f"date or amount"
            )
        self._logger.info(f"Parsed {len(transactions)} CSV transactions")
        return transactions

    def _build_transaction(
        self,
        index: int,
        row: dict[str, str],
    ) -> Transaction | None:
        day = parse_date(row.get("date"))
        raw_amount = row.get("amount", "").strip()
        if day is None or not raw_amount:
            return None
        return Transaction.from_category(
            id=self._id_factory(index, row),
            date=day,
            category=_clean_text(row.get("category")) or NONE_CATEGORY,
            amount=parse_amount(raw_amount),
            description=(
                _clean_text(row.get("description")) or DEFAULT_DESCRIPTION
            ),
            account=_clean_text(row.get("account")),
            tags=parse_tags(row.get("tags")),
        )


__all__ = [
    "CsvImportError",
    "CsvTransactionParser",
    "ContentHashIdFactory",
    "SequentialIdFactory",
    "parse_amount",
    "parse_date",
    "parse_tags",
]
