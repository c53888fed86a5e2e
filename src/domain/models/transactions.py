"""Domain models for imported transactions and files."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import CATEGORY_SEPARATOR, NONE_CATEGORY


def split_category(category: str) -> tuple[str, str]:
    """Split a raw category into its group and sub-category.

    Args:
        category: Raw category such as ``"Food - Groceries"``.

    Returns:
        tuple[str, str]: ``(group, sub)``; ``sub`` equals ``group`` when
        the category has no separator.
    """
    raw = category.strip() if category else ""
    if not raw:
        return NONE_CATEGORY, NONE_CATEGORY
    parts = raw.split(CATEGORY_SEPARATOR)
    group = parts[0].strip()
    sub = parts[1].strip() if len(parts) > 1 else group
    return group, sub


@dataclass(frozen=True)
class Transaction:
    """A single imported transaction.

    Attributes:
        id: Unique identifier assigned at import time.
        date: Calendar date of the transaction.
        description: Free text description, possibly empty.
        category: Raw category as imported (``<none>`` when absent).
        category_group: Top-level category name.
        category_sub: Bottom-level category name; equals
            ``category_group`` for direct transactions.
        amount: Signed amount; negative values are expenses.
        account: Account name, possibly empty.
        tags: Free-text labels.
    """

    id: str
    date: date
    description: str
    category: str
    category_group: str
    category_sub: str
    amount: Decimal
    account: str = ""
    tags: tuple[str, ...] = ()

    @classmethod
    def from_category(
        cls,
        *,
        id: str,
        date: date,
        category: str,
        amount: Decimal,
        description: str = "",
        account: str = "",
        tags: tuple[str, ...] = (),
    ) -> "Transaction":
        """Build a transaction deriving group and sub from ``category``."""
        raw = category.strip() if category else ""
        group, sub = split_category(raw)
        return cls(
            id=id,
            date=date,
            description=description,
            category=raw or NONE_CATEGORY,
            category_group=group,
            category_sub=sub,
            amount=amount,
            account=account,
            tags=tags,
        )

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    @property
    def is_income(self) -> bool:
        return self.amount >= 0

    @property
    def is_direct(self) -> bool:
        """True when the transaction has no sub-category."""
        return self.category_sub == self.category_group

    @property
    def absolute_amount(self) -> Decimal:
        return abs(self.amount)


@dataclass(frozen=True)
class FileRecord:
    """One imported CSV file and its transactions."""

    id: str
    file_name: str
    upload_date: datetime
    row_count: int
    transactions: tuple[Transaction, ...] = field(default=())


__all__ = ["Transaction", "FileRecord", "split_category"]
