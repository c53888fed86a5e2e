"""Port for parsing transaction exports."""

from typing import Protocol, TextIO

from src.domain.models.transactions import Transaction


class TransactionParserPort(Protocol):
    """Parser turning a CSV export into typed transactions."""

    def parse(self, stream: TextIO) -> list[Transaction]:
        """Return the well-formed transactions found in ``stream``."""


__all__ = ["TransactionParserPort"]
