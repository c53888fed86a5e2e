"""Application ports package."""

from .database import DatabaseEnginePort
from .file_repository import FileRepositoryPort
from .transaction_parser import TransactionParserPort

__all__ = [
    "DatabaseEnginePort",
    "FileRepositoryPort",
    "TransactionParserPort",
]
