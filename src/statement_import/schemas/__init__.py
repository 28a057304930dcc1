"""Data schemas for statement import."""

from statement_import.schemas.internal import ParsedTransaction, ParseResult, TransactionType
from statement_import.schemas.statement import StatementFile

__all__ = ["ParsedTransaction", "ParseResult", "StatementFile", "TransactionType"]
