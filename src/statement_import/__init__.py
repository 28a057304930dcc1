"""Bank and credit-card statement import.

Turns PDF or CSV statement exports into categorized, installment-aware
transaction candidates for review before they reach the ledger.

Example:
    >>> from statement_import import StatementFile, parse_statement_file
    >>> result = parse_statement_file(StatementFile.from_path("fatura.csv"))
    >>> result.total_amount
"""

from statement_import.schemas.internal import ParsedTransaction, ParseResult
from statement_import.schemas.statement import StatementFile
from statement_import.services.statement import StatementImportService, parse_statement_file

__all__ = [
    "ParsedTransaction",
    "ParseResult",
    "StatementFile",
    "StatementImportService",
    "parse_statement_file",
]
