"""Custom exception classes for statement import.

Each exception carries an error_code that maps to the catalog in errors.py.
The orchestrator converts these into user-facing warnings; they should
never reach the caller of ``parse_statement_file``.
"""

from typing import Any


class StatementProcessingError(Exception):
    """Base exception for all statement import errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "PARSE_002")
        details: Additional context about the error (for logging)
    """

    def __init__(self, error_code: str, details: dict[str, Any] | None = None):
        self.error_code = error_code
        self.details = details or {}
        super().__init__(error_code)


class PDFExtractionError(StatementProcessingError):
    """Raised when the PDF decoder cannot read a file.

    Common causes:
    - Corrupted PDF file (PARSE_002)
    - Password-protected PDF (PARSE_003)
    - Incorrect password (PARSE_004)
    """

    pass


class UnsupportedFormatError(StatementProcessingError):
    """Raised when no parser is registered for a file extension (PARSE_001)."""

    pass
