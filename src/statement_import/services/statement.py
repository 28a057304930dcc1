"""Statement import service.

This module orchestrates the complete parsing workflow:
1. Route the file to a parser by extension
2. Extract transaction candidates (CSV rows or PDF lines)
3. Collect user-facing warnings
4. Compute the summary totals

Recoverable problems become warnings on the ParseResult. Nothing raised by
the parsers for a bad file reaches the caller.
"""

import logging

from statement_import.categorization.registry import CategoryRegistry
from statement_import.config import Settings, get_settings
from statement_import.core.errors import get_user_message
from statement_import.core.exceptions import StatementProcessingError, UnsupportedFormatError
from statement_import.parsers.factory import ParserFactory, get_parser_factory
from statement_import.schemas.internal import ParsedTransaction, ParseResult
from statement_import.schemas.statement import StatementFile

logger = logging.getLogger(__name__)


class StatementImportService:
    """Service turning a statement file into a reviewed-import proposal."""

    def __init__(
        self,
        factory: ParserFactory | None = None,
        registry: CategoryRegistry | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the service.

        Args:
            factory: Parser factory (default: global factory)
            registry: Valid categories (default: built-in registry)
            settings: Settings (default: cached environment settings)
        """
        self.factory = factory or get_parser_factory()
        self.registry = registry
        self.settings = settings or get_settings()

    def parse(self, file: StatementFile, password: str | None = None) -> ParseResult:
        """Parse a statement file.

        Args:
            file: The uploaded statement
            password: Optional password for encrypted PDFs

        Returns:
            ParseResult with transactions, totals and warnings
        """
        extension = file.extension

        try:
            parser = self.factory.get_parser(
                extension, registry=self.registry, settings=self.settings
            )
        except UnsupportedFormatError as e:
            logger.info("Rejected %r: unsupported extension %r", file.name, extension)
            return ParseResult.empty(get_user_message(e.error_code))

        content = file.read_bytes()
        limit_bytes = self.settings.max_file_size_mb * 1024 * 1024
        if len(content) > limit_bytes:
            logger.info("Rejected %r: %d bytes exceeds limit", file.name, len(content))
            return ParseResult.empty(
                get_user_message("API_002", limit_mb=self.settings.max_file_size_mb)
            )

        try:
            transactions = parser.parse(content, password=password)
        except StatementProcessingError as e:
            logger.warning(
                "Failed to parse %r (%s): %s", file.name, e.error_code, e.details, exc_info=True
            )
            return ParseResult.empty(get_user_message(e.error_code))
        except Exception:
            # Decoder failures must not escape; other formats propagate.
            if extension != "pdf":
                raise
            logger.exception("PDF decoder crashed on %r", file.name)
            return ParseResult.empty(get_user_message("PARSE_002"))

        warnings = self._collect_warnings(transactions)
        result = ParseResult.from_transactions(transactions, warnings)
        logger.info(
            "Parsed %r: %d transaction(s), %d installment(s), %d warning(s)",
            file.name,
            len(result.transactions),
            result.total_installment_groups,
            len(result.warnings),
        )
        return result

    @staticmethod
    def _collect_warnings(transactions: list[ParsedTransaction]) -> list[str]:
        warnings: list[str] = []
        if not transactions:
            warnings.append(get_user_message("PARSE_005"))

        uncategorized = sum(1 for t in transactions if t.selected and t.category_id is None)
        if uncategorized > 0:
            warnings.append(get_user_message("CAT_001", count=uncategorized))
        return warnings


def parse_statement_file(
    file: StatementFile,
    registry: CategoryRegistry | None = None,
    password: str | None = None,
) -> ParseResult:
    """Parse a statement file with the default factory and settings.

    Args:
        file: The uploaded statement
        registry: Valid categories (default: built-in registry)
        password: Optional password for encrypted PDFs

    Returns:
        ParseResult; never raises for unsupported or unreadable files
    """
    return StatementImportService(registry=registry).parse(file, password=password)
