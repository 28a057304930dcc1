"""Parser factory for routing statement files to the right parser.

Files are routed by extension. The factory only knows parser classes;
instances are created per call so no state is shared between parses.
"""

import logging

from statement_import.categorization.registry import CategoryRegistry
from statement_import.config import Settings
from statement_import.core.exceptions import UnsupportedFormatError
from statement_import.parsers.csv_parser import CsvStatementParser
from statement_import.parsers.generic import GenericParser
from statement_import.parsers.pdf_parser import PdfStatementParser

logger = logging.getLogger(__name__)


class ParserFactory:
    """Registry of extension -> parser class.

    Example:
        >>> factory = ParserFactory()
        >>> factory.register_parser("csv", CsvStatementParser)
        >>> parser = factory.get_parser("CSV")
    """

    def __init__(self) -> None:
        self._parsers: dict[str, type[GenericParser]] = {}

    def register_parser(self, extension: str, parser_class: type[GenericParser]) -> None:
        """Register the parser class handling files with ``extension``.

        Raises:
            ValueError: If parser_class does not inherit from GenericParser
        """
        if not issubclass(parser_class, GenericParser):
            raise ValueError(
                f"Parser class must inherit from GenericParser, got {parser_class}"
            )
        self._parsers[extension.lower().lstrip(".")] = parser_class

    def unregister_parser(self, extension: str) -> None:
        self._parsers.pop(extension.lower().lstrip("."), None)

    def get_supported_extensions(self) -> list[str]:
        return list(self._parsers.keys())

    def get_parser(
        self,
        extension: str,
        registry: CategoryRegistry | None = None,
        settings: Settings | None = None,
    ) -> GenericParser:
        """Instantiate the parser for ``extension``.

        Raises:
            UnsupportedFormatError: If no parser handles the extension
        """
        key = extension.lower().lstrip(".")
        parser_class = self._parsers.get(key)
        if parser_class is None:
            raise UnsupportedFormatError("PARSE_001", {"extension": key})

        logger.debug("Using %s for .%s", parser_class.__name__, key)
        return parser_class(registry=registry, settings=settings)


# Singleton factory instance for global use
_factory_instance: ParserFactory | None = None


def get_parser_factory() -> ParserFactory:
    """Get or create the global ParserFactory with the built-in parsers."""
    global _factory_instance
    if _factory_instance is None:
        _factory_instance = ParserFactory()
        _factory_instance.register_parser("csv", CsvStatementParser)
        _factory_instance.register_parser("pdf", PdfStatementParser)
    return _factory_instance
