"""PDF statement parser."""

import logging

from statement_import.categorization.registry import CategoryRegistry
from statement_import.config import Settings
from statement_import.parsers.extractor import PDFExtractor
from statement_import.parsers.generic import GenericParser
from statement_import.parsers.layout import reconstruct_lines
from statement_import.schemas.internal import ParsedTransaction

logger = logging.getLogger(__name__)


class PdfStatementParser(GenericParser):
    """Parser for PDF statements with a text layer (no OCR)."""

    def __init__(
        self,
        registry: CategoryRegistry | None = None,
        settings: Settings | None = None,
        extractor: PDFExtractor | None = None,
    ):
        super().__init__(registry=registry, settings=settings)
        self.extractor = extractor or PDFExtractor()

    def parse(self, content: bytes, password: str | None = None) -> list[ParsedTransaction]:
        """Decode the PDF, rebuild its lines and extract transactions.

        Raises:
            PDFExtractionError: If the PDF cannot be decoded
        """
        pages = self.extractor.extract(content, password=password)
        lines = reconstruct_lines(pages)
        logger.debug("PDF: %d page(s), %d line(s)", len(pages), len(lines))
        return self.extract_from_lines(lines)
