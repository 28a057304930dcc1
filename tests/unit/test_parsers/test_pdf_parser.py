"""Tests for the PDF statement parser (decoder mocked)."""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from statement_import.core.exceptions import PDFExtractionError
from statement_import.parsers.pdf_parser import PdfStatementParser


class TestPdfStatementParser:
    """Test suite for PdfStatementParser."""

    def test_parse_synthetic_pages(self, settings, make_page):
        extractor = Mock()
        extractor.extract.return_value = [
            make_page(
                1,
                ("Fatura", 800.0),
                ("10/01/2024", 700.0),
                ("IFOOD", 700.2),
                ("45,90", 699.9),
                ("Vencimento 10/02/2024", 650.0),
            ),
            make_page(2, ("12/01/2024 UBER *TRIP 23,90", 780.0)),
        ]
        parser = PdfStatementParser(settings=settings, extractor=extractor)

        transactions = parser.parse(b"%PDF-fake", password="pw")

        extractor.extract.assert_called_once_with(b"%PDF-fake", password="pw")
        assert [(t.description, t.amount, t.category_id) for t in transactions] == [
            ("IFOOD", Decimal("45.90"), "delivery"),
            ("UBER *TRIP", Decimal("23.90"), "uber_99"),
        ]

    def test_decoder_errors_propagate(self, settings):
        extractor = Mock()
        extractor.extract.side_effect = PDFExtractionError("PARSE_002")
        parser = PdfStatementParser(settings=settings, extractor=extractor)

        with pytest.raises(PDFExtractionError):
            parser.parse(b"%PDF-fake")
