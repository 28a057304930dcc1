"""Tests for the parser factory."""

import pytest

from statement_import.core.exceptions import UnsupportedFormatError
from statement_import.parsers.csv_parser import CsvStatementParser
from statement_import.parsers.factory import ParserFactory, get_parser_factory
from statement_import.parsers.pdf_parser import PdfStatementParser


class TestParserFactory:
    """Test suite for ParserFactory."""

    def test_register_and_get(self, settings):
        factory = ParserFactory()
        factory.register_parser(".CSV", CsvStatementParser)

        parser = factory.get_parser("csv", settings=settings)
        assert isinstance(parser, CsvStatementParser)
        assert factory.get_supported_extensions() == ["csv"]

    def test_unsupported_extension(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            ParserFactory().get_parser("txt")
        assert exc_info.value.error_code == "PARSE_001"
        assert exc_info.value.details == {"extension": "txt"}

    def test_register_rejects_non_parser(self):
        with pytest.raises(ValueError, match="must inherit from GenericParser"):
            ParserFactory().register_parser("xls", dict)

    def test_unregister(self):
        factory = ParserFactory()
        factory.register_parser("csv", CsvStatementParser)
        factory.unregister_parser("csv")
        factory.unregister_parser("missing")
        assert factory.get_supported_extensions() == []

    def test_global_factory(self, settings):
        factory = get_parser_factory()
        assert factory is get_parser_factory()
        assert sorted(factory.get_supported_extensions()) == ["csv", "pdf"]
        assert isinstance(factory.get_parser("PDF", settings=settings), PdfStatementParser)
