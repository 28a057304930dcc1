"""Statement parsing.

GenericParser turns text lines into transaction candidates; the CSV and PDF
parsers only differ in how they obtain those lines from a file.
"""

from statement_import.parsers.csv_parser import CsvStatementParser
from statement_import.parsers.extractor import PDFExtractor
from statement_import.parsers.factory import ParserFactory, get_parser_factory
from statement_import.parsers.generic import GenericParser
from statement_import.parsers.layout import Page, TextFragment, reconstruct_lines
from statement_import.parsers.pdf_parser import PdfStatementParser

__all__ = [
    "CsvStatementParser",
    "GenericParser",
    "PDFExtractor",
    "Page",
    "ParserFactory",
    "PdfStatementParser",
    "TextFragment",
    "get_parser_factory",
    "reconstruct_lines",
]
