"""CSV statement parser.

Bank CSV exports have no common schema: column order, delimiter (";" or ",")
and header names vary. Each row is therefore scanned field by field and the
first date, first amount and first descriptive field are picked up wherever
they are.
"""

import csv
import logging
import re

from statement_import.parsers.amounts import extract_amount
from statement_import.parsers.cleaning import is_noise_line
from statement_import.parsers.generic import GenericParser
from statement_import.parsers.patterns import match_date
from statement_import.schemas.internal import ParsedTransaction

logger = logging.getLogger(__name__)

HEADER_KEYWORDS = ("data", "date", "descri", "valor")

# With "," as delimiter an unquoted "45,90" arrives as two fields.
_INTEGER_PART = re.compile(r"^-?\s*(?:R\$)?\s*-?\d{1,3}(?:\.\d{3})*$|^-?\s*(?:R\$)?\s*-?\d+$")
_CENTS_PART = re.compile(r"^\d{2}$")


class CsvStatementParser(GenericParser):
    """Parser for CSV / semicolon-separated statement exports."""

    def parse(self, content: bytes, password: str | None = None) -> list[ParsedTransaction]:
        """Decode CSV bytes and extract transactions.

        Args:
            content: Raw file content
            password: Ignored (CSV files are never encrypted)

        Returns:
            List of ParsedTransaction in file order
        """
        return self.parse_text(self._decode(content))

    def parse_text(self, text: str) -> list[ParsedTransaction]:
        """Extract transactions from CSV text.

        Rows without a description or amount are skipped silently. Rows
        without a date are kept and dated today.
        """
        lines = [line for line in text.splitlines() if line.strip()]
        if not lines:
            return []

        start = 1 if self._has_header(lines[0]) else 0
        transactions: list[ParsedTransaction] = []

        for line in lines[start:]:
            line = line.strip()
            if is_noise_line(line):
                continue

            fields = self._split_fields(line)
            if len(fields) < 2:
                continue

            transaction = self._parse_row(fields)
            if transaction is not None:
                transactions.append(transaction)

        logger.debug(
            "CSV: %d row(s), header=%s, %d transaction(s)",
            len(lines) - start,
            bool(start),
            len(transactions),
        )
        return transactions

    def _decode(self, content: bytes) -> str:
        try:
            return content.decode(self.settings.csv_encoding)
        except UnicodeDecodeError:
            logger.debug(
                "CSV is not %s, falling back to %s",
                self.settings.csv_encoding,
                self.settings.csv_fallback_encoding,
            )
            return content.decode(self.settings.csv_fallback_encoding)

    @staticmethod
    def _has_header(first_line: str) -> bool:
        lowered = first_line.lower()
        return any(keyword in lowered for keyword in HEADER_KEYWORDS)

    @staticmethod
    def _split_fields(line: str) -> list[str]:
        delimiter = ";" if ";" in line else ","
        try:
            row = next(csv.reader([line], delimiter=delimiter), [])
        except csv.Error as e:
            logger.debug("Skipping unreadable CSV row: %s", e)
            return []
        fields = [field.strip().strip('"').strip() for field in row]

        if delimiter == ",":
            fields = _rejoin_decimal_fields(fields)
        return fields

    def _parse_row(self, fields: list[str]) -> ParsedTransaction | None:
        iso_date: str | None = None
        amount = None
        description = ""

        for field in fields:
            if iso_date is None:
                date_match = match_date(field)
                if date_match is not None:
                    iso_date = date_match.iso_date
                    continue

            if amount is None:
                value = extract_amount(field)
                if value is not None:
                    amount = value
                    continue

            if not description and len(field) > 2:
                description = field

        if not description or amount is None:
            return None

        return self.build_transaction(iso_date, description, amount)


def _rejoin_decimal_fields(fields: list[str]) -> list[str]:
    """Merge ``["45", "90"]`` back into ``["45,90"]``."""
    merged: list[str] = []
    i = 0
    while i < len(fields):
        field = fields[i]
        if (
            i + 1 < len(fields)
            and _INTEGER_PART.match(field)
            and _CENTS_PART.match(fields[i + 1])
        ):
            merged.append(f"{field},{fields[i + 1]}")
            i += 2
            continue
        merged.append(field)
        i += 1
    return merged
