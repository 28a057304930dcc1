"""Tests for the CSV statement parser."""

from datetime import date
from decimal import Decimal

from statement_import.parsers.csv_parser import CsvStatementParser


class TestCsvStatementParser:
    """Test suite for CsvStatementParser."""

    def test_headerless_comma_row(self, settings):
        """A comma-split decimal amount is put back together."""
        parser = CsvStatementParser(settings=settings)
        [txn] = parser.parse_text("10/01/2024,Uber Eats,45,90")

        assert txn.date == "2024-01-10"
        assert txn.description == "Uber Eats"
        assert txn.amount == Decimal("45.90")
        assert txn.category_id == "delivery"
        assert txn.type == "purchase"
        assert txn.selected is True

    def test_negative_payment_row(self, settings):
        parser = CsvStatementParser(settings=settings)
        [txn] = parser.parse_text("10/01/2024,Pagamento recebido,-200,00")

        assert txn.type == "payment"
        assert txn.selected is False
        assert txn.amount == Decimal("200.00")

    def test_semicolon_with_header(self, settings):
        parser = CsvStatementParser(settings=settings)
        text = "Data;Descrição;Valor\n10/01/2024;Netflix;39,90\n\n15/02/2024;Hotel Booking;R$ 1.234,56\n"
        transactions = parser.parse_text(text)

        assert [(t.description, t.amount, t.category_id) for t in transactions] == [
            ("Netflix", Decimal("39.90"), "lazer"),
            ("Hotel Booking", Decimal("1234.56"), "viagem"),
        ]

    def test_quoted_fields(self, settings):
        parser = CsvStatementParser(settings=settings)
        [txn] = parser.parse_text('10/01/2024,"Uber Eats","45,90"')
        assert txn.amount == Decimal("45.90")

    def test_installment_column_text(self, settings):
        parser = CsvStatementParser(settings=settings)
        [txn] = parser.parse_text("05/03/2024;LOJA Y PARCELA 2 DE 6;100,00")
        assert (txn.current_installment, txn.total_installments) == (2, 6)

    def test_missing_date_defaults_to_today(self, settings):
        parser = CsvStatementParser(settings=settings)
        [txn] = parser.parse_text("Padaria Pao Quente;12,50")
        assert txn.date == date.today().isoformat()

    def test_rows_without_amount_or_noise_skipped(self, settings):
        parser = CsvStatementParser(settings=settings)
        text = "10/01/2024;Sem valor\n10/01/2024;IOF compra internacional;1,23\nsolo"
        assert parser.parse_text(text) == []

    def test_empty(self, settings):
        assert CsvStatementParser(settings=settings).parse_text("") == []

    def test_parse_bytes_latin1_fallback(self, settings):
        parser = CsvStatementParser(settings=settings)
        [txn] = parser.parse("10/01/2024;Farmácia Central;25,00".encode("latin-1"))
        assert txn.description == "Farmácia Central"
        assert txn.category_id == "medicamentos"

    def test_parse_bytes_utf8_bom(self, settings):
        parser = CsvStatementParser(settings=settings)
        content = "\ufeffData;Descrição;Valor\n10/01/2024;Netflix;39,90".encode("utf-8")
        [txn] = parser.parse(content)
        assert txn.description == "Netflix"

    def test_oversized_field_row_is_skipped(self, settings):
        """A row the csv module refuses to tokenize is dropped, not raised."""
        parser = CsvStatementParser(settings=settings)
        text = "10/01/2024;" + "A" * 200_000 + ";45,90\n11/01/2024;Netflix;39,90"
        [txn] = parser.parse_text(text)
        assert txn.description == "Netflix"
