"""Generic statement line parser.

This module provides the GenericParser class which turns statement text
lines into ParsedTransaction candidates. Format-specific parsers (CSV, PDF)
inherit from it and only change how lines are obtained from the file.
"""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from statement_import.categorization.registry import CategoryRegistry, default_registry
from statement_import.categorization.rules import categorize
from statement_import.config import Settings, get_settings
from statement_import.parsers.amounts import find_amount
from statement_import.parsers.classifier import classify_transaction
from statement_import.parsers.cleaning import clean_description, is_noise_line, is_section_header
from statement_import.parsers.installments import detect_installment
from statement_import.parsers.patterns import match_date
from statement_import.schemas.internal import ParsedTransaction

logger = logging.getLogger(__name__)


class GenericParser:
    """Line-oriented parser shared by every statement format.

    Subclasses implement ``parse(content: bytes)`` and reuse
    ``extract_from_lines`` and ``build_transaction``.

    Example:
        >>> parser = GenericParser()
        >>> transactions = parser.extract_from_lines(["10/01/2024 IFOOD 45,90"])
        >>> transactions[0].category_id
        'delivery'
    """

    def __init__(
        self,
        registry: CategoryRegistry | None = None,
        settings: Settings | None = None,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.settings = settings or get_settings()

    def parse(self, content: bytes, password: str | None = None) -> list[ParsedTransaction]:
        raise NotImplementedError

    def extract_from_lines(self, lines: Iterable[str]) -> list[ParsedTransaction]:
        """Extract transactions from reconstructed statement lines.

        A line yields a transaction only when it has both a date and a
        non-zero amount and something descriptive is left once those are
        cut out. Everything else is skipped without a warning.

        Section headings are tracked but do not restrict extraction, since
        many statements omit or repeat them.
        """
        transactions: list[ParsedTransaction] = []
        in_section = False
        outside_section = 0

        for raw_line in lines:
            line = raw_line.strip()
            if not line:
                continue

            if is_section_header(line) and find_amount(line) is None:
                if not in_section:
                    logger.debug("Entered transaction section at %r", line[:40])
                in_section = True
                continue

            if is_noise_line(line):
                continue

            date_match = match_date(line)
            amount_match = find_amount(line)
            if date_match is None or amount_match is None:
                continue

            # Cut the later span first so the earlier offsets stay valid.
            spans = sorted(
                [(date_match.start, date_match.end), (amount_match.start, amount_match.end)],
                reverse=True,
            )
            remainder = line
            for start, end in spans:
                if start < end <= len(remainder):
                    remainder = remainder[:start] + " " + remainder[end:]

            transaction = self.build_transaction(date_match.iso_date, remainder, amount_match.value)
            if transaction is None:
                continue
            if not in_section:
                outside_section += 1
            transactions.append(transaction)

        if outside_section:
            logger.debug("%d transaction(s) found outside a section heading", outside_section)
        return transactions

    def build_transaction(
        self,
        iso_date: str | None,
        raw_description: str,
        amount: Decimal,
    ) -> ParsedTransaction | None:
        """Assemble a ParsedTransaction from extracted pieces.

        Args:
            iso_date: Date found on the row, or None to fall back to today
            raw_description: Description text before cleaning
            amount: Signed amount (sign only drives classification)

        Returns:
            ParsedTransaction, or None if the description is too short or
            the amount is zero
        """
        description = clean_description(raw_description)
        # The schema rejects anything shorter than 3 characters.
        if len(description) < max(3, self.settings.min_description_length):
            return None
        if amount == 0:
            return None

        installment = detect_installment(description, self.settings.max_total_installments)
        transaction_type = classify_transaction(description, amount)

        return ParsedTransaction(
            date=iso_date or date.today().isoformat(),
            description=description,
            amount=abs(amount),
            category_id=categorize(description, self.registry),
            selected=transaction_type == "purchase",
            is_installment=installment is not None,
            current_installment=installment.current if installment else None,
            total_installments=installment.total if installment else None,
            type=transaction_type,
        )
