"""Brazilian Real amount extraction."""

import re
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

from statement_import.parsers.patterns import AMOUNT_PATTERNS


class AmountMatch(NamedTuple):
    value: Decimal
    start: int
    end: int


def parse_brl(raw: str) -> Decimal:
    """Parse a BRL-formatted string such as ``-R$ 1.234,56``.

    Raises:
        ValueError: If the string is not a valid amount
    """
    cleaned = re.sub(r"[R$\s]", "", raw).replace(".", "").replace(",", ".")
    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount: {raw}") from e


def find_amount(text: str) -> AmountMatch | None:
    """Locate the first non-zero amount in ``text``.

    Patterns are tried in AMOUNT_PATTERNS order. A zero amount is treated
    as "no amount" and the next pattern is tried.
    """
    for pattern in AMOUNT_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        value = parse_brl(match.group(0))
        if value != 0:
            return AmountMatch(value, match.start(), match.end())
    return None


def extract_amount(text: str) -> Decimal | None:
    """Return the signed amount found in ``text``, or None."""
    match = find_amount(text)
    return match.value if match else None
