"""Installment marker detection ("3/10", "Parcela 3 de 10", ...)."""

from typing import NamedTuple

from statement_import.parsers.patterns import INSTALLMENT_PATTERNS
from statement_import.schemas.internal import MAX_INSTALLMENTS


class Installment(NamedTuple):
    current: int
    total: int


def detect_installment(description: str, max_total: int = MAX_INSTALLMENTS) -> Installment | None:
    """Find an installment marker in a cleaned description.

    Patterns are tried in order; the first one whose numbers satisfy
    ``1 <= current <= total <= max_total`` wins. Conflicting markers later
    in the description are ignored.

    Args:
        description: Cleaned transaction description
        max_total: Largest plausible number of installments

    Returns:
        Installment or None
    """
    max_total = min(max_total, MAX_INSTALLMENTS)
    for pattern in INSTALLMENT_PATTERNS:
        match = pattern.search(description)
        if not match:
            continue
        current, total = int(match.group(1)), int(match.group(2))
        if 1 <= current <= total <= max_total:
            return Installment(current, total)
    return None
