"""Purchase / payment / other classification."""

import re
from decimal import Decimal

from statement_import.schemas.internal import TransactionType

# Ordering matters: earlier matches win.
_TYPE_RULES: list[tuple[TransactionType, re.Pattern[str]]] = [
    ("payment", re.compile(r"pagamento|pgto|pag\b", re.IGNORECASE)),
    ("other", re.compile(r"cr[eé]dito|estorno|devolu", re.IGNORECASE)),
]


def classify_transaction(description: str, amount: Decimal) -> TransactionType:
    """Label a transaction from its description and signed amount.

    Negative amounts are always payments. Otherwise the first keyword rule
    that matches decides, and anything unmatched is a purchase.
    """
    if amount < 0:
        return "payment"

    for transaction_type, pattern in _TYPE_RULES:
        if pattern.search(description):
            return transaction_type

    return "purchase"
