"""Pattern tables shared by the CSV and PDF statement parsers.

Every table here is an ordered tuple and is evaluated top to bottom; the
first entry that matches wins. Reordering entries changes parsing results.
"""

import re
from collections.abc import Callable
from datetime import date
from typing import NamedTuple

# Lines that never carry transaction data. Matched against the stripped line.
NOISE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Barcodes and payment slips
    re.compile(r"^\d{5}\.\d{5}\s+\d{5}\.\d{6}"),
    re.compile(r"^\d{47,48}$"),
    re.compile(r"linha\s+digit[aá]vel", re.IGNORECASE),
    re.compile(r"c[oó]digo\s+de\s+barras", re.IGNORECASE),
    # Legal and informational text
    re.compile(r"central\s+de\s+atendimento", re.IGNORECASE),
    re.compile(r"ouvidoria", re.IGNORECASE),
    re.compile(r"\bsac\s+\d", re.IGNORECASE),
    re.compile(r"www\.\w+\.com", re.IGNORECASE),
    re.compile(r"\bcnpj[:\s]", re.IGNORECASE),
    re.compile(r"\bcpf[:\s]", re.IGNORECASE),
    re.compile(r"ag[eê]ncia|conta\s+corrente", re.IGNORECASE),
    re.compile(r"\bpag\.\s*\d+", re.IGNORECASE),
    re.compile(r"p[aá]gina\s+\d", re.IGNORECASE),
    re.compile(r"demonstrativo|extrato\s+de", re.IGNORECASE),
    # Financial boilerplate
    re.compile(r"total\s+(?:da\s+)?fatura", re.IGNORECASE),
    re.compile(r"encargos\s+rotat", re.IGNORECASE),
    re.compile(r"pagamento\s+m[ií]nimo", re.IGNORECASE),
    re.compile(r"vencimento", re.IGNORECASE),
    re.compile(r"limite\s+(?:de\s+cr[eé]dito|dispon[ií]vel|total)", re.IGNORECASE),
    re.compile(r"anuidade", re.IGNORECASE),
    re.compile(r"taxa\s+de\s+juros", re.IGNORECASE),
    re.compile(r"\biof\b", re.IGNORECASE),
    re.compile(r"\bcet\b", re.IGNORECASE),
    re.compile(r"\bcrc\b", re.IGNORECASE),
    # Digits and punctuation only
    re.compile(r"^[\d\s.,/\-]+$"),
    # Too short to describe anything
    re.compile(r"^.{0,4}$"),
)

# Headings that usually open a transaction listing.
SECTION_HEADER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"transa[çc][oõ]es", re.IGNORECASE),
    re.compile(r"lan[çc]amentos", re.IGNORECASE),
    re.compile(r"compras", re.IGNORECASE),
    re.compile(r"despesas", re.IGNORECASE),
    re.compile(r"pagamentos", re.IGNORECASE),
    re.compile(r"nacionais", re.IGNORECASE),
    re.compile(r"internacionais", re.IGNORECASE),
)

# Brazilian Real amounts. Grouped thousands must be tried first, otherwise
# "1.234,56" would be read as "234,56".
AMOUNT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?<![\d.,])-?R?\$?\s*\d{1,3}(?:\.\d{3})+,\d{2}(?!\d)"),
    re.compile(r"(?<![\d.,])-?R?\$?\s*\d+,\d{2}(?!\d)"),
)

# "current/total" installment markers.
INSTALLMENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d{1,2})\s*/\s*(\d{1,2})"),
    re.compile(r"(\d{1,2})\s*de\s*(\d{1,2})", re.IGNORECASE),
    re.compile(r"parcela\s*(\d{1,2})\s*(?:de|/)\s*(\d{1,2})", re.IGNORECASE),
    re.compile(r"parc\.\s*(\d{1,2})\s*(?:de|/)\s*(\d{1,2})", re.IGNORECASE),
)

PT_BR_MONTHS: dict[str, int] = {
    "JAN": 1,
    "FEV": 2,
    "MAR": 3,
    "ABR": 4,
    "MAI": 5,
    "JUN": 6,
    "JUL": 7,
    "AGO": 8,
    "SET": 9,
    "OUT": 10,
    "NOV": 11,
    "DEZ": 12,
}


class DateStrategy(NamedTuple):
    """A date shape and the function that turns its match into an ISO date."""

    name: str
    regex: re.Pattern[str]
    normalize: Callable[[re.Match[str]], str | None]


class DateMatch(NamedTuple):
    iso_date: str
    start: int
    end: int


def _iso(year: int, month: int, day: int) -> str | None:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


def _day_month_year(m: re.Match[str]) -> str | None:
    return _iso(int(m.group(3)), int(m.group(2)), int(m.group(1)))


def _day_month_short_year(m: re.Match[str]) -> str | None:
    return _iso(2000 + int(m.group(3)), int(m.group(2)), int(m.group(1)))


def _day_month_name(m: re.Match[str]) -> str | None:
    # Statements that cross a year boundary get the wrong year here.
    month = PT_BR_MONTHS[m.group(2).upper()]
    return _iso(date.today().year, month, int(m.group(1)))


def _year_month_day(m: re.Match[str]) -> str | None:
    return _iso(int(m.group(1)), int(m.group(2)), int(m.group(3)))


DATE_STRATEGIES: tuple[DateStrategy, ...] = (
    DateStrategy("DD/MM/YYYY", re.compile(r"(\d{2})/(\d{2})/(\d{4})"), _day_month_year),
    DateStrategy("DD/MM/YY", re.compile(r"(\d{2})/(\d{2})/(\d{2})"), _day_month_short_year),
    DateStrategy(
        "DD MON",
        re.compile(
            r"(\d{1,2})\s+(" + "|".join(PT_BR_MONTHS) + r")\b",
            re.IGNORECASE,
        ),
        _day_month_name,
    ),
    DateStrategy("YYYY-MM-DD", re.compile(r"(\d{4})-(\d{2})-(\d{2})"), _year_month_day),
    DateStrategy("DD.MM.YYYY", re.compile(r"(\d{2})\.(\d{2})\.(\d{4})"), _day_month_year),
)


def match_date(text: str) -> DateMatch | None:
    """Find the first date in ``text`` using DATE_STRATEGIES in order.

    Args:
        text: A statement line or CSV field

    Returns:
        The ISO date and the span it was read from, or None
    """
    for strategy in DATE_STRATEGIES:
        match = strategy.regex.search(text)
        if not match:
            continue
        iso_date = strategy.normalize(match)
        if iso_date is not None:
            return DateMatch(iso_date, match.start(), match.end())
    return None
