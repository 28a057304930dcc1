"""Line filtering and description cleanup."""

import re

from statement_import.parsers.patterns import NOISE_PATTERNS, SECTION_HEADER_PATTERNS

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_ODD_CHARS = re.compile(r"[^\w\sÀ-ÿ.,\-/()&*#@!?:;'\"]")
_WHITESPACE = re.compile(r"\s+")


def clean_description(text: str) -> str:
    """Strip control characters and symbols, collapse whitespace."""
    text = _CONTROL_CHARS.sub(" ", text)
    text = _ODD_CHARS.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def is_noise_line(line: str) -> bool:
    """Return True if the line is boilerplate that carries no transaction."""
    stripped = line.strip()
    return any(pattern.search(stripped) for pattern in NOISE_PATTERNS)


def is_section_header(line: str) -> bool:
    """Return True if the line looks like the heading of a transaction list."""
    return any(pattern.search(line) for pattern in SECTION_HEADER_PATTERNS)
