"""Visual line reconstruction from positioned PDF text fragments.

PDF text comes out as loose runs with coordinates rather than lines. Runs
printed on the same baseline belong to the same visual line, so fragments
are grouped by their rounded vertical position.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextFragment:
    """A run of text and its vertical position on the page (PDF user space)."""

    text: str
    y: float


@dataclass(frozen=True)
class Page:
    """One decoded page, fragments in content-stream order."""

    number: int
    fragments: tuple[TextFragment, ...] = field(default_factory=tuple)


def page_lines(page: Page) -> list[str]:
    """Reconstruct the lines of a single page, top to bottom."""
    rows: dict[int, list[str]] = {}
    for fragment in page.fragments:
        # Round half up, so 99.5 and 100.4 share a row.
        row_key = math.floor(fragment.y + 0.5)
        rows.setdefault(row_key, []).append(fragment.text)

    lines = []
    # PDF y grows upwards, so the highest row is the top of the page.
    for row_key in sorted(rows, reverse=True):
        line = " ".join(rows[row_key]).strip()
        if line:
            lines.append(line)
    return lines


def reconstruct_lines(pages: Iterable[Page]) -> list[str]:
    """Reconstruct visual lines for every page, in page order."""
    lines: list[str] = []
    for page in pages:
        lines.extend(page_lines(page))
    return lines
