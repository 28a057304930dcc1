import io
import sys
from pathlib import Path

import pytest
from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject

sys.path.append(str(Path(__file__).parents[1] / "src"))

from statement_import.config import Settings
from statement_import.parsers.layout import Page, TextFragment


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the developer's environment."""
    return Settings(_env_file=None)


@pytest.fixture
def make_page():
    """Build a synthetic decoded page from (text, y) pairs."""

    def _make(number: int, *fragments: tuple[str, float]) -> Page:
        return Page(
            number=number,
            fragments=tuple(TextFragment(text=text, y=y) for text, y in fragments),
        )

    return _make


@pytest.fixture
def make_pdf():
    """Build a one-page PDF with a Helvetica text layer.

    Each line is ``(y, [run, ...])``; runs are drawn left to right on the
    same baseline, 100pt apart.
    """

    def _make(*lines: tuple[float, list[str]]) -> bytes:
        writer = PdfWriter()
        page = writer.add_blank_page(width=612, height=792)
        font = DictionaryObject(
            {
                NameObject("/Type"): NameObject("/Font"),
                NameObject("/Subtype"): NameObject("/Type1"),
                NameObject("/BaseFont"): NameObject("/Helvetica"),
            }
        )
        page[NameObject("/Resources")] = DictionaryObject(
            {NameObject("/Font"): DictionaryObject({NameObject("/F1"): writer._add_object(font)})}
        )

        ops = []
        for y, runs in lines:
            moves = [f"72 {y} Td ({runs[0]}) Tj"]
            moves += [f"100 0 Td ({run}) Tj" for run in runs[1:]]
            ops.append("BT /F1 12 Tf " + " ".join(moves) + " ET")
        stream = DecodedStreamObject()
        stream.set_data("\n".join(ops).encode("latin-1"))
        page[NameObject("/Contents")] = writer._add_object(stream)

        buf = io.BytesIO()
        writer.write(buf)
        return buf.getvalue()

    return _make
