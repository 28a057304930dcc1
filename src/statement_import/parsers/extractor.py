"""PDF text extraction wrapper using pypdf.

This module is the only place that touches the PDF library. It turns PDF
bytes into Page objects holding positioned text fragments, so the rest of
the pipeline can be tested with synthetic pages and the PDF library can be
swapped without touching the parsers.
"""

import io
import logging
from typing import Any

from pypdf import PdfReader

from statement_import.core.exceptions import PDFExtractionError
from statement_import.parsers.layout import Page, TextFragment

logger = logging.getLogger(__name__)


def fragment_y(cm: list[float], tm: list[float]) -> float:
    """Vertical position of a text run: the ``f`` entry of ``tm x cm``."""
    return tm[4] * cm[1] + tm[5] * cm[3] + cm[5]


class PDFExtractor:
    """Wrapper around pypdf for positioned text extraction.

    Pages are decoded one after another in page order. All processing
    happens in memory.

    Example:
        >>> extractor = PDFExtractor()
        >>> pages = extractor.extract(pdf_bytes)
        >>> pages[0].fragments[0].text
        'FATURA'
    """

    def extract(self, pdf_bytes: bytes, password: str | None = None) -> list[Page]:
        """Decode a PDF into pages of positioned text fragments.

        Args:
            pdf_bytes: PDF file content as bytes
            password: Optional password for encrypted PDFs

        Returns:
            List of Page objects in page order

        Raises:
            PDFExtractionError: PARSE_002 if the file is empty or corrupted,
                PARSE_003 if a password is required, PARSE_004 if the
                password is wrong
        """
        if not pdf_bytes:
            raise PDFExtractionError("PARSE_002", {"reason": "empty file"})

        normalized_password = password.strip() if isinstance(password, str) else None
        if normalized_password == "":
            normalized_password = None

        try:
            reader = PdfReader(io.BytesIO(pdf_bytes))
        except Exception as e:
            raise PDFExtractionError("PARSE_002", {"reason": str(e)}) from e

        if reader.is_encrypted:
            self._decrypt(reader, normalized_password)

        try:
            pages = [
                self._read_page(number, page)
                for number, page in enumerate(reader.pages, start=1)
            ]
        except Exception as e:
            raise PDFExtractionError("PARSE_002", {"reason": str(e)}) from e

        logger.debug(
            "Decoded %d page(s), %d fragment(s)",
            len(pages),
            sum(len(p.fragments) for p in pages),
        )
        return pages

    @staticmethod
    def _decrypt(reader: PdfReader, password: str | None) -> None:
        # Some PDFs are encrypted but use an empty user password.
        try:
            ok = reader.decrypt(password or "")
        except Exception as e:
            raise PDFExtractionError("PARSE_002", {"reason": str(e)}) from e

        if not ok:
            if password is None:
                raise PDFExtractionError("PARSE_003")
            raise PDFExtractionError("PARSE_004")

    @staticmethod
    def _read_page(number: int, page: Any) -> Page:
        fragments: list[TextFragment] = []

        def visitor(text: str, cm: list[float], tm: list[float], font_dict: Any, font_size: Any) -> None:
            text = text.replace("\n", " ").strip()
            if text:
                fragments.append(TextFragment(text=text, y=fragment_y(cm, tm)))

        page.extract_text(visitor_text=visitor)
        return Page(number=number, fragments=tuple(fragments))
