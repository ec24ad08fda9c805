"""Save rendered documents as PDF files.

The rendering is laid out as fixed-width lines on US Letter pages using one
of the PDF base fonts, so no font files need to be embedded.
"""

import io
import logging
from typing import List, Optional

from reportlab.lib.pagesizes import letter
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from .constants import EditorConstants
from .storage import Storage, write_atomic

logger = logging.getLogger(__name__)


class PdfStorage(Storage):
    """Storage backend that writes each rendering to a PDF file."""

    def __init__(self, path: str = EditorConstants.DEFAULT_PDF_FILENAME,
                 font_name: str = EditorConstants.PDF_FONT_NAME,
                 font_size: int = EditorConstants.PDF_FONT_SIZE):
        """Initialize PDF storage.

        Raises:
            ValueError: If reportlab does not know the font.
        """
        self.path = path
        self._configure_font(font_name)
        self.font_size = font_size
        self.line_height = font_size
        self.page_width, self.page_height = letter
        self.margin = EditorConstants.PDF_MARGIN

    def _configure_font(self, font_name: str) -> None:
        # Base fonts are registered lazily on first lookup
        try:
            pdfmetrics.getFont(font_name)
        except KeyError as e:
            raise ValueError(f"Unknown PDF font {font_name!r}") from e
        self.font_name = font_name

    def save(self, data: str) -> None:
        unprintable: set[str] = set()
        write_atomic(self.path, self.generate_pdf(data, unprintable))
        if unprintable:
            logger.warning(
                f"{len(unprintable)} unprintable character(s) "
                f"replaced with '?' in {self.path}"
            )
        logger.info(f"Document saved to {self.path}")

    def lines_per_page(self) -> int:
        usable = self.page_height - 2 * self.margin
        return max(1, int(usable // self.line_height))

    def paginate(self, data: str) -> List[List[str]]:
        """Split a rendering into pages of tab-expanded lines.

        An empty rendering yields a single empty page.
        """
        lines = [line.expandtabs(EditorConstants.TAB_WIDTH) for line in data.split("\n")]
        per_page = self.lines_per_page()
        return [lines[i:i + per_page] for i in range(0, len(lines), per_page)]

    def generate_pdf(self, data: str, unprintable: Optional[set[str]] = None) -> bytes:
        """Lay out a rendering and return the complete PDF document.

        Args:
            data: The rendered document.
            unprintable: If given, collects characters replaced with '?'.
        """
        if unprintable is None:
            unprintable = set()
        pdf_buffer = io.BytesIO()
        c = canvas.Canvas(pdf_buffer, pagesize=letter)

        for page in self.paginate(data):
            c.setFont(self.font_name, self.font_size)
            # Baseline of the first line sits one line below the top margin
            y_position = self.page_height - self.margin - self.line_height
            for line in page:
                if line:
                    c.drawString(self.margin, y_position,
                                 self._make_pdf_safe(line, unprintable))
                y_position -= self.line_height
            c.showPage()

        c.save()
        return pdf_buffer.getvalue()

    @staticmethod
    def _make_pdf_safe(text: str, unprintable: set[str]) -> str:
        """Replace characters the base fonts cannot show with '?'.

        The built-in fonts cover Windows-1252.
        """
        result = []
        for char in text:
            try:
                char.encode('cp1252')
                result.append(char)
            except UnicodeEncodeError:
                unprintable.add(char)
                result.append('?')
        return ''.join(result)

    def __repr__(self) -> str:
        return f"PdfStorage({self.path!r})"
