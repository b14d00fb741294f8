"""PDF page rasterization with PyMuPDF."""

from __future__ import annotations

import logging
from pathlib import Path

import fitz  # PyMuPDF
import numpy as np

from pdfcompare.compare.pixels import PixelBuffer
from pdfcompare.errors import RenderError

from .base import DEFAULT_DPI, validate_dpi

logger = logging.getLogger(__name__)


def _pixmap_to_buffer(pix: fitz.Pixmap) -> PixelBuffer:
    """Pack an RGB pixmap into a pixel buffer.

    Rows may be padded, so the sample bytes are cut down to ``width * 3``
    per row before unpacking.
    """
    rows = np.frombuffer(pix.samples, dtype=np.uint8).reshape(pix.height, pix.stride)
    rgb = rows[:, : pix.width * 3].reshape(pix.height, pix.width, 3)
    return PixelBuffer.from_rgb_array(rgb)


class PdfRenderer:
    """Renders pages of a single PDF document.

    Use as a context manager, or call ``close()`` when done.

    Args:
        source: Path to a PDF file, or the PDF's raw bytes.

    Raises:
        RenderError: If the document cannot be opened.
    """

    def __init__(self, source: Path | str | bytes) -> None:
        self.name = "<bytes>" if isinstance(source, bytes) else str(source)
        try:
            if isinstance(source, bytes):
                self._doc = fitz.open(stream=source, filetype="pdf")
            else:
                self._doc = fitz.open(Path(source))
        except Exception as exc:
            raise RenderError(f"Failed to open PDF: {self.name}") from exc
        logger.debug("Opened %s (%d pages)", self.name, len(self._doc))

    @property
    def page_count(self) -> int:
        return len(self._doc)

    def render_page(self, page_index: int, dpi: int = DEFAULT_DPI) -> PixelBuffer:
        """Render one page to a pixel buffer.

        Args:
            page_index: Zero-based page index.
            dpi: Dots per inch for rasterization (72-600, default 300).

        Returns:
            The rendered page.

        Raises:
            RenderError: If the page does not exist or fails to render.
        """
        validate_dpi(dpi)
        if page_index < 0 or page_index >= self.page_count:
            raise RenderError(
                f"{self.name} has no page {page_index} ({self.page_count} pages)"
            )
        try:
            page = self._doc.load_page(page_index)
            pix = page.get_pixmap(dpi=dpi, colorspace=fitz.csRGB, alpha=False)
        except Exception as exc:
            raise RenderError(
                f"Failed to render page {page_index + 1} of {self.name}: {exc}"
            ) from exc
        return _pixmap_to_buffer(pix)

    def close(self) -> None:
        self._doc.close()

    def __enter__(self) -> "PdfRenderer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

