"""Page rendering backends."""

from .base import DEFAULT_DPI, DPI_MAX, DPI_MIN, PageRenderer, validate_dpi
from .pdf import PdfRenderer

__all__ = [
    "DEFAULT_DPI",
    "DPI_MAX",
    "DPI_MIN",
    "PageRenderer",
    "PdfRenderer",
    "validate_dpi",
]
