"""Interface shared by page renderers."""

from __future__ import annotations

from typing import Protocol

from pdfcompare.compare.pixels import PixelBuffer
from pdfcompare.errors import ConfigError

DPI_MIN = 72
DPI_MAX = 600
DEFAULT_DPI = 300


def validate_dpi(dpi: int) -> int:
    """Return ``dpi`` if it lies in the supported range.

    Raises:
        ConfigError: If DPI is out of range.
    """
    if dpi < DPI_MIN or dpi > DPI_MAX:
        raise ConfigError(f"DPI must be between {DPI_MIN} and {DPI_MAX}, got {dpi}")
    return dpi


class PageRenderer(Protocol):
    """Turns the pages of one document into pixel buffers."""

    @property
    def page_count(self) -> int: ...

    def render_page(self, page_index: int, dpi: int = DEFAULT_DPI) -> PixelBuffer:
        """Render a zero-based page. Raises RenderError on failure."""
        ...
