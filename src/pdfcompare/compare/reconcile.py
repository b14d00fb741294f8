"""Verdicts for trailing pages that exist in only one document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .pixels import BLACK, PixelBuffer
from .result import CompareResult, DifferentPage

if TYPE_CHECKING:
    from pdfcompare.render import PageRenderer

logger = logging.getLogger(__name__)

# Border colors (packed RGB)
MISSING_RGB = 0xFF0000  # Page exists in expected only
EXTRA_RGB = 0x00FF00  # Page exists in actual only
BORDER_WIDTH = 20


def draw_border(image: PixelBuffer, color: int, width: int = BORDER_WIDTH) -> PixelBuffer:
    """Paint a solid band along the top rows and left columns of an image.

    Args:
        image: Buffer to paint. Modified in place and returned.
        color: Packed RGB border color.
        width: Band width in pixels, clipped to the image.

    Returns:
        The same buffer.
    """
    image.samples[:width, :] = color
    image.samples[:, :width] = color
    return image


def reconcile_pages(
    renderer: PageRenderer,
    start_index: int,
    result: CompareResult,
    expected_is_longer: bool,
    dpi: int,
) -> list[DifferentPage]:
    """Record every page of the longer document past ``start_index``.

    Each page is rendered, bordered (red when the actual document is missing
    it, green when it is an extra page) and paired with an all-black blank of
    the same size. The bordered render doubles as the diff image.

    Args:
        renderer: Renderer for the longer document.
        start_index: Page count of the shorter document.
        result: Accumulator receiving the verdicts.
        expected_is_longer: True if the expected document is the longer one.
        dpi: Render resolution.

    Returns:
        The recorded verdicts.

    Raises:
        RenderError: If a page cannot be rendered.
    """
    color = MISSING_RGB if expected_is_longer else EXTRA_RGB
    kind = "missing" if expected_is_longer else "extra"

    verdicts = []
    for page_index in range(start_index, renderer.page_count):
        image = draw_border(renderer.render_page(page_index, dpi), color)
        blank = PixelBuffer.blank(image.width, image.height, fill=BLACK)
        logger.debug("Page %d: %s", page_index, kind)
        if expected_is_longer:
            verdict = result.record_different(page_index, image, blank, image.copy(), kind)
        else:
            verdict = result.record_different(page_index, blank, image, image.copy(), kind)
        verdicts.append(verdict)
    return verdicts
