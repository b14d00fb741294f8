"""Page-by-page visual comparison of two documents."""

from __future__ import annotations

import logging
from pathlib import Path

from pdfcompare.compare.diff import compare_page
from pdfcompare.compare.reconcile import reconcile_pages
from pdfcompare.compare.result import CompareResult, ComparisonResult
from pdfcompare.render import DEFAULT_DPI, PageRenderer, PdfRenderer, validate_dpi

logger = logging.getLogger(__name__)

PdfSource = Path | str | bytes


def compare_renderers(
    expected: PageRenderer,
    actual: PageRenderer,
    dpi: int = DEFAULT_DPI,
) -> ComparisonResult:
    """Compare two documents through their renderers.

    Pages both documents have are diffed pairwise. Trailing pages of the
    longer document are then recorded as missing (expected is longer) or
    extra (actual is longer).

    Args:
        expected: Renderer for the expected document.
        actual: Renderer for the actual document.
        dpi: Render resolution.

    Returns:
        One verdict per page of the longer document.

    Raises:
        RenderError: If any page fails to render.
    """
    result = CompareResult()
    min_page_count = min(expected.page_count, actual.page_count)

    for page_index in range(min_page_count):
        expected_image = expected.render_page(page_index, dpi)
        actual_image = actual.render_page(page_index, dpi)
        compare_page(page_index, expected_image, actual_image, result)

    if expected.page_count > min_page_count:
        reconcile_pages(expected, min_page_count, result, expected_is_longer=True, dpi=dpi)
    elif actual.page_count > min_page_count:
        reconcile_pages(actual, min_page_count, result, expected_is_longer=False, dpi=dpi)

    return result.finish()


def _record_identical(renderer: PageRenderer, dpi: int) -> ComparisonResult:
    result = CompareResult()
    for page_index in range(renderer.page_count):
        result.record_equal(page_index, renderer.render_page(page_index, dpi))
    return result.finish()


def _same_source(expected: PdfSource, actual: PdfSource) -> bool:
    if isinstance(expected, bytes) or isinstance(actual, bytes):
        return expected == actual
    return Path(expected).resolve() == Path(actual).resolve()


def compare_pdfs(
    expected: PdfSource,
    actual: PdfSource,
    dpi: int = DEFAULT_DPI,
) -> ComparisonResult:
    """Compare two PDF documents visually.

    When both arguments refer to the same file (or carry the same bytes)
    the document is rendered once and every page is reported equal.

    Args:
        expected: Path to, or bytes of, the expected PDF.
        actual: Path to, or bytes of, the actual PDF.
        dpi: Render resolution (72-600, default 300).

    Returns:
        The comparison result.

    Raises:
        ConfigError: If DPI is out of range.
        RenderError: If either document or any of its pages cannot be rendered.
    """
    validate_dpi(dpi)

    if _same_source(expected, actual):
        logger.info("Expected and actual are the same document")
        with PdfRenderer(expected) as renderer:
            return _record_identical(renderer, dpi)

    with PdfRenderer(expected) as expected_renderer, PdfRenderer(actual) as actual_renderer:
        logger.info(
            "Comparing %s (%d pages) with %s (%d pages) at %d DPI",
            expected_renderer.name,
            expected_renderer.page_count,
            actual_renderer.name,
            actual_renderer.page_count,
            dpi,
        )
        result = compare_renderers(expected_renderer, actual_renderer, dpi)

    logger.info(
        "%d of %d page(s) differ", len(result.different_pages), result.page_count
    )
    return result
