"""Pixel diff of two rendered pages."""

from __future__ import annotations

import logging

import numpy as np

from .pixels import PixelBuffer, darkness, fade_sample, pack_rgb
from .result import CompareResult, PageVerdict

logger = logging.getLogger(__name__)

# Diff image colors (packed RGB)
MARKER_RGB = 0xFF00FF  # Magenta cross-hair at every differing pixel
MARKER_WIDTH = 20
MIN_TINT = 50
MAX_TINT = 255


def _expand(buffer: PixelBuffer, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    """Place a buffer's samples on a ``width`` x ``height`` canvas.

    Returns:
        Tuple of (samples, in_bounds). Samples outside the source buffer
        are 0 and flagged False in ``in_bounds``.
    """
    samples = np.zeros((height, width), dtype=np.uint32)
    in_bounds = np.zeros((height, width), dtype=bool)
    samples[: buffer.height, : buffer.width] = buffer.samples
    in_bounds[: buffer.height, : buffer.width] = True
    return samples, in_bounds


def highlight(expected: np.ndarray, actual: np.ndarray) -> np.ndarray:
    """Pick the highlight color for differing samples.

    Red scaled by the expected darkness where expected is darker, green
    scaled by the actual darkness otherwise.
    """
    expected_dark = darkness(expected)
    actual_dark = darkness(actual)
    red_tint = pack_rgb(np.clip(expected_dark // 3, MIN_TINT, MAX_TINT), 0, 0)
    green_tint = pack_rgb(0, np.clip(actual_dark // 3, MIN_TINT, MAX_TINT), 0)
    return np.where(expected_dark > actual_dark, red_tint, green_tint).astype(np.uint32)


def draw_markers(
    diff: PixelBuffer,
    differ: np.ndarray,
    color: int = MARKER_RGB,
    width: int = MARKER_WIDTH,
) -> PixelBuffer:
    """Draw a cross-hair at every flagged pixel of ``diff``.

    Each flagged ``(x, y)`` paints ``(x + i, y)`` and ``(x, y + i)`` for
    ``i`` in ``[0, width)``, clipped to the image.

    Args:
        diff: Buffer to draw on. Modified in place and returned.
        differ: Boolean mask of shape ``(height, width)`` marking differences.
        color: Packed RGB marker color.
        width: Length of each tick in pixels.

    Returns:
        The same buffer, with markers drawn.
    """
    rows, cols = differ.shape
    marks = np.zeros_like(differ)
    for i in range(width):
        if i < cols:
            marks[:, i:] |= differ[:, : cols - i]
        if i < rows:
            marks[i:, :] |= differ[: rows - i, :]
    diff.samples[marks] = color
    return diff


def diff_images(expected: PixelBuffer, actual: PixelBuffer) -> PixelBuffer | None:
    """Build a difference image for two page renders.

    Matching pixels are faded towards white. Differing pixels are tinted
    red (expected has more ink) or green (actual has more ink), then
    locator markers are drawn over the finished image; a marker starts
    on its own pixel, so it covers that pixel's tint. Pixels present in
    only one image always count as differences.

    Args:
        expected: Expected page render.
        actual: Actual page render.

    Returns:
        The diff image, sized to the larger of both inputs, or None when
        the images are identical.
    """
    width = max(expected.width, actual.width)
    height = max(expected.height, actual.height)

    expected_samples, expected_in = _expand(expected, width, height)
    actual_samples, actual_in = _expand(actual, width, height)

    differ = (expected_samples != actual_samples) | ~(expected_in & actual_in)
    if not differ.any():
        return None

    samples = np.where(
        differ,
        highlight(expected_samples, actual_samples),
        fade_sample(expected_samples),
    ).astype(np.uint32)
    return draw_markers(PixelBuffer(width, height, samples), differ)


def compare_page(
    page_index: int,
    expected: PixelBuffer,
    actual: PixelBuffer,
    result: CompareResult,
) -> PageVerdict:
    """Diff one page pair and record the verdict.

    Args:
        page_index: Zero-based page index.
        expected: Expected page render.
        actual: Actual page render.
        result: Accumulator receiving the verdict.

    Returns:
        The recorded verdict.
    """
    diff = diff_images(expected, actual)
    if diff is None:
        logger.debug("Page %d: equal", page_index)
        return result.record_equal(page_index, expected)

    logger.debug("Page %d: different (%dx%d)", page_index, diff.width, diff.height)
    return result.record_different(page_index, expected, actual, diff)
