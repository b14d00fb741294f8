"""Pixel diffing of rendered pages and result reporting."""

from .pixels import (
    BLACK,
    WHITE,
    PixelBuffer,
    clamp,
    darkness,
    fade,
    fade_sample,
    pack_rgb,
)
from .result import (
    CompareResult,
    ComparisonResult,
    DifferentPage,
    EqualPage,
    PageVerdict,
)
from .diff import (
    MARKER_RGB,
    MARKER_WIDTH,
    compare_page,
    diff_images,
    highlight,
    draw_markers,
)
from .reconcile import (
    BORDER_WIDTH,
    EXTRA_RGB,
    MISSING_RGB,
    draw_border,
    reconcile_pages,
)
from .report import (
    write_diff_images,
    write_diff_pdf,
    write_summary,
)

__all__ = [
    # Pixels
    "BLACK",
    "WHITE",
    "PixelBuffer",
    "clamp",
    "darkness",
    "fade",
    "fade_sample",
    "pack_rgb",
    # Result
    "CompareResult",
    "ComparisonResult",
    "DifferentPage",
    "EqualPage",
    "PageVerdict",
    # Diff
    "MARKER_RGB",
    "MARKER_WIDTH",
    "compare_page",
    "diff_images",
    "highlight",
    "draw_markers",
    # Reconcile
    "BORDER_WIDTH",
    "EXTRA_RGB",
    "MISSING_RGB",
    "draw_border",
    "reconcile_pages",
    # Report
    "write_diff_images",
    "write_diff_pdf",
    "write_summary",
]
