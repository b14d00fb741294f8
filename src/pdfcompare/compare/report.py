"""Writing comparison results to disk."""

import io
import json
from pathlib import Path

import fitz  # PyMuPDF
from PIL import Image

from .result import ComparisonResult, DifferentPage

# Resolution assumed when sizing PDF pages from pixel images
REPORT_DPI = 300


def page_image(verdict) -> Image.Image:
    """Return the image that represents a verdict in a report.

    The diff image for different pages, the rendered page for equal ones.
    """
    if isinstance(verdict, DifferentPage):
        return verdict.diff.to_image()
    return verdict.image.to_image()


def images_to_pdf(images: list[Image.Image], output_path: Path, dpi: int = REPORT_DPI) -> None:
    """Convert a list of PIL images to a PDF.

    Args:
        images: List of PIL images.
        output_path: Path to save the PDF.
        dpi: Resolution used to convert pixels to points.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = fitz.open()
    try:
        for img in images:
            img_bytes = io.BytesIO()
            img.save(img_bytes, format="PNG")

            # 72 points per inch
            width_pt = img.width * 72 / dpi
            height_pt = img.height * 72 / dpi

            page = doc.new_page(width=width_pt, height=height_pt)
            rect = fitz.Rect(0, 0, width_pt, height_pt)
            page.insert_image(rect, stream=img_bytes.getvalue())

        doc.save(str(output_path))
    finally:
        doc.close()


def write_diff_pdf(result: ComparisonResult, output_path: Path, dpi: int = REPORT_DPI) -> Path:
    """Write one PDF page per verdict.

    Args:
        result: Comparison result.
        output_path: Path to save the PDF.
        dpi: Resolution the pages were rendered at.

    Returns:
        The written path.

    Raises:
        ValueError: If the result has no pages.
    """
    if not result.pages:
        raise ValueError("Cannot write a PDF for a result without pages")
    images_to_pdf([page_image(verdict) for verdict in result], output_path, dpi=dpi)
    return output_path


def write_diff_images(
    result: ComparisonResult,
    out_dir: Path,
    include_sources: bool = False,
) -> list[Path]:
    """Save the diff image of every different page as PNG.

    Files are named ``page_0001.png`` (1-based). With ``include_sources``
    the expected and actual renders are written alongside as
    ``page_0001-expected.png`` and ``page_0001-actual.png``.

    Args:
        result: Comparison result.
        out_dir: Directory for the images, created if needed.
        include_sources: Also write the expected and actual images.

    Returns:
        Paths of all written files.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for page in result.different_pages:
        stem = f"page_{page.page_index + 1:04d}"
        images = {stem: page.diff}
        if include_sources:
            images[f"{stem}-expected"] = page.expected
            images[f"{stem}-actual"] = page.actual
        for name, buffer in images.items():
            path = out_dir / f"{name}.png"
            buffer.to_image().save(path)
            written.append(path)
    return written


def write_summary(result: ComparisonResult, output_path: Path) -> Path:
    """Write the result summary as JSON."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(result.summary(), indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
