import pytest

from pdfcompare.compare import PixelBuffer
from pdfcompare.errors import RenderError


class FakeRenderer:
    """Serves pre-built pages instead of rasterizing a document."""

    def __init__(self, pages, fail_on=None):
        self.pages = pages
        self.fail_on = fail_on
        self.rendered = []

    @property
    def page_count(self):
        return len(self.pages)

    def render_page(self, page_index, dpi=300):
        if page_index == self.fail_on:
            raise RenderError(f"page {page_index} is corrupt")
        self.rendered.append(page_index)
        return self.pages[page_index].copy()


@pytest.fixture
def make_renderer():
    return FakeRenderer


@pytest.fixture
def white_page():
    def _make(width=30, height=40):
        return PixelBuffer.blank(width, height)

    return _make


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("PDFCOMPARE_HOME", str(tmp_path / "config-home"))


@pytest.fixture
def make_pdf(tmp_path):
    """Write a small PDF with one page per text entry."""
    fitz = pytest.importorskip("fitz")

    def _make(name, texts, width=72, height=72):
        path = tmp_path / name
        doc = fitz.open()
        for text in texts:
            page = doc.new_page(width=width, height=height)
            if text:
                page.insert_text((8, 40), text, fontsize=14)
        doc.save(path)
        doc.close()
        return path

    return _make
