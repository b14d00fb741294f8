"""Per-page verdicts and the comparison result they add up to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from .pixels import PixelBuffer

DifferenceKind = Literal["changed", "missing", "extra"]


@dataclass(frozen=True)
class EqualPage:
    page_index: int
    image: PixelBuffer

    @property
    def is_equal(self) -> bool:
        return True


@dataclass(frozen=True)
class DifferentPage:
    page_index: int
    expected: PixelBuffer
    actual: PixelBuffer
    diff: PixelBuffer
    kind: DifferenceKind = "changed"

    @property
    def is_equal(self) -> bool:
        return False


PageVerdict = Union[EqualPage, DifferentPage]


@dataclass(frozen=True)
class ComparisonResult:
    """Ordered, immutable page verdicts for a document pair."""

    pages: tuple[PageVerdict, ...] = ()

    @property
    def is_equal(self) -> bool:
        return all(page.is_equal for page in self.pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def different_pages(self) -> list[DifferentPage]:
        return [page for page in self.pages if isinstance(page, DifferentPage)]

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self):
        return iter(self.pages)

    def __getitem__(self, page_index: int) -> PageVerdict:
        return self.pages[page_index]

    def summary(self) -> dict:
        """Summarize the result as a JSON-serializable dict."""
        return {
            "equal": self.is_equal,
            "page_count": self.page_count,
            "different_pages": [
                {
                    "page": page.page_index + 1,
                    "kind": page.kind,
                    "width": page.diff.width,
                    "height": page.diff.height,
                }
                for page in self.different_pages
            ],
        }


class CompareResult:
    """Collects page verdicts in page order.

    Pages must be recorded exactly once, starting at 0 with no gaps.
    """

    def __init__(self) -> None:
        self._pages: list[PageVerdict] = []
        self._finished = False

    def _check_index(self, page_index: int) -> None:
        if self._finished:
            raise RuntimeError("Cannot record pages after finish()")
        expected_index = len(self._pages)
        if page_index != expected_index:
            raise ValueError(
                f"Page {page_index} recorded out of order, expected page {expected_index}"
            )

    def record_equal(self, page_index: int, image: PixelBuffer) -> EqualPage:
        self._check_index(page_index)
        verdict = EqualPage(page_index, image)
        self._pages.append(verdict)
        return verdict

    def record_different(
        self,
        page_index: int,
        expected: PixelBuffer,
        actual: PixelBuffer,
        diff: PixelBuffer,
        kind: DifferenceKind = "changed",
    ) -> DifferentPage:
        self._check_index(page_index)
        verdict = DifferentPage(page_index, expected, actual, diff, kind)
        self._pages.append(verdict)
        return verdict

    def finish(self) -> ComparisonResult:
        """Close the accumulator and return the immutable result."""
        self._finished = True
        return ComparisonResult(tuple(self._pages))
