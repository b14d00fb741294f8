import pytest

from pdfcompare.compare import CompareResult, DifferentPage, EqualPage, PixelBuffer


def _image():
    return PixelBuffer.blank(4, 4)


def test_records_in_order():
    acc = CompareResult()
    acc.record_equal(0, _image())
    acc.record_different(1, _image(), _image(), _image())
    acc.record_different(2, _image(), _image(), _image(), kind="extra")

    result = acc.finish()

    assert len(result) == 3
    assert [page.page_index for page in result] == [0, 1, 2]
    assert isinstance(result[0], EqualPage)
    assert isinstance(result[1], DifferentPage)
    assert not result.is_equal
    assert [page.page_index for page in result.different_pages] == [1, 2]


def test_empty_result_is_equal():
    result = CompareResult().finish()
    assert result.is_equal
    assert result.page_count == 0


def test_rejects_duplicate_index():
    acc = CompareResult()
    acc.record_equal(0, _image())
    with pytest.raises(ValueError):
        acc.record_equal(0, _image())


def test_rejects_gaps():
    acc = CompareResult()
    with pytest.raises(ValueError):
        acc.record_different(1, _image(), _image(), _image())


def test_rejects_records_after_finish():
    acc = CompareResult()
    acc.finish()
    with pytest.raises(RuntimeError):
        acc.record_equal(0, _image())


def test_result_is_immutable():
    acc = CompareResult()
    acc.record_equal(0, _image())
    result = acc.finish()
    assert isinstance(result.pages, tuple)
    with pytest.raises(AttributeError):
        result.pages = ()


def test_summary():
    acc = CompareResult()
    acc.record_equal(0, _image())
    acc.record_different(1, _image(), _image(), PixelBuffer(6, 5), kind="missing")

    assert acc.finish().summary() == {
        "equal": False,
        "page_count": 2,
        "different_pages": [
            {"page": 2, "kind": "missing", "width": 6, "height": 5},
        ],
    }
