"""Tests for size filters.

Tests:
- size_filter: threshold on disk (shape A) and from attributes (shape C)
- size_range_filter: inclusive range
- validation
"""

from pathlib import Path

import pytest

from fsfilter.domain.visit_result import VisitResult
from fsfilter.infrastructure.filters.composite import AndFileFilter
from fsfilter.infrastructure.filters.size import SizeFileFilter, size_filter, size_range_filter
from tests.factories import DEFAULT_TEST_PATH, make_attributes


class TestSizeFilter:
    """Tests for size_filter."""

    def test_accept_larger(self, tmp_path: Path) -> None:
        """Default accepts size >= threshold."""
        small = tmp_path / "small.bin"
        small.write_bytes(b"ab")
        big = tmp_path / "big.bin"
        big.write_bytes(b"abcd")

        flt = size_filter(3)

        assert flt(small) is False
        assert flt(big) is True

    def test_threshold_inclusive(self, tmp_path: Path) -> None:
        """Exactly threshold bytes is larger-or-equal."""
        f = tmp_path / "three.bin"
        f.write_bytes(b"abc")

        assert size_filter(3)(f) is True
        assert size_filter(3, accept_larger=False)(f) is False

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Shape A stats the file: missing file raises OSError."""
        with pytest.raises(FileNotFoundError):
            size_filter(1)(tmp_path / "missing")

    def test_shape_c_reads_attributes(self) -> None:
        """Shape C uses attributes.size, no filesystem access."""
        flt = size_filter(100)

        assert flt.accept_path(DEFAULT_TEST_PATH, make_attributes(100)) is VisitResult.CONTINUE
        assert flt.accept_path(DEFAULT_TEST_PATH, make_attributes(99)) is VisitResult.TERMINATE

    def test_negative_raises(self) -> None:
        """Negative threshold is rejected."""
        with pytest.raises(ValueError, match="size must be >= 0"):
            SizeFileFilter(-1)

    def test_render(self) -> None:
        """Renders comparison and threshold."""
        assert str(size_filter(10)) == "SizeFileFilter(>=10)"
        assert str(size_filter(10, accept_larger=False)) == "SizeFileFilter(<10)"


class TestSizeRangeFilter:
    """Tests for size_range_filter."""

    def test_inclusive_range(self) -> None:
        """minimum <= size <= maximum."""
        flt = size_range_filter(10, 20)

        def visit(size: int) -> VisitResult:
            return flt.accept_path(DEFAULT_TEST_PATH, make_attributes(size))

        assert visit(9) is VisitResult.TERMINATE
        assert visit(10) is VisitResult.CONTINUE
        assert visit(20) is VisitResult.CONTINUE
        assert visit(21) is VisitResult.TERMINATE

    def test_is_and_filter(self) -> None:
        """Range is an AndFileFilter of both bounds."""
        flt = size_range_filter(1, 2)

        assert isinstance(flt, AndFileFilter)
        assert flt.get_filters() == (SizeFileFilter(1), SizeFileFilter(3, accept_larger=False))

    def test_inverted_range_raises(self) -> None:
        """minimum > maximum is rejected."""
        with pytest.raises(ValueError, match="must be <="):
            size_range_filter(5, 4)
