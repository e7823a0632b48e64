"""Tests for AbstractFileFilter shape bridging and PredicateFileFilter.

Tests:
- accept <-> accept_name defaults
- accept_path default via to_visit_result
- predicate_filter adapter
"""

from pathlib import Path

import pytest

from fsfilter.domain.ports.file_filter import ConditionalFileFilter, IOFileFilter
from fsfilter.domain.visit_result import VisitResult
from fsfilter.infrastructure.filters.base import AbstractFileFilter
from fsfilter.infrastructure.filters.composite import AndFileFilter
from fsfilter.infrastructure.filters.predicate import predicate_filter
from tests.factories import StubFilter, make_attributes


class _ByName(AbstractFileFilter):
    """Implements shape B only."""

    def __init__(self) -> None:
        self.seen: list[tuple[Path, str]] = []

    def accept_name(self, directory: Path, name: str) -> bool:
        self.seen.append((directory, name))
        return name == "keep"


class _ByPath(AbstractFileFilter):
    """Implements shape A only."""

    def __init__(self) -> None:
        self.seen: list[Path] = []

    def accept(self, path: Path) -> bool:
        self.seen.append(path)
        return path.name == "keep"


class TestShapeBridging:
    """Tests for default shape delegation."""

    def test_accept_splits_path(self) -> None:
        """accept(path) calls accept_name(parent, name)."""
        flt = _ByName()

        assert flt.accept(Path("/a/b/keep")) is True
        assert flt.seen == [(Path("/a/b"), "keep")]

    def test_accept_name_joins_path(self) -> None:
        """accept_name(dir, name) calls accept(dir / name)."""
        flt = _ByPath()

        assert flt.accept_name(Path("/a"), "keep") is True
        assert flt.seen == [Path("/a/keep")]

    def test_accept_path_defaults_to_accept(self) -> None:
        """accept_path converts accept() to a VisitResult."""
        flt = _ByPath()

        assert flt.accept_path(Path("/a/keep"), make_attributes()) is VisitResult.CONTINUE
        assert flt.accept_path(Path("/a/drop"), make_attributes()) is VisitResult.TERMINATE

    def test_callable(self) -> None:
        """flt(path) is flt.accept(path)."""
        assert _ByPath()(Path("keep")) is True

    def test_default_str_is_class_name(self) -> None:
        """str() defaults to the class name."""
        assert str(_ByPath()) == "_ByPath"


class TestProtocols:
    """Tests for runtime protocol checks."""

    def test_library_filters_are_io_file_filters(self) -> None:
        """AbstractFileFilter subclasses satisfy IOFileFilter."""
        assert isinstance(_ByPath(), IOFileFilter)

    def test_stub_satisfies_protocol(self) -> None:
        """Duck-typed filters satisfy IOFileFilter."""
        assert isinstance(StubFilter(), IOFileFilter)

    def test_composite_is_conditional(self) -> None:
        """AndFileFilter satisfies ConditionalFileFilter, leaves do not."""
        assert isinstance(AndFileFilter(), ConditionalFileFilter)
        assert not isinstance(_ByPath(), ConditionalFileFilter)


class TestPredicateFilter:
    """Tests for predicate_filter."""

    def test_wraps_function(self) -> None:
        """Predicate result decides acceptance."""

        def is_short(path: Path) -> bool:
            return len(path.name) < 5

        flt = predicate_filter(is_short)

        assert flt(Path("a.py")) is True
        assert flt(Path("long_name.py")) is False
        assert str(flt) == "PredicateFileFilter(is_short)"

    def test_truthy_result_coerced(self) -> None:
        """Truthy values become True."""
        flt = predicate_filter(lambda p: p.suffix)

        assert flt(Path("a.py")) is True
        assert flt(Path("Makefile")) is False

    def test_none_raises(self) -> None:
        """None predicate is rejected."""
        with pytest.raises(TypeError, match="must not be None"):
            predicate_filter(None)  # type: ignore[arg-type]

    def test_not_callable_raises(self) -> None:
        """Non-callables are rejected."""
        with pytest.raises(TypeError, match="callable"):
            predicate_filter("*.py")  # type: ignore[arg-type]

    def test_composes(self) -> None:
        """Predicate filters combine with other filters."""
        flt = predicate_filter(lambda p: p.suffix == ".py") & ~predicate_filter(lambda p: p.stem.startswith("_"))

        assert flt(Path("main.py")) is True
        assert flt(Path("_private.py")) is False
