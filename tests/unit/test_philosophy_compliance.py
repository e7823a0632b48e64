"""Philosophy compliance tests.

Tests verifying the library-wide rules:
- FAIL-FIRST validation for value objects and leaf filters
- Immutability of value objects, leaf filters and snapshots
- Shallow validation of composites (documented exception to FAIL-FIRST)
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from fsfilter.application.reporters.tree import TreeConfig
from fsfilter.domain.model.file_attributes import FileAttributes
from fsfilter.infrastructure.filters import (
    AndFileFilter,
    NotFileFilter,
    OrFileFilter,
    SizeFileFilter,
    SuffixFileFilter,
    all_of,
    predicate_filter,
)
from tests.factories import accepting

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid arguments raise immediately, never fall back silently."""

    def test_negative_attribute_size_raises(self) -> None:
        """FileAttributes rejects negative size."""
        with pytest.raises(ValueError, match="size"):
            FileAttributes(size=-5)

    def test_negative_size_filter_raises(self) -> None:
        """SizeFileFilter rejects negative threshold."""
        with pytest.raises(ValueError, match="size"):
            SizeFileFilter(-1)

    def test_empty_suffixes_raise(self) -> None:
        """Name filters need at least one pattern."""
        with pytest.raises(ValueError, match="patterns"):
            SuffixFileFilter(())

    def test_not_filter_none_raises(self) -> None:
        """NotFileFilter requires its child."""
        with pytest.raises(TypeError):
            NotFileFilter(None)  # type: ignore[arg-type]

    def test_predicate_none_raises(self) -> None:
        """predicate_filter requires a callable."""
        with pytest.raises(TypeError):
            predicate_filter(None)  # type: ignore[arg-type]

    def test_factories_validate_every_child(self) -> None:
        """all_of checks every element, unlike the constructor."""
        with pytest.raises(TypeError):
            all_of(accepting(), accepting(), accepting(), None)

    def test_tree_config_width_raises(self) -> None:
        """TreeConfig rejects non-positive width."""
        with pytest.raises(ValueError):
            TreeConfig(width=-1)


# =============================================================================
# Shallow composite validation
# =============================================================================


class TestShallowCompositeValidation:
    """Composites check only leading filters; None children fail lazily."""

    @pytest.mark.parametrize("composite_type", [AndFileFilter, OrFileFilter])
    def test_tail_none_accepted(self, composite_type: type[AndFileFilter] | type[OrFileFilter]) -> None:
        """Third and later filters are not checked at construction."""
        flt = composite_type(accepting(), accepting(), None)

        assert len(flt.get_filters()) == 3

    @pytest.mark.parametrize("composite_type", [AndFileFilter, OrFileFilter])
    def test_from_list_none_elements_accepted(
        self, composite_type: type[AndFileFilter] | type[OrFileFilter]
    ) -> None:
        """from_list does not inspect elements."""
        flt = composite_type.from_list([None])

        with pytest.raises(AttributeError):
            flt.accept(Path("x"))


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Value objects and leaf filters are frozen."""

    def test_file_attributes_frozen(self) -> None:
        """FileAttributes is immutable."""
        attrs = FileAttributes(size=1)
        with pytest.raises(FrozenInstanceError):
            attrs.size = 2  # type: ignore[misc]

    def test_leaf_filter_frozen(self) -> None:
        """Leaf filters are immutable."""
        flt = SuffixFileFilter((".py",))
        with pytest.raises(FrozenInstanceError):
            flt.patterns = (".txt",)  # type: ignore[misc]

    def test_tree_config_frozen(self) -> None:
        """TreeConfig is immutable."""
        config = TreeConfig()
        with pytest.raises(FrozenInstanceError):
            config.width = 10  # type: ignore[misc]

    def test_composite_snapshot_is_tuple(self) -> None:
        """get_filters never exposes the internal list."""
        flt = AndFileFilter(accepting(), accepting())

        assert isinstance(flt.get_filters(), tuple)
