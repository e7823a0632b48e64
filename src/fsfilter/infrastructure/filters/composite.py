"""Composite filters: AND, OR, NOT composition.

AndFileFilter and OrFileFilter own a mutable ordered list of children
(ConditionalFileFilter contract) and evaluate it with short-circuit.
An EMPTY composite is non-matching: False / VisitResult.TERMINATE.

Validation is shallow: constructors check only the leading filters,
add_filter/set_filters/from_list check nothing. A None child fails
with AttributeError when it is evaluated, not when it is added.
Use all_of/any_of for full validation up front.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from fsfilter.domain.visit_result import VisitResult
from fsfilter.infrastructure.filters.base import AbstractFileFilter

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from fsfilter.domain.model.file_attributes import FileAttributes
    from fsfilter.domain.ports.file_filter import IOFileFilter


class _CompositeFileFilter(AbstractFileFilter):
    """List management shared by AndFileFilter and OrFileFilter."""

    __slots__ = ("_filters",)

    def __init__(self, *filters: IOFileFilter) -> None:
        """Initialize with zero or more filters.

        Args:
            *filters: Children in evaluation order.

        Raises:
            TypeError: If the first filter is None, or either filter of a pair
                is None. Further filters are not checked.
        """
        if filters and (filters[0] is None or (len(filters) == 2 and filters[1] is None)):
            raise TypeError("The filters must not be None")
        self._filters: list[IOFileFilter] = list(filters)

    @classmethod
    def from_list(cls, filters: Iterable[IOFileFilter] | None) -> Self:
        """Create composite from a copy of filters.

        Args:
            filters: Children in evaluation order. None = no children.

        Returns:
            Composite owning its own list (later changes to filters
            are not seen, and vice versa).
        """
        composite = cls()
        if filters is not None:
            composite._filters = list(filters)
        return composite

    def add_filter(self, file_filter: IOFileFilter) -> None:
        """Append a child filter. No uniqueness or None check."""
        self._filters.append(file_filter)

    def get_filters(self) -> tuple[IOFileFilter, ...]:
        """Get children as an immutable snapshot."""
        return tuple(self._filters)

    def remove_filter(self, file_filter: IOFileFilter) -> bool:
        """Remove the first child equal to file_filter.

        Returns:
            True if a child was removed, False if none was equal.
        """
        try:
            self._filters.remove(file_filter)
        except ValueError:
            return False
        return True

    def set_filters(self, file_filters: Iterable[IOFileFilter]) -> None:
        """Replace all children with a copy of file_filters.

        Raises:
            TypeError: If file_filters is None (children unchanged).
        """
        self._filters = list(file_filters)

    def __str__(self) -> str:
        children = ",".join("null" if f is None else str(f) for f in self._filters)
        return f"{type(self).__name__}({children})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._filters))})"


class AndFileFilter(_CompositeFileFilter):
    """Accepts only if ALL children accept (AND).

    Children are checked in order; checking stops at the first child
    that rejects. No children = rejects everything.

    Example:
        flt = AndFileFilter(suffix_filter(".py"), FILE)
        flt.add_filter(size_filter(1))
        python_sources = [p for p in paths if flt.accept(p)]
    """

    __slots__ = ()

    def accept(self, path: Path) -> bool:
        if not self._filters:
            return False
        return all(f.accept(path) for f in self._filters)

    def accept_name(self, directory: Path, name: str) -> bool:
        if not self._filters:
            return False
        return all(f.accept_name(directory, name) for f in self._filters)

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        """Walk verdict: CONTINUE only if every child returns CONTINUE.

        Errors raised by children (e.g. OSError) propagate unchanged.
        """
        if not self._filters:
            return VisitResult.TERMINATE
        for f in self._filters:
            if f.accept_path(path, attributes) is not VisitResult.CONTINUE:
                return VisitResult.TERMINATE
        return VisitResult.CONTINUE


class OrFileFilter(_CompositeFileFilter):
    """Accepts if ANY child accepts (OR).

    Children are checked in order; checking stops at the first child
    that accepts. No children = rejects everything.
    """

    __slots__ = ()

    def accept(self, path: Path) -> bool:
        return any(f.accept(path) for f in self._filters)

    def accept_name(self, directory: Path, name: str) -> bool:
        return any(f.accept_name(directory, name) for f in self._filters)

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        for f in self._filters:
            if f.accept_path(path, attributes) is VisitResult.CONTINUE:
                return VisitResult.CONTINUE
        return VisitResult.TERMINATE


@dataclass(frozen=True, slots=True)
class NotFileFilter(AbstractFileFilter):
    """Inverts another filter (NOT).

    Shape C swaps CONTINUE and TERMINATE; SKIP_* verdicts pass through.

    Attributes:
        file_filter: Filter to invert (must not be None)
    """

    file_filter: IOFileFilter

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file_filter is None:
            raise TypeError("The filter must not be None")

    def accept(self, path: Path) -> bool:
        return not self.file_filter.accept(path)

    def accept_name(self, directory: Path, name: str) -> bool:
        return not self.file_filter.accept_name(directory, name)

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        match self.file_filter.accept_path(path, attributes):
            case VisitResult.CONTINUE:
                return VisitResult.TERMINATE
            case VisitResult.TERMINATE:
                return VisitResult.CONTINUE
            case other:
                return other

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.file_filter})"


def _validated(filters: tuple[IOFileFilter, ...]) -> tuple[IOFileFilter, ...]:
    for i, f in enumerate(filters):
        if f is None:
            raise TypeError(f"The filter[{i}] must not be None")
    return filters


def all_of(*filters: IOFileFilter) -> AndFileFilter:
    """Create filter that requires ALL filters to pass (AND).

    Args:
        *filters: Filters to compose. None elements are rejected.

    Returns:
        AndFileFilter over the filters.
        Empty filters = always False.

    Raises:
        TypeError: If any filter is None
    """
    return AndFileFilter.from_list(_validated(filters))


def any_of(*filters: IOFileFilter) -> OrFileFilter:
    """Create filter that requires ANY filter to pass (OR).

    Args:
        *filters: Filters to compose. None elements are rejected.

    Returns:
        OrFileFilter over the filters.
        Empty filters = always False.

    Raises:
        TypeError: If any filter is None
    """
    return OrFileFilter.from_list(_validated(filters))


def negate(flt: IOFileFilter) -> NotFileFilter:
    """Create filter that negates another filter (NOT).

    Args:
        flt: Filter to negate.

    Returns:
        Filter that returns opposite of input filter.
    """
    return NotFileFilter(flt)
