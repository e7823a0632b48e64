"""Filter protocols: the three evaluation shapes.

Shape A: FileFilter.accept(path) -> bool
Shape B: FilenameFilter.accept_name(directory, name) -> bool
Shape C: PathVisitorFilter.accept_path(path, attributes) -> VisitResult

Users extend fsfilter by implementing these Protocols,
or by subclassing AbstractFileFilter which bridges all three.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from fsfilter.domain.model.file_attributes import FileAttributes
    from fsfilter.domain.visit_result import VisitResult


@runtime_checkable
class FileFilter(Protocol):
    """Shape A: accepts or rejects a path."""

    def accept(self, path: Path) -> bool:
        """Test a path.

        Args:
            path: Path to test

        Returns:
            True to accept, False to reject.
        """
        ...


@runtime_checkable
class FilenameFilter(Protocol):
    """Shape B: accepts or rejects a name inside a directory."""

    def accept_name(self, directory: Path, name: str) -> bool:
        """Test an entry name.

        Args:
            directory: Directory containing the entry
            name: Entry name (no separators)

        Returns:
            True to accept, False to reject.
        """
        ...


@runtime_checkable
class PathVisitorFilter(Protocol):
    """Shape C: directory walk verdict from precomputed attributes."""

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        """Test a path during a directory walk.

        Args:
            path: Path being visited
            attributes: Metadata already read by the walker

        Returns:
            VisitResult.CONTINUE to accept, anything else to reject.

        Raises:
            OSError: If further metadata cannot be read
        """
        ...


@runtime_checkable
class IOFileFilter(FileFilter, FilenameFilter, PathVisitorFilter, Protocol):
    """Filter supporting all three shapes."""


@runtime_checkable
class ConditionalFileFilter(Protocol):
    """Contract for filters holding an ordered list of child filters.

    Children are evaluated in insertion order. Duplicates are allowed.
    No synchronization: callers guard concurrent mutation themselves.
    """

    def add_filter(self, file_filter: IOFileFilter) -> None:
        """Append a child filter. No uniqueness or None check."""
        ...

    def get_filters(self) -> tuple[IOFileFilter, ...]:
        """Get children as an immutable snapshot."""
        ...

    def remove_filter(self, file_filter: IOFileFilter) -> bool:
        """Remove first equal child.

        Returns:
            True if a child was removed.
        """
        ...

    def set_filters(self, file_filters: Iterable[IOFileFilter]) -> None:
        """Replace all children with a copy of file_filters."""
        ...
