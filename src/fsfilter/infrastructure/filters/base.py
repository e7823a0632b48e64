"""Base class for concrete filters.

Bridges the three evaluation shapes so subclasses implement only one:
- accept(path) defaults to accept_name(path.parent, path.name)
- accept_name(directory, name) defaults to accept(directory / name)
- accept_path(path, attributes) defaults to to_visit_result(accept(path))

Subclasses MUST override accept or accept_name (otherwise the two
defaults call each other until RecursionError).
"""

from __future__ import annotations

from abc import ABC
from pathlib import Path
from typing import TYPE_CHECKING

from fsfilter.domain.visit_result import to_visit_result

if TYPE_CHECKING:
    from fsfilter.domain.model.file_attributes import FileAttributes
    from fsfilter.domain.ports.file_filter import IOFileFilter
    from fsfilter.domain.visit_result import VisitResult
    from fsfilter.infrastructure.filters.composite import (
        AndFileFilter,
        NotFileFilter,
        OrFileFilter,
    )


def _is_filter(candidate: object) -> bool:
    return callable(getattr(candidate, "accept", None))


class AbstractFileFilter(ABC):
    """Base class implementing IOFileFilter.

    Also callable: flt(path) == flt.accept(path), so any filter
    plugs into filter(), sorted(key=...) and other PathPredicate slots.

    Composition operators:
        a & b  -> AndFileFilter(a, b)
        a | b  -> OrFileFilter(a, b)
        ~a     -> NotFileFilter(a)
    """

    __slots__ = ()

    def accept(self, path: Path) -> bool:
        """Test a path by its parent directory and name."""
        return self.accept_name(path.parent, path.name)

    def accept_name(self, directory: Path, name: str) -> bool:
        """Test a name by joining it onto its directory."""
        return self.accept(Path(directory, name))

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        """Test a visited path. Attributes are ignored unless overridden."""
        return to_visit_result(self.accept(path))

    def __call__(self, path: Path) -> bool:
        return self.accept(path)

    def __and__(self, other: IOFileFilter) -> AndFileFilter:
        if not _is_filter(other):
            return NotImplemented
        from fsfilter.infrastructure.filters.composite import AndFileFilter

        return AndFileFilter(self, other)

    def __or__(self, other: IOFileFilter) -> OrFileFilter:
        if not _is_filter(other):
            return NotImplemented
        from fsfilter.infrastructure.filters.composite import OrFileFilter

        return OrFileFilter(self, other)

    def __invert__(self) -> NotFileFilter:
        from fsfilter.infrastructure.filters.composite import NotFileFilter

        return NotFileFilter(self)

    def __str__(self) -> str:
        return type(self).__name__
