"""Adapter: plain predicate function -> IOFileFilter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fsfilter.infrastructure.filters.base import AbstractFileFilter

if TYPE_CHECKING:
    from pathlib import Path

    from fsfilter.infrastructure.filters.types import PathPredicate


@dataclass(frozen=True, slots=True)
class PredicateFileFilter(AbstractFileFilter):
    """Wraps a PathPredicate so it can be composed with other filters.

    Attributes:
        predicate: Function taking a Path, truthy result = accept
    """

    predicate: PathPredicate

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.predicate is None:
            raise TypeError("predicate must not be None")
        if not callable(self.predicate):
            raise TypeError(f"predicate must be callable, got {type(self.predicate).__name__}")

    def accept(self, path: Path) -> bool:
        return bool(self.predicate(path))

    def __str__(self) -> str:
        name = getattr(self.predicate, "__name__", repr(self.predicate))
        return f"{type(self).__name__}({name})"


def predicate_filter(predicate: PathPredicate) -> PredicateFileFilter:
    """Create filter from a predicate function.

    Args:
        predicate: Function taking a Path, returning True to accept.

    Returns:
        PredicateFileFilter wrapping predicate.

    Raises:
        TypeError: If predicate is None or not callable
    """
    return PredicateFileFilter(predicate)
