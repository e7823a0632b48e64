"""Size filters.

Shape A/B stat the path; shape C reads attributes.size instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fsfilter.domain.visit_result import VisitResult, to_visit_result
from fsfilter.infrastructure.filters.base import AbstractFileFilter
from fsfilter.infrastructure.filters.composite import AndFileFilter

if TYPE_CHECKING:
    from pathlib import Path

    from fsfilter.domain.model.file_attributes import FileAttributes


@dataclass(frozen=True, slots=True)
class SizeFileFilter(AbstractFileFilter):
    """Accepts entries by size threshold.

    Attributes:
        size: Threshold in bytes (must be >= 0)
        accept_larger: True = accept size >= threshold,
            False = accept size < threshold
    """

    size: int
    accept_larger: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")

    def accept(self, path: Path) -> bool:
        """Test path size.

        Raises:
            OSError: If path cannot be stat-ed
        """
        return self._accepts(path.stat().st_size)

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        return to_visit_result(self._accepts(attributes.size))

    def _accepts(self, actual: int) -> bool:
        smaller = actual < self.size
        return not smaller if self.accept_larger else smaller

    def __str__(self) -> str:
        op = ">=" if self.accept_larger else "<"
        return f"{type(self).__name__}({op}{self.size})"


def size_filter(threshold: int, *, accept_larger: bool = True) -> SizeFileFilter:
    """Create filter that accepts entries at least (or below) threshold bytes.

    Raises:
        ValueError: If threshold is negative
    """
    return SizeFileFilter(threshold, accept_larger)


def size_range_filter(minimum: int, maximum: int) -> AndFileFilter:
    """Create filter that accepts entries with minimum <= size <= maximum.

    Args:
        minimum: Smallest accepted size in bytes.
        maximum: Largest accepted size in bytes.

    Returns:
        AndFileFilter of the lower and upper bound.

    Raises:
        ValueError: If bounds are negative or minimum > maximum
    """
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) must be <= maximum ({maximum})")
    return AndFileFilter(SizeFileFilter(minimum), SizeFileFilter(maximum + 1, accept_larger=False))
