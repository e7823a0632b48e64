"""Constant filters: accept everything or nothing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fsfilter.domain.visit_result import VisitResult
from fsfilter.infrastructure.filters.base import AbstractFileFilter

if TYPE_CHECKING:
    from pathlib import Path

    from fsfilter.domain.model.file_attributes import FileAttributes


@dataclass(frozen=True, slots=True)
class TrueFileFilter(AbstractFileFilter):
    """Accepts every path."""

    def accept(self, path: Path) -> bool:
        return True

    def accept_name(self, directory: Path, name: str) -> bool:
        return True

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        return VisitResult.CONTINUE


@dataclass(frozen=True, slots=True)
class FalseFileFilter(AbstractFileFilter):
    """Rejects every path."""

    def accept(self, path: Path) -> bool:
        return False

    def accept_name(self, directory: Path, name: str) -> bool:
        return False

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        return VisitResult.TERMINATE


TRUE = TrueFileFilter()
FALSE = FalseFileFilter()
