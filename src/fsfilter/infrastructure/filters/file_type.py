"""Entry type filters.

Filter by directory / regular file / hidden.
Shape C uses the precomputed attribute flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fsfilter.domain.visit_result import VisitResult, to_visit_result
from fsfilter.infrastructure.filters.base import AbstractFileFilter

if TYPE_CHECKING:
    from pathlib import Path

    from fsfilter.domain.model.file_attributes import FileAttributes


@dataclass(frozen=True, slots=True)
class DirectoryFileFilter(AbstractFileFilter):
    """Accepts directories (symlinks to directories included for shape A/B)."""

    def accept(self, path: Path) -> bool:
        return path.is_dir()

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        return to_visit_result(attributes.is_directory)


@dataclass(frozen=True, slots=True)
class FileFileFilter(AbstractFileFilter):
    """Accepts regular files (symlinks to files included for shape A/B)."""

    def accept(self, path: Path) -> bool:
        return path.is_file()

    def accept_path(self, path: Path, attributes: FileAttributes) -> VisitResult:
        return to_visit_result(attributes.is_regular_file)


@dataclass(frozen=True, slots=True)
class HiddenFileFilter(AbstractFileFilter):
    """Accepts dot-entries (POSIX hidden convention). "." and ".." excluded."""

    def accept_name(self, directory: Path, name: str) -> bool:
        return name.startswith(".") and name not in (".", "..")


DIRECTORY = DirectoryFileFilter()
FILE = FileFileFilter()
HIDDEN = HiddenFileFilter()
