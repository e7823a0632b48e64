"""Attribute provider for shape C callers.

Reads FileAttributes for a path. Raises OSError (checked variant);
files_uncheck.read_attributes is the unchecked one.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fsfilter.domain.model.file_attributes import FileAttributes

if TYPE_CHECKING:
    from os import PathLike


def read_attributes(path: str | PathLike[str], *, follow_symlinks: bool = True) -> FileAttributes:
    """Read metadata for path.

    Args:
        path: Path to stat.
        follow_symlinks: False = describe the link itself (lstat).

    Returns:
        FileAttributes for path.

    Raises:
        OSError: If path cannot be stat-ed
    """
    return FileAttributes.from_stat(Path(path).stat(follow_symlinks=follow_symlinks))
