"""File metadata value object."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from os import stat_result


@dataclass(frozen=True, slots=True)
class FileAttributes:
    """Precomputed metadata for a filesystem entry.

    Passed to shape C filters so they can decide without stat-ing again.

    Attributes:
        size: Size in bytes (must be >= 0)
        modified_time: Last modification, POSIX seconds
        access_time: Last access, POSIX seconds
        change_time: Last metadata change, POSIX seconds
        is_regular_file: Entry is a regular file
        is_directory: Entry is a directory
        is_symbolic_link: Entry is a symbolic link (not followed)
        is_other: Entry is something else (fifo, socket, device)
    """

    size: int
    modified_time: float = 0.0
    access_time: float = 0.0
    change_time: float = 0.0
    is_regular_file: bool = False
    is_directory: bool = False
    is_symbolic_link: bool = False
    is_other: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")
        flags = (self.is_regular_file, self.is_directory, self.is_symbolic_link, self.is_other)
        if sum(flags) > 1:
            raise ValueError("at most one type flag may be set")

    @classmethod
    def from_stat(cls, st: stat_result) -> Self:
        """Build attributes from an os.stat_result.

        Args:
            st: Result of os.stat / os.lstat / Path.stat.

        Returns:
            FileAttributes with type flags derived from st_mode.
        """
        mode = st.st_mode
        is_regular_file = stat.S_ISREG(mode)
        is_directory = stat.S_ISDIR(mode)
        is_symbolic_link = stat.S_ISLNK(mode)
        return cls(
            size=st.st_size,
            modified_time=st.st_mtime,
            access_time=st.st_atime,
            change_time=st.st_ctime,
            is_regular_file=is_regular_file,
            is_directory=is_directory,
            is_symbolic_link=is_symbolic_link,
            is_other=not (is_regular_file or is_directory or is_symbolic_link),
        )
