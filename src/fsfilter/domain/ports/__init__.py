"""Domain ports (interfaces/protocols)."""

from fsfilter.domain.ports.file_filter import (
    ConditionalFileFilter,
    FileFilter,
    FilenameFilter,
    IOFileFilter,
    PathVisitorFilter,
)

__all__ = [
    "FileFilter",
    "FilenameFilter",
    "PathVisitorFilter",
    "IOFileFilter",
    "ConditionalFileFilter",
]
