"""Domain layer: value objects, verdicts, protocols, exceptions.

No I/O here. Infrastructure implements the protocols.
"""

from fsfilter.domain.exceptions import FsFilterError, UncheckedIOError
from fsfilter.domain.model import FileAttributes
from fsfilter.domain.ports import (
    ConditionalFileFilter,
    FileFilter,
    FilenameFilter,
    IOFileFilter,
    PathVisitorFilter,
)
from fsfilter.domain.visit_result import VisitResult, to_visit_result

__all__ = [
    # Verdicts
    "VisitResult",
    "to_visit_result",
    # Model
    "FileAttributes",
    # Protocols
    "FileFilter",
    "FilenameFilter",
    "PathVisitorFilter",
    "IOFileFilter",
    "ConditionalFileFilter",
    # Exceptions
    "FsFilterError",
    "UncheckedIOError",
]
