"""fsfilter - composable file filters and unchecked filesystem helpers."""

__version__ = "0.1.0"

from fsfilter.application.reporters import TreeConfig, TreeReporter
from fsfilter.domain import (
    ConditionalFileFilter,
    FileAttributes,
    FsFilterError,
    IOFileFilter,
    UncheckedIOError,
    VisitResult,
)
from fsfilter.infrastructure import files_uncheck, read_attributes
from fsfilter.infrastructure.filters import (
    DIRECTORY,
    FALSE,
    FILE,
    HIDDEN,
    TRUE,
    AbstractFileFilter,
    AndFileFilter,
    NotFileFilter,
    OrFileFilter,
    all_of,
    any_of,
    name_filter,
    negate,
    predicate_filter,
    prefix_filter,
    size_filter,
    size_range_filter,
    suffix_filter,
    wildcard_filter,
)

__all__ = [
    "__version__",
    # Domain
    "VisitResult",
    "FileAttributes",
    "IOFileFilter",
    "ConditionalFileFilter",
    "FsFilterError",
    "UncheckedIOError",
    # Filters
    "AbstractFileFilter",
    "AndFileFilter",
    "OrFileFilter",
    "NotFileFilter",
    "all_of",
    "any_of",
    "negate",
    "name_filter",
    "prefix_filter",
    "suffix_filter",
    "wildcard_filter",
    "size_filter",
    "size_range_filter",
    "predicate_filter",
    "TRUE",
    "FALSE",
    "DIRECTORY",
    "FILE",
    "HIDDEN",
    # Filesystem
    "files_uncheck",
    "read_attributes",
    # Presentation
    "TreeConfig",
    "TreeReporter",
]
