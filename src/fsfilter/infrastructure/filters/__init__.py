"""Infrastructure layer: file filters.

Every filter implements IOFileFilter (shapes A, B and C) and is callable
as a PathPredicate: flt(path) -> bool.

Usage:
    from fsfilter.infrastructure.filters import FILE, all_of, suffix_filter

    # Single filter
    flt = suffix_filter(".py")
    sources = [p for p in paths if flt(p)]

    # Composed filters
    flt = all_of(FILE, suffix_filter(".py"), negate(prefix_filter("test_")))
    flt = FILE & suffix_filter(".py") & ~prefix_filter("test_")
"""

from fsfilter.infrastructure.filters.base import AbstractFileFilter
from fsfilter.infrastructure.filters.composite import (
    AndFileFilter,
    NotFileFilter,
    OrFileFilter,
    all_of,
    any_of,
    negate,
)
from fsfilter.infrastructure.filters.constant import FALSE, TRUE, FalseFileFilter, TrueFileFilter
from fsfilter.infrastructure.filters.file_type import (
    DIRECTORY,
    FILE,
    HIDDEN,
    DirectoryFileFilter,
    FileFileFilter,
    HiddenFileFilter,
)
from fsfilter.infrastructure.filters.name import (
    NameFileFilter,
    PrefixFileFilter,
    SuffixFileFilter,
    WildcardFileFilter,
    name_filter,
    prefix_filter,
    suffix_filter,
    wildcard_filter,
)
from fsfilter.infrastructure.filters.predicate import PredicateFileFilter, predicate_filter
from fsfilter.infrastructure.filters.size import SizeFileFilter, size_filter, size_range_filter
from fsfilter.infrastructure.filters.types import PathPredicate

__all__ = [
    # Types
    "PathPredicate",
    "AbstractFileFilter",
    # Composites
    "AndFileFilter",
    "OrFileFilter",
    "NotFileFilter",
    "all_of",
    "any_of",
    "negate",
    # Constants
    "TrueFileFilter",
    "FalseFileFilter",
    "TRUE",
    "FALSE",
    # Entry type
    "DirectoryFileFilter",
    "FileFileFilter",
    "HiddenFileFilter",
    "DIRECTORY",
    "FILE",
    "HIDDEN",
    # Names
    "NameFileFilter",
    "PrefixFileFilter",
    "SuffixFileFilter",
    "WildcardFileFilter",
    "name_filter",
    "prefix_filter",
    "suffix_filter",
    "wildcard_filter",
    # Size
    "SizeFileFilter",
    "size_filter",
    "size_range_filter",
    # Adapters
    "PredicateFileFilter",
    "predicate_filter",
]
