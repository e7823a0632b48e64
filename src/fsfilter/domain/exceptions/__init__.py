"""Domain exceptions."""

from fsfilter.domain.exceptions.base import FsFilterError
from fsfilter.domain.exceptions.io import UncheckedIOError

__all__ = [
    "FsFilterError",
    "UncheckedIOError",
]
