"""Infrastructure layer: filter implementations and filesystem access."""

from fsfilter.infrastructure import files_uncheck
from fsfilter.infrastructure.attributes import read_attributes
from fsfilter.infrastructure.uncheck import call, unchecked, unchecked_iter

__all__ = [
    "files_uncheck",
    "read_attributes",
    "call",
    "unchecked",
    "unchecked_iter",
]
