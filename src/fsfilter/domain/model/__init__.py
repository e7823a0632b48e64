"""Domain model value objects."""

from fsfilter.domain.model.file_attributes import FileAttributes

__all__ = ["FileAttributes"]
