"""Name filters.

Filter entries by their final path component (never the directory part).
Wildcards use fnmatch syntax: * ? [seq] [!seq].
"""

from __future__ import annotations

import fnmatch
from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fsfilter.infrastructure.filters.base import AbstractFileFilter

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class _NameMatcher(AbstractFileFilter):
    """Common validation and rendering for name-based filters.

    Attributes:
        patterns: Names, prefixes, suffixes or wildcards (non-empty)
        case_sensitive: Compare case-sensitively (default True)
    """

    patterns: tuple[str, ...]
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.patterns:
            raise ValueError("patterns must not be empty")
        for i, p in enumerate(self.patterns):
            if p is None:
                raise TypeError(f"patterns[{i}] must not be None")

    def accept_name(self, directory: Path, name: str) -> bool:
        if not self.case_sensitive:
            name = name.casefold()
        return any(self._matches(name, self._fold(p)) for p in self.patterns)

    def _fold(self, pattern: str) -> str:
        return pattern if self.case_sensitive else pattern.casefold()

    @abstractmethod
    def _matches(self, name: str, pattern: str) -> bool:
        """Test one (already folded) name against one pattern."""

    def __str__(self) -> str:
        return f"{type(self).__name__}({','.join(self.patterns)})"


@dataclass(frozen=True, slots=True)
class NameFileFilter(_NameMatcher):
    """Accepts entries whose name equals any of the given names."""

    def _matches(self, name: str, pattern: str) -> bool:
        return name == pattern


@dataclass(frozen=True, slots=True)
class PrefixFileFilter(_NameMatcher):
    """Accepts entries whose name starts with any of the given prefixes."""

    def _matches(self, name: str, pattern: str) -> bool:
        return name.startswith(pattern)


@dataclass(frozen=True, slots=True)
class SuffixFileFilter(_NameMatcher):
    """Accepts entries whose name ends with any of the given suffixes."""

    def _matches(self, name: str, pattern: str) -> bool:
        return name.endswith(pattern)


@dataclass(frozen=True, slots=True)
class WildcardFileFilter(_NameMatcher):
    """Accepts entries whose name matches any fnmatch wildcard.

    Matching is done with fnmatchcase on (optionally casefolded) text,
    so behaviour does not depend on the host OS.
    """

    def _matches(self, name: str, pattern: str) -> bool:
        return fnmatch.fnmatchcase(name, pattern)


def name_filter(*names: str, case_sensitive: bool = True) -> NameFileFilter:
    """Create filter that accepts entries named exactly as any of names.

    Args:
        *names: Entry names (e.g., "setup.py", "Makefile").
        case_sensitive: Compare case-sensitively.

    Returns:
        NameFileFilter over names.

    Raises:
        ValueError: If no names given
    """
    return NameFileFilter(names, case_sensitive)


def prefix_filter(*prefixes: str, case_sensitive: bool = True) -> PrefixFileFilter:
    """Create filter that accepts entries whose name starts with any prefix.

    Raises:
        ValueError: If no prefixes given
    """
    return PrefixFileFilter(prefixes, case_sensitive)


def suffix_filter(*suffixes: str, case_sensitive: bool = True) -> SuffixFileFilter:
    """Create filter that accepts entries whose name ends with any suffix.

    Args:
        *suffixes: Suffixes including the dot (e.g., ".py", ".tar.gz").
        case_sensitive: Compare case-sensitively.

    Returns:
        SuffixFileFilter over suffixes.

    Raises:
        ValueError: If no suffixes given
    """
    return SuffixFileFilter(suffixes, case_sensitive)


def wildcard_filter(*patterns: str, case_sensitive: bool = True) -> WildcardFileFilter:
    """Create filter that accepts entries whose name matches any pattern.

    Raises:
        ValueError: If no patterns given
    """
    return WildcardFileFilter(patterns, case_sensitive)
