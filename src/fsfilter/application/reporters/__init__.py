"""Reporters for filter hierarchies.

Output is str. Caller decides destination.
"""

from fsfilter.application.reporters.tree import TreeConfig, TreeReporter

__all__ = [
    "TreeConfig",
    "TreeReporter",
]
