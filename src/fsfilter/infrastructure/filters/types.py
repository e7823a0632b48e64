"""Predicate type alias.

Python 3.12 PEP 695 type alias syntax.
Predicate function: takes Path, returns True to accept.
Every AbstractFileFilter is also a PathPredicate (via __call__).
"""

from collections.abc import Callable
from pathlib import Path

type PathPredicate = Callable[[Path], bool]
