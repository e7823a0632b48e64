"""Directory walk verdicts.

Shape C filters answer with a VisitResult instead of a bool.
Library filters only produce CONTINUE or TERMINATE.
"""

from enum import Enum, auto


class VisitResult(Enum):
    """Verdict returned to a directory walk."""

    CONTINUE = auto()  # entry accepted, keep walking
    TERMINATE = auto()  # entry rejected
    SKIP_SUBTREE = auto()  # continue, but not into this directory
    SKIP_SIBLINGS = auto()  # continue, but skip remaining siblings


def to_visit_result(accepted: bool) -> VisitResult:
    """Convert a boolean verdict to a VisitResult.

    Args:
        accepted: Boolean verdict of shape A or B.

    Returns:
        CONTINUE if accepted, TERMINATE otherwise.
    """
    return VisitResult.CONTINUE if accepted else VisitResult.TERMINATE
