"""Unchecked I/O exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsfilter.domain.exceptions.base import FsFilterError

if TYPE_CHECKING:
    from os import PathLike


class UncheckedIOError(FsFilterError):
    """Filesystem failure re-raised outside the OSError hierarchy.

    Raised by the unchecked wrappers in place of the original OSError.
    NOT a subclass of OSError: an ``except OSError`` around a callback
    does not catch it.

    Attributes:
        cause: Original OSError (also chained as __cause__)
        path: Filename reported by the cause, None if it had none
    """

    def __init__(self, cause: OSError) -> None:
        # FAIL-FIRST: validate required parameters
        if cause is None:
            raise TypeError("cause must not be None")

        self.cause = cause
        self.path: str | bytes | PathLike[str] | None = cause.filename
        super().__init__(str(cause))

    @property
    def errno(self) -> int | None:
        """Error number of the cause."""
        return self.cause.errno
