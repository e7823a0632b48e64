"""Tests for UncheckedIOError."""

import errno

import pytest

from fsfilter.domain.exceptions import FsFilterError, UncheckedIOError


class TestUncheckedIOError:
    """Tests for UncheckedIOError."""

    def test_carries_cause(self) -> None:
        """Cause, path and errno come from the OSError."""
        cause = FileNotFoundError(errno.ENOENT, "No such file or directory", "/missing")

        error = UncheckedIOError(cause)

        assert error.cause is cause
        assert error.path == "/missing"
        assert error.errno == errno.ENOENT
        assert str(error) == str(cause)

    def test_cause_without_filename(self) -> None:
        """Path is None when the cause has no filename."""
        error = UncheckedIOError(OSError("disk on fire"))

        assert error.path is None
        assert "disk on fire" in str(error)

    def test_not_an_os_error(self) -> None:
        """except OSError does not catch it."""
        error = UncheckedIOError(OSError("x"))

        assert not isinstance(error, OSError)
        assert isinstance(error, FsFilterError)

    def test_none_cause_raises(self) -> None:
        """FAIL-FIRST: cause is required."""
        with pytest.raises(TypeError, match="cause must not be None"):
            UncheckedIOError(None)  # type: ignore[arg-type]
