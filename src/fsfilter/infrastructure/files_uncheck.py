"""Filesystem operations that raise UncheckedIOError instead of OSError.

Thin delegations to os, shutil, tempfile, mimetypes and pathlib.
Each function behaves like the call it wraps, except that an OSError
is re-raised as UncheckedIOError (see fsfilter.infrastructure.uncheck).

Example:
    from fsfilter.infrastructure import files_uncheck

    sizes = sorted(paths, key=files_uncheck.size)
"""

from __future__ import annotations

import dataclasses
import errno
import mimetypes
import os
import shutil
import stat
import tempfile
from os import PathLike
from pathlib import Path
from typing import IO, TYPE_CHECKING, BinaryIO

from fsfilter.domain.model.file_attributes import FileAttributes
from fsfilter.domain.visit_result import VisitResult
from fsfilter.infrastructure.attributes import read_attributes as _read_attributes
from fsfilter.infrastructure.filters.file_type import HIDDEN
from fsfilter.infrastructure.uncheck import unchecked, unchecked_iter

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from fsfilter.domain.ports.file_filter import FileFilter, PathVisitorFilter

type StrPath = str | PathLike[str]

_CHUNK_SIZE = 64 * 1024

_ATTRIBUTE_NAMES = frozenset(f.name for f in dataclasses.fields(FileAttributes))
_SETTABLE_ATTRIBUTES = frozenset({"modified_time", "access_time"})


def _refuse_existing(target: Path) -> None:
    if target.exists() or target.is_symlink():
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(target))


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        path.rmdir()
    else:
        path.unlink()


def _transfer(source: IO[bytes], target: IO[bytes]) -> int:
    count = 0
    while chunk := source.read(_CHUNK_SIZE):
        target.write(chunk)
        count += len(chunk)
    return count


def _reraise(error: OSError) -> None:
    raise error


def _check_depth(max_depth: int | None) -> None:
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")


# =============================================================================
# Copy / move / delete
# =============================================================================


@unchecked
def copy(source: StrPath, target: StrPath, *, replace_existing: bool = False) -> Path:
    """Copy file contents and permission bits to target. Returns target."""
    target = Path(target)
    if not replace_existing:
        _refuse_existing(target)
    shutil.copy(source, target)
    return target


@unchecked
def copy_from_stream(stream: BinaryIO, target: StrPath, *, replace_existing: bool = False) -> int:
    """Copy all bytes from stream into target. Returns bytes copied."""
    with Path(target).open("wb" if replace_existing else "xb") as out:
        return _transfer(stream, out)


@unchecked
def copy_to_stream(source: StrPath, stream: BinaryIO) -> int:
    """Copy all bytes of source into stream. Returns bytes copied."""
    with Path(source).open("rb") as src:
        return _transfer(src, stream)


@unchecked
def move(source: StrPath, target: StrPath, *, replace_existing: bool = False) -> Path:
    """Move source to target, copying across filesystems. Returns target.

    With replace_existing, an existing file or empty directory at target
    is deleted first.
    """
    target = Path(target)
    if not replace_existing:
        _refuse_existing(target)
    elif target.exists() or target.is_symlink():
        _remove(target)
    shutil.move(source, target)
    return target


@unchecked
def delete(path: StrPath) -> None:
    """Delete a file, symlink or empty directory. Missing path raises."""
    _remove(Path(path))


@unchecked
def delete_if_exists(path: StrPath) -> bool:
    """Delete path if present. Returns True if something was deleted."""
    try:
        _remove(Path(path))
    except FileNotFoundError:
        return False
    return True


# =============================================================================
# Create
# =============================================================================


@unchecked
def create_directories(path: StrPath) -> Path:
    """Create directory and missing parents. Existing directory is fine."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


@unchecked
def create_directory(path: StrPath) -> Path:
    """Create one directory. Parent must exist, path must not."""
    path = Path(path)
    path.mkdir()
    return path


@unchecked
def create_file(path: StrPath) -> Path:
    """Create an empty file. Path must not exist."""
    path = Path(path)
    path.touch(exist_ok=False)
    return path


@unchecked
def create_link(link: StrPath, existing: StrPath) -> Path:
    """Create hard link at link pointing to existing. Returns link."""
    link = Path(link)
    link.hardlink_to(existing)
    return link


@unchecked
def create_symbolic_link(link: StrPath, target: StrPath) -> Path:
    """Create symbolic link at link pointing to target. Returns link."""
    link = Path(link)
    link.symlink_to(target)
    return link


@unchecked
def create_temp_directory(prefix: str | None = None, directory: StrPath | None = None) -> Path:
    """Create a new temporary directory. Caller deletes it."""
    return Path(tempfile.mkdtemp(prefix=prefix, dir=directory))


@unchecked
def create_temp_file(
    prefix: str | None = None,
    suffix: str | None = None,
    directory: StrPath | None = None,
) -> Path:
    """Create a new empty temporary file. Caller deletes it."""
    fd, name = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=directory)
    os.close(fd)
    return Path(name)


# =============================================================================
# Attributes
# =============================================================================


@unchecked
def read_attributes(path: StrPath, *, follow_symlinks: bool = True) -> FileAttributes:
    """Read FileAttributes for path."""
    return _read_attributes(path, follow_symlinks=follow_symlinks)


@unchecked
def size(path: StrPath) -> int:
    """Size of path in bytes."""
    return Path(path).stat().st_size


@unchecked
def get_last_modified_time(path: StrPath, *, follow_symlinks: bool = True) -> float:
    """Modification time of path, POSIX seconds."""
    return Path(path).stat(follow_symlinks=follow_symlinks).st_mtime


@unchecked
def set_last_modified_time(path: StrPath, mtime: float) -> Path:
    """Set modification time of path, keeping its access time."""
    path = Path(path)
    os.utime(path, (path.stat().st_atime, mtime))
    return path


@unchecked
def get_posix_file_permissions(path: StrPath, *, follow_symlinks: bool = True) -> int:
    """Permission bits of path (e.g. 0o644)."""
    return stat.S_IMODE(Path(path).stat(follow_symlinks=follow_symlinks).st_mode)


@unchecked
def set_posix_file_permissions(path: StrPath, mode: int) -> Path:
    """Set permission bits of path."""
    path = Path(path)
    path.chmod(mode)
    return path


@unchecked
def get_owner(path: StrPath) -> str:
    """Name of the user owning path."""
    return Path(path).owner()


@unchecked
def set_owner(path: StrPath, owner: str | int, group: str | int | None = None) -> Path:
    """Change the owning user (and optionally group) of path."""
    path = Path(path)
    shutil.chown(path, user=owner, group=group)
    return path


@unchecked
def get_attribute(path: StrPath, name: str, *, follow_symlinks: bool = True) -> object:
    """Read one FileAttributes field by name (e.g. "size", "modified_time").

    Raises:
        ValueError: If name is not a FileAttributes field
        UncheckedIOError: If path cannot be stat-ed
    """
    if name not in _ATTRIBUTE_NAMES:
        raise ValueError(f"unknown attribute {name!r}, expected one of {sorted(_ATTRIBUTE_NAMES)}")
    return getattr(_read_attributes(path, follow_symlinks=follow_symlinks), name)


@unchecked
def set_attribute(path: StrPath, name: str, value: float, *, follow_symlinks: bool = True) -> Path:
    """Set a writable time attribute ("modified_time" or "access_time").

    The other timestamp is kept.

    Raises:
        ValueError: If name is unknown or read-only
        UncheckedIOError: If path cannot be stat-ed or updated
    """
    if name not in _SETTABLE_ATTRIBUTES:
        raise ValueError(f"attribute {name!r} cannot be set, expected one of {sorted(_SETTABLE_ATTRIBUTES)}")
    path = Path(path)
    st = path.stat(follow_symlinks=follow_symlinks)
    times = {"access_time": st.st_atime, "modified_time": st.st_mtime, name: value}
    os.utime(path, (times["access_time"], times["modified_time"]), follow_symlinks=follow_symlinks)
    return path


def is_hidden(path: StrPath) -> bool:
    """True for dot-entries. Name-based: no filesystem access."""
    return HIDDEN.accept(Path(path))


@unchecked
def is_same_file(path1: StrPath, path2: StrPath) -> bool:
    """True if both paths locate the same file. Equal paths are not stat-ed."""
    return Path(path1) == Path(path2) or os.path.samefile(path1, path2)


@unchecked
def probe_content_type(path: StrPath) -> str | None:
    """Guess MIME type from the file name. None if unknown."""
    return mimetypes.guess_type(Path(path).name)[0]


# =============================================================================
# Read / write
# =============================================================================


@unchecked
def read_all_bytes(path: StrPath) -> bytes:
    """Read the whole file as bytes."""
    return Path(path).read_bytes()


@unchecked
def read_all_lines(path: StrPath, encoding: str = "utf-8") -> list[str]:
    """Read the whole file as lines without terminators.

    Splits on LF, CR and CRLF only, like lines().
    """
    with Path(path).open(encoding=encoding) as f:
        return [line.rstrip("\r\n") for line in f]


@unchecked_iter
def lines(path: StrPath, encoding: str = "utf-8") -> Iterator[str]:
    """Lazily yield lines without terminators.

    The file is opened on first next() and closed when the iterator
    is exhausted or closed. Errors while reading are converted too.
    """
    with Path(path).open(encoding=encoding) as f:
        for line in f:
            yield line.rstrip("\r\n")


@unchecked
def write_bytes(path: StrPath, data: bytes) -> Path:
    """Write data to path, replacing existing content."""
    path = Path(path)
    path.write_bytes(data)
    return path


@unchecked
def write_lines(path: StrPath, content: Iterable[str], encoding: str = "utf-8") -> Path:
    """Write each line followed by a newline, replacing existing content."""
    path = Path(path)
    with path.open("w", encoding=encoding) as f:
        for line in content:
            f.write(line)
            f.write("\n")
    return path


@unchecked
def open_binary(path: StrPath, mode: str = "rb") -> BinaryIO:
    """Open path in binary mode. Caller closes the stream."""
    if "b" not in mode:
        raise ValueError(f"mode must be binary, got {mode!r}")
    return Path(path).open(mode)


@unchecked
def open_text(path: StrPath, mode: str = "r", encoding: str = "utf-8") -> IO[str]:
    """Open path in text mode. Caller closes the stream."""
    if "b" in mode:
        raise ValueError(f"mode must be text, got {mode!r}")
    return Path(path).open(mode, encoding=encoding)


# =============================================================================
# Directories and links
# =============================================================================


@unchecked
def list_directory(path: StrPath, file_filter: FileFilter | None = None) -> list[Path]:
    """Entries of a directory, sorted. Not recursive.

    Args:
        path: Directory to list.
        file_filter: If given, only entries it accepts are returned.
    """
    entries = sorted(Path(path).iterdir())
    if file_filter is None:
        return entries
    return [entry for entry in entries if file_filter.accept(entry)]


@unchecked_iter
def walk(start: StrPath, *, max_depth: int | None = None, follow_symlinks: bool = False) -> Iterator[Path]:
    """Lazily yield start and every entry below it.

    A directory is yielded before its contents; entries of one directory
    come out sorted. A missing start raises on first next().

    Args:
        start: Root of the walk (a file yields only itself).
        max_depth: Levels below start to visit; 0 yields only start.
        follow_symlinks: Descend into symlinked directories.
    """
    _check_depth(max_depth)
    start = Path(start)
    start.stat(follow_symlinks=follow_symlinks)
    yield start
    if max_depth == 0 or not start.is_dir():
        return
    for directory, dirnames, filenames in start.walk(on_error=_reraise, follow_symlinks=follow_symlinks):
        depth = len(directory.relative_to(start).parts) + 1
        dirnames.sort()
        for name in sorted(dirnames + filenames):
            yield directory / name
        if max_depth is not None and depth >= max_depth:
            dirnames.clear()


def _visit_entries(
    directory: Path,
    visitor: PathVisitorFilter,
    depth: int,
    max_depth: int | None,
    follow_symlinks: bool,
) -> bool:
    """Visit the entries of directory depth-first. False once terminated."""
    for entry in sorted(directory.iterdir()):
        attributes = _read_attributes(entry, follow_symlinks=follow_symlinks)
        match visitor.accept_path(entry, attributes):
            case VisitResult.TERMINATE:
                return False
            case VisitResult.SKIP_SIBLINGS:
                return True
            case VisitResult.CONTINUE if attributes.is_directory and (max_depth is None or depth < max_depth):
                if not _visit_entries(entry, visitor, depth + 1, max_depth, follow_symlinks):
                    return False
    return True


@unchecked
def walk_file_tree(
    start: StrPath,
    visitor: PathVisitorFilter,
    *,
    max_depth: int | None = None,
    follow_symlinks: bool = False,
) -> Path:
    """Walk the tree under start, steered by visitor.accept_path verdicts.

    Each entry (start included) is passed with its FileAttributes:
    - CONTINUE: go on, descending into directories
    - SKIP_SUBTREE: do not descend into this directory
    - SKIP_SIBLINGS: skip the remaining entries of the same directory
    - TERMINATE: stop the walk

    Any shape C filter works as visitor, e.g. an AndFileFilter.

    Returns:
        start
    """
    _check_depth(max_depth)
    start = Path(start)
    attributes = _read_attributes(start, follow_symlinks=follow_symlinks)
    verdict = visitor.accept_path(start, attributes)
    if verdict is VisitResult.CONTINUE and attributes.is_directory and max_depth != 0:
        _visit_entries(start, visitor, 1, max_depth, follow_symlinks)
    return start


@unchecked
def read_symbolic_link(path: StrPath) -> Path:
    """Target of a symbolic link. Raises if path is not a link."""
    return Path(path).readlink()
