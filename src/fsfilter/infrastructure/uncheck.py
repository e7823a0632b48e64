"""OSError -> UncheckedIOError conversion.

For filesystem calls made inside callbacks (map, filter, sort keys)
where an ``except OSError`` further up must not catch the failure.
Only OSError is converted; every other exception passes through.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from fsfilter.domain.exceptions import UncheckedIOError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)


def _convert(error: OSError, func: Callable[..., object]) -> UncheckedIOError:
    name = getattr(func, "__qualname__", None) or repr(func)
    logger.debug("Converting %s from %s: %s", type(error).__name__, name, error)
    return UncheckedIOError(error)


def unchecked[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Decorate func so that OSError is re-raised as UncheckedIOError.

    Args:
        func: Function that may raise OSError.

    Returns:
        Wrapper with the same signature. The OSError is chained
        as __cause__ and kept in UncheckedIOError.cause.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except OSError as e:
            raise _convert(e, func) from e

    return wrapper


def call[**P, R](func: Callable[P, R], /, *args: P.args, **kwargs: P.kwargs) -> R:
    """Call func once, converting OSError to UncheckedIOError.

    Example:
        size = call(os.path.getsize, path)
    """
    return unchecked(func)(*args, **kwargs)


def unchecked_iter[**P, T](func: Callable[P, Iterator[T]]) -> Callable[P, Iterator[T]]:
    """Like unchecked, but also converts errors raised while iterating.

    For lazy producers (generators, file line iterators) whose
    failures surface on next(), not on the call itself.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Iterator[T]:
        try:
            yield from func(*args, **kwargs)
        except OSError as e:
            raise _convert(e, func) from e

    return wrapper
