"""Exhaustive pattern dispatch over outcomes.

Each matcher calls exactly one handler. A value outside the closed variant
set is a programmer error and raises InvalidTagError.
"""

from __future__ import annotations

from collections.abc import Callable

from remote_result.errors import InvalidTagError, UnsettledError
from remote_result.types.result import Err, Loading, NotAsked, Ok, RemoteResult, Result

__all__ = ['fold', 'match', 'match_by_outcome']


def fold[T, E, R](r: Result[T, E], on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:
    """Collapse a settled Result into a single value.

    Args:
        r: An Ok or an Err.
        on_ok: Called with the Ok value.
        on_err: Called with the Err payload.

    Returns:
        Whatever the selected handler returns.

    Raises:
        UnsettledError: If ``r`` is Loading or NotAsked.
        InvalidTagError: If ``r`` is not an outcome.

    Example:
        ```python
        fold(Ok(3), lambda v: f'got {v}', lambda e: f'failed: {e}')
        # 'got 3'
        ```
    """
    match r:
        case Ok(value=value):
            return on_ok(value)
        case Err(error=error):
            return on_err(error)
        case Loading() | NotAsked():
            raise UnsettledError(r.tag, 'fold')
        case _:
            raise InvalidTagError(r, 'fold')


def match[T, E, R](
    r: RemoteResult[T, E],
    *,
    ok: Callable[[T], R],
    err: Callable[[E], R],
    loading: Callable[[], R],
    not_asked: Callable[[], R],
) -> R:
    """Dispatch on all four variants, with handlers named after the tags.

    Example:
        ```python
        match(
            Loading(),
            ok=lambda user: render(user),
            err=lambda e: render_error(e),
            loading=lambda: 'spinner',
            not_asked=lambda: 'idle',
        )
        # 'spinner'
        ```
    """
    match r:
        case Ok(value=value):
            return ok(value)
        case Err(error=error):
            return err(error)
        case Loading():
            return loading()
        case NotAsked():
            return not_asked()
        case _:
            raise InvalidTagError(r, 'match')


def match_by_outcome[T, E, R](
    r: RemoteResult[T, E],
    *,
    success: Callable[[T], R],
    failure: Callable[[E], R],
    loading: Callable[[], R],
    not_asked: Callable[[], R],
) -> R:
    """Same as :func:`match`, with handlers named after outcomes."""
    match r:
        case Ok(value=value):
            return success(value)
        case Err(error=error):
            return failure(error)
        case Loading():
            return loading()
        case NotAsked():
            return not_asked()
        case _:
            raise InvalidTagError(r, 'match_by_outcome')
