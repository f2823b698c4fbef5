"""Transformation algebra over outcomes.

Every function returns a new outcome or its input untouched; nothing is
mutated. Functions on the success channel pass Err, Loading and NotAsked
through, and functions on the failure channel pass Ok, Loading and NotAsked
through.

Example:
    ```python
    from remote_result import Err, Ok, bind_err, map_ok

    map_ok(Ok(42), lambda x: x * 2)
    # Ok(value=84)

    bind_err(Err('net'), lambda e: Ok('cached') if e == 'net' else Err(e))
    # Ok(value='cached')
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from remote_result.errors import InvalidTagError, UnsettledError, UnwrapError
from remote_result.types.result import Err, Loading, NotAsked, Ok, RemoteResult, Result

__all__ = [
    'bimap',
    'bind_err',
    'bind_ok',
    'get_or_else',
    'map_err',
    'map_ok',
    'map_remote',
    'swap',
    'unwrap',
    'unwrap_or',
]


def map_ok[T, U, E](r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Apply ``f`` to an Ok payload; return anything else unchanged.

    Args:
        r: The outcome to transform.
        f: Function applied to the Ok value.

    Returns:
        ``Ok(f(value))`` for Ok, otherwise ``r``.
    """
    match r:
        case Ok(value=value):
            return Ok(f(value))
        case _:
            return r


def bind_ok[T, U, E, F](r: Result[T, E], f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
    """Chain a function that itself returns an outcome (flatmap).

    ``f`` may return Err, which is how a later step injects a failure.

    Args:
        r: The outcome to chain from.
        f: Function taking the Ok value and returning a new outcome.

    Returns:
        ``f(value)`` for Ok, otherwise ``r``.
    """
    match r:
        case Ok(value=value):
            return f(value)
        case _:
            return r


def map_err[T, E, F](r: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Apply ``f`` to an Err payload; return anything else unchanged."""
    match r:
        case Err(error=error):
            return Err(f(error))
        case _:
            return r


def bind_err[T, U, E, F](r: Result[T, E], f: Callable[[E], Result[U, F]]) -> Result[T | U, F]:
    """Recover from (or re-route) an Err with a function returning an outcome.

    Args:
        r: The outcome to chain from.
        f: Function taking the Err payload and returning a new outcome.

    Returns:
        ``f(error)`` for Err, otherwise ``r``.
    """
    match r:
        case Err(error=error):
            return f(error)
        case _:
            return r


def bimap[T, U, E, F](r: Result[T, E], ok_f: Callable[[T], U], err_f: Callable[[E], F]) -> Result[U, F]:
    """Map both channels of a settled Result at once.

    Args:
        r: An Ok or an Err.
        ok_f: Function applied to an Ok value.
        err_f: Function applied to an Err payload.

    Raises:
        UnsettledError: If ``r`` is Loading or NotAsked.
        InvalidTagError: If ``r`` is not an outcome at all.
    """
    match r:
        case Ok(value=value):
            return Ok(ok_f(value))
        case Err(error=error):
            return Err(err_f(error))
        case Loading() | NotAsked():
            raise UnsettledError(r.tag, 'bimap')
        case _:
            raise InvalidTagError(r, 'bimap')


def swap[T, E](r: RemoteResult[T, E]) -> RemoteResult[E, T]:
    """Exchange the channels: Ok(v) becomes Err(v) and Err(e) becomes Ok(e).

    Loading and NotAsked pass through. ``swap(swap(r)) == r``.
    """
    match r:
        case Ok(value=value):
            return Err(value)
        case Err(error=error):
            return Ok(error)
        case _:
            return r


def map_remote[T, U, E](r: RemoteResult[T, E], f: Callable[[T], U]) -> RemoteResult[U, E]:
    """Apply ``f`` to an Ok payload of a four-variant outcome.

    Err, Loading and NotAsked pass through unchanged.
    """
    match r:
        case Ok(value=value):
            return Ok(f(value))
        case _:
            return r


def unwrap[T](r: RemoteResult[T, Any]) -> T:
    """Return the Ok value.

    Raises:
        UnwrapError: If ``r`` is not Ok.
    """
    match r:
        case Ok(value=value):
            return value
        case _:
            raise UnwrapError(r)


def unwrap_or[T](r: RemoteResult[T, Any], default: T) -> T:
    """Return the Ok value, or ``default`` for every other variant."""
    match r:
        case Ok(value=value):
            return value
        case _:
            return default


def get_or_else[T](r: RemoteResult[T, Any], default: T) -> T:
    """Alias of :func:`unwrap_or`."""
    return unwrap_or(r, default)
