"""Adapters between plain Python values, exceptions, awaitables and outcomes.

Python has a single null, ``None``. The "missing" marker, distinct from an
explicit ``None``, is :data:`msgspec.UNSET` (re-exported as
``remote_result.UNSET``), the same sentinel msgspec uses for fields that were
never set.

Example:
    ```python
    from remote_result import UNSET, capture_sync, from_falsy, from_missing, from_nullable

    from_nullable(0, 'required')
    # Ok(value=0)
    from_falsy(0, 'required')
    # Err(error='required')
    from_missing(None, 'missing')
    # Ok(value=None)
    from_missing(UNSET, 'missing')
    # Err(error='missing')

    capture_sync(lambda: int('nope'))
    # Err(error=ValueError("invalid literal for int() with base 10: 'nope'"))
    ```
"""

from __future__ import annotations

import functools
import numbers
from decimal import Decimal
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, NoReturn

from msgspec import UNSET, UnsetType

from remote_result.errors import InvalidTagError, RejectedError, UnsettledError
from remote_result.runtime._logging import debug_enabled, get_logger
from remote_result.types.result import Err, Loading, NotAsked, Ok, Result

__all__ = [
    'UNSET',
    'capture_async',
    'capture_sync',
    'from_falsy',
    'from_missing',
    'from_nullable',
    'from_nullish',
    'to_awaitable',
]

logger = get_logger(__name__)

DEFAULT_EXCEPTIONS: tuple[type[BaseException], ...] = (Exception,)


def _describe(fn: Callable[..., Any]) -> str:
    if isinstance(fn, functools.partial):
        fn = fn.func
    return getattr(fn, '__qualname__', None) or repr(fn)


def _log_captured(exc: BaseException, fn: Callable[..., Any]) -> None:
    if debug_enabled(__name__):
        logger.debug('exception_captured', exc_type=type(exc).__name__, function=_describe(fn))


def from_nullable[T, E](value: T | None | UnsetType, error: E) -> Result[T, E]:
    """Ok(value) unless ``value`` is None or UNSET.

    Zero, the empty string and False are present values.
    """
    if value is None or value is UNSET:
        return Err(error)
    return Ok(value)


def from_missing[T, E](value: T | UnsetType, error: E) -> Result[T, E]:
    """Ok(value) unless ``value`` is UNSET; an explicit None is Ok(None)."""
    if value is UNSET:
        return Err(error)
    return Ok(value)


def from_nullish[T, E](value: T | None | UnsetType, error: E) -> Result[T, E]:
    """Same as :func:`from_nullable`."""
    return from_nullable(value, error)


def from_falsy[T, E](value: T, error: E) -> Result[T, E]:
    """Ok(value) if ``value`` is truthy, else Err(error).

    Any numeric NaN (float, complex, Decimal) counts as falsy here even
    though ``bool(float('nan'))`` is True.
    """
    if value is UNSET or not value or _is_nan(value):
        return Err(error)
    return Ok(value)


def _is_nan(value: object) -> bool:
    # Decimal('sNaN') raises on comparison
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, numbers.Number) and value != value  # noqa: PLR0124


async def _resolve[T](value: T) -> T:
    return value


async def _reject(error: Any) -> NoReturn:
    if debug_enabled(__name__):
        logger.debug('awaitable_rejected', error_type=type(error).__name__)
    if isinstance(error, BaseException):
        raise error
    raise RejectedError(error)


def to_awaitable[T](r: Result[T, Any]) -> Coroutine[Any, Any, T]:
    """Bridge a settled Result to a single-shot awaitable.

    The variant is checked before anything is awaited, so misuse raises at
    the call site.

    Args:
        r: An Ok or an Err.

    Returns:
        A coroutine that returns the Ok value, or raises the Err payload
        (wrapped in RejectedError when the payload is not an exception).

    Raises:
        UnsettledError: If ``r`` is Loading or NotAsked.
        InvalidTagError: If ``r`` is not an outcome.
    """
    match r:
        case Ok(value=value):
            return _resolve(value)
        case Err(error=error):
            return _reject(error)
        case Loading() | NotAsked():
            raise UnsettledError(r.tag, 'to_awaitable')
        case _:
            raise InvalidTagError(r, 'to_awaitable')


def capture_sync[T](
    fn: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, BaseException]:
    """Call ``fn`` and turn its return or exception into an outcome.

    Args:
        fn: Zero-argument callable.
        exceptions: Exception types converted to Err. Defaults to
            ``(Exception,)``; anything else propagates.

    Returns:
        Ok(return value), or Err(the raised exception).
    """
    catch = exceptions if exceptions is not None else DEFAULT_EXCEPTIONS
    try:
        value = fn()
    except catch as e:
        _log_captured(e, fn)
        return Err(e)
    return Ok(value)


async def capture_async[T](
    fn: Callable[[], Awaitable[T]],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, BaseException]:
    """Await ``fn()`` and turn its result or exception into an outcome.

    There is no timeout: if the awaitable never settles, neither does this.

    Args:
        fn: Zero-argument callable returning an awaitable.
        exceptions: Exception types converted to Err. Defaults to
            ``(Exception,)``, so cancellation still propagates.

    Returns:
        Ok(awaited value), or Err(the raised exception).
    """
    catch = exceptions if exceptions is not None else DEFAULT_EXCEPTIONS
    try:
        value = await fn()
    except catch as e:
        _log_captured(e, fn)
        return Err(e)
    return Ok(value)
