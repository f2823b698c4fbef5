"""Outcome variants: Ok[T] | Err[E] | Loading | NotAsked.

Each variant is a frozen, tagged msgspec Struct. The tag lives in the
``type`` field, so an outcome's record shape is ``{"type": "ok", "value": ...}``,
``{"type": "err", "error": ...}``, ``{"type": "loading"}`` or
``{"type": "not-asked"}``.

Examples:
    >>> Ok(42).map(lambda x: x * 2)
    Ok(value=84)
    >>> Err('boom').unwrap_or(0)
    0
    >>> Loading().is_loading()
    True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from remote_result.errors import UnwrapError

__all__ = [
    'Err',
    'Failure',
    'InProgress',
    'Loading',
    'NotAsked',
    'NotStarted',
    'Ok',
    'RemoteResult',
    'Result',
    'Success',
]


class Ok[T](msgspec.Struct, frozen=True, gc=False, tag_field='type', tag='ok'):
    """Success variant: the operation completed and produced ``value``.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.and_then(lambda x: Err(f'rejected {x}'))
        Err(error='rejected 42')
    """

    value: T

    @property
    def tag(self) -> str:
        """The discriminant, ``'ok'``."""
        return 'ok'

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_loading(self) -> bool:
        return False

    def is_not_asked(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply ``f`` to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing ``f(value)``.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[R](self, f: Callable[[T], R]) -> R:
        """Apply a function that returns an outcome to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns a new outcome.

        Returns:
            The outcome returned by ``f``.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self


class Err[E](msgspec.Struct, frozen=True, gc=False, tag_field='type', tag='err'):
    """Failure variant: the operation completed and failed with ``error``.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.or_else(lambda e: Ok('recovered'))
        Ok(value='recovered')
    """

    error: E

    @property
    def tag(self) -> str:
        """The discriminant, ``'err'``."""
        return 'err'

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def is_loading(self) -> bool:
        return False

    def is_not_asked(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise since Err has no value to unwrap.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always, with ``msg`` and the contained error.
        """
        raise UnwrapError(self, f'{msg}: {self.error!r}')

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply ``f`` to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[R](self, f: Callable[[E], R]) -> R:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new outcome.

        Returns:
            The outcome returned by ``f``.
        """
        return f(self.error)


class Loading(msgspec.Struct, frozen=True, gc=False, tag_field='type', tag='loading'):
    """In-progress variant: the operation started, its outcome is unknown."""

    @property
    def tag(self) -> str:
        return 'loading'

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return False

    def is_loading(self) -> TypeIs[Loading]:
        return True

    def is_not_asked(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise since Loading carries no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self)

    def unwrap_or[T](self, default: T) -> T:
        return default

    def expect(self, msg: str) -> NoReturn:
        raise UnwrapError(self, f'{msg}: still loading')

    def map(self, _f: Callable[[Any], Any]) -> Loading:
        return self

    def map_err(self, _f: Callable[[Any], Any]) -> Loading:
        return self

    def and_then(self, _f: Callable[[Any], Any]) -> Loading:
        return self

    def or_else(self, _f: Callable[[Any], Any]) -> Loading:
        return self


class NotAsked(msgspec.Struct, frozen=True, gc=False, tag_field='type', tag='not-asked'):
    """Not-started variant: the operation was never initiated."""

    @property
    def tag(self) -> str:
        return 'not-asked'

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return False

    def is_loading(self) -> bool:
        return False

    def is_not_asked(self) -> TypeIs[NotAsked]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise since NotAsked carries no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self)

    def unwrap_or[T](self, default: T) -> T:
        return default

    def expect(self, msg: str) -> NoReturn:
        raise UnwrapError(self, f'{msg}: never requested')

    def map(self, _f: Callable[[Any], Any]) -> NotAsked:
        return self

    def map_err(self, _f: Callable[[Any], Any]) -> NotAsked:
        return self

    def and_then(self, _f: Callable[[Any], Any]) -> NotAsked:
        return self

    def or_else(self, _f: Callable[[Any], Any]) -> NotAsked:
        return self


type Result[T, E = Exception] = Ok[T] | Err[E]
type RemoteResult[T, E = Exception] = Ok[T] | Err[E] | Loading | NotAsked

# Outcome-oriented names for the same variants.
Success = Ok
Failure = Err
InProgress = Loading
NotStarted = NotAsked
