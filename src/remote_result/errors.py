"""Error types raised by remote-result itself.

Domain errors never appear here: they live inside Err as opaque payloads.
The classes below signal contract violations (structural misuse) and the
rejection of an awaitable produced from an Err with a non-exception payload.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'InvalidTagError',
    'RejectedError',
    'RemoteResultError',
    'StructuralError',
    'UnsettledError',
    'UnwrapError',
]


class RemoteResultError(Exception):
    """Base class for every error raised by remote-result."""


class StructuralError(RemoteResultError, RuntimeError):
    """A combinator was called in violation of its contract.

    These are programmer errors. They are raised, never returned as Err.
    """


class UnwrapError(StructuralError):
    """Tried to unwrap an outcome that is not Ok."""

    def __init__(self, outcome: Any, message: str | None = None) -> None:
        self.outcome = outcome
        super().__init__(message or f'Called unwrap on {outcome!r}')


class UnsettledError(StructuralError):
    """A Result-only operation received Loading or NotAsked."""

    def __init__(self, tag: str, operation: str) -> None:
        self.tag = tag
        self.operation = operation
        super().__init__(f'{operation}() requires a settled Result, got {tag!r}')


class InvalidTagError(StructuralError):
    """The value's discriminant is not one of ok, err, loading, not-asked."""

    def __init__(self, value: Any, operation: str) -> None:
        self.value = value
        self.operation = operation
        super().__init__(f'{operation}() got an invalid outcome: {value!r}')


class RejectedError(RemoteResultError):
    """An awaitable built from Err rejected with a non-exception payload."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'Awaitable rejected with {error!r}')
