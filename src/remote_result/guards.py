"""Runtime guards for values of unknown shape.

Guards accept variant instances as well as record-shaped mappings such as
``{"type": "ok", "value": 1}`` (what a JSON decoder hands back). They never
raise on malformed input; anything that is not a well-formed outcome is
simply not a match.

Use them at untyped boundaries. Code that already holds an outcome should
dispatch with ``match`` statements or the functions in ``remote_result.ops``.

Examples:
    >>> is_ok(Ok(1))
    True
    >>> is_ok({'type': 'ok', 'value': 'x'}, lambda v: isinstance(v, int))
    False
    >>> is_remote_result({'type': 'loading'})
    True
    >>> is_result(None)
    False
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeIs

from remote_result.types.result import Err, Loading, NotAsked, Ok, RemoteResult, Result

__all__ = [
    'is_err',
    'is_loading',
    'is_not_asked',
    'is_ok',
    'is_remote_failure',
    'is_remote_result',
    'is_remote_success',
    'is_result',
]

type Validator = Callable[[Any], bool]


def _unpack(value: object) -> tuple[str, Any] | None:
    """Return ``(tag, payload)`` for a well-formed outcome, else None.

    Payload is None for Loading and NotAsked.
    """
    match value:
        case Ok(value=payload):
            return 'ok', payload
        case Err(error=payload):
            return 'err', payload
        case Loading():
            return 'loading', None
        case NotAsked():
            return 'not-asked', None
        case {'type': str() as tag} if type(tag) is str:
            return _unpack_record(tag, value)
        case _:
            return None


def _unpack_record(tag: str, record: Mapping[str, Any]) -> tuple[str, Any] | None:
    # tag is an exact str here, so the literal comparisons below cannot raise
    match tag, record:
        case 'ok', {'value': payload}:
            return 'ok', payload
        case 'err', {'error': payload}:
            return 'err', payload
        case 'loading' | 'not-asked', _:
            return tag, None
        case _:
            return None


def _accepts(validator: Validator | None, payload: Any) -> bool:
    return validator is None or bool(validator(payload))


def is_ok[T](value: object, validator: Validator | None = None) -> TypeIs[Ok[T]]:
    """Return True if ``value`` is Ok and its payload passes ``validator``.

    Args:
        value: Any value, possibly malformed.
        validator: Optional predicate applied to the Ok payload.
    """
    parts = _unpack(value)
    return parts is not None and parts[0] == 'ok' and _accepts(validator, parts[1])


def is_err[E](value: object, validator: Validator | None = None) -> TypeIs[Err[E]]:
    """Return True if ``value`` is Err and its payload passes ``validator``.

    Args:
        value: Any value, possibly malformed.
        validator: Optional predicate applied to the Err payload.
    """
    parts = _unpack(value)
    return parts is not None and parts[0] == 'err' and _accepts(validator, parts[1])


def is_loading(value: object) -> TypeIs[Loading]:
    """Return True if ``value`` is Loading."""
    parts = _unpack(value)
    return parts is not None and parts[0] == 'loading'


def is_not_asked(value: object) -> TypeIs[NotAsked]:
    """Return True if ``value`` is NotAsked."""
    parts = _unpack(value)
    return parts is not None and parts[0] == 'not-asked'


def is_result[T, E](
    value: object,
    value_validator: Validator | None = None,
    error_validator: Validator | None = None,
) -> TypeIs[Result[T, E]]:
    """Return True if ``value`` is Ok or Err with a valid payload.

    Only the validator for the variant actually present is evaluated.

    Args:
        value: Any value, possibly malformed.
        value_validator: Optional predicate for an Ok payload.
        error_validator: Optional predicate for an Err payload.
    """
    parts = _unpack(value)
    if parts is None:
        return False
    tag, payload = parts
    if tag == 'ok':
        return _accepts(value_validator, payload)
    if tag == 'err':
        return _accepts(error_validator, payload)
    return False


def is_remote_result[T, E](
    value: object,
    value_validator: Validator | None = None,
    error_validator: Validator | None = None,
) -> TypeIs[RemoteResult[T, E]]:
    """Return True if ``value`` is any of the four variants.

    Loading and NotAsked are accepted unconditionally; Ok and Err are
    checked as in :func:`is_result`.
    """
    parts = _unpack(value)
    if parts is None:
        return False
    if parts[0] in ('loading', 'not-asked'):
        return True
    return is_result(value, value_validator, error_validator)


def is_remote_success[T](value: object, validator: Validator | None = None) -> TypeIs[Ok[T]]:
    """Alias of :func:`is_ok` for code written in remote-data terms."""
    return is_ok(value, validator)


def is_remote_failure[E](value: object, validator: Validator | None = None) -> TypeIs[Err[E]]:
    """Alias of :func:`is_err` for code written in remote-data terms."""
    return is_err(value, validator)
