"""Strict comparison of outcomes.

``==`` on variant instances is structural (msgspec compares fields with
``==``). :func:`equals` is stricter: without a comparator, containers and
other objects only match when they are the very same object.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from numbers import Number
from typing import Any

from remote_result.guards import _unpack

__all__ = ['equals']

_SCALARS = (str, bytes)


def _strict_eq(a: Any, b: Any) -> bool:
    """Value equality for scalars, identity for everything else."""
    if a is None or b is None:
        return a is b
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, Number) and isinstance(b, Number):
        if isinstance(a, float) and math.isnan(a):
            return False
        return a == b
    if isinstance(a, _SCALARS) and isinstance(b, _SCALARS):
        return type(a) is type(b) and a == b
    return a is b


def equals(a: object, b: object, payload_eq: Callable[[Any, Any], bool] | None = None) -> bool:
    """Compare two outcomes.

    Args:
        a: Any value.
        b: Any value.
        payload_eq: Optional comparator for Ok/Err payloads. Defaults to
            strict equality: scalars by value, everything else by identity.

    Returns:
        False if either side is not an outcome or the tags differ. For two
        Ok or two Err, the payload comparison. True for two Loading or two
        NotAsked.

    Example:
        ```python
        equals(Ok(1), Ok(1))
        # True
        equals(Ok([1, 2]), Ok([1, 2]))
        # False
        equals(Ok([1, 2]), Ok([1, 2]), lambda x, y: x == y)
        # True
        ```
    """
    left = _unpack(a)
    right = _unpack(b)
    if left is None or right is None:
        return False
    (tag, left_payload), (other_tag, right_payload) = left, right
    if tag != other_tag:
        return False
    if tag in ('ok', 'err'):
        compare = payload_eq if payload_eq is not None else _strict_eq
        return bool(compare(left_payload, right_payload))
    return True
