"""Combinators: transformation, pattern dispatch and equality."""

from remote_result.ops.dispatch import fold, match, match_by_outcome
from remote_result.ops.equality import equals
from remote_result.ops.transform import (
    bimap,
    bind_err,
    bind_ok,
    get_or_else,
    map_err,
    map_ok,
    map_remote,
    swap,
    unwrap,
    unwrap_or,
)

__all__ = [
    'bimap',
    'bind_err',
    'bind_ok',
    'equals',
    'fold',
    'get_or_else',
    'map_err',
    'map_ok',
    'map_remote',
    'match',
    'match_by_outcome',
    'swap',
    'unwrap',
    'unwrap_or',
]
