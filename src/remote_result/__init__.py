"""remote-result: a four-state outcome type for Python 3.13+.

An outcome is Ok(value), Err(error), Loading() or NotAsked(). The package
namespace bundles the variants, the guards and every combinator.

Flat imports (preferred):
    from remote_result import Ok, Err, Loading, NotAsked, RemoteResult
    from remote_result import map_ok, bind_ok, fold, match, equals, safe

Submodule imports (for organization):
    from remote_result.types import Ok, Err, Result
    from remote_result.guards import is_ok, is_remote_result
    from remote_result.ops import map_ok, fold
    from remote_result.convert import from_nullable, capture_sync
    from remote_result.decorators import safe
"""

# Types
from remote_result.types import (
    Err,
    Failure,
    InProgress,
    Loading,
    NotAsked,
    NotStarted,
    Ok,
    RemoteResult,
    Result,
    Success,
)

# Errors
from remote_result.errors import (
    InvalidTagError,
    RejectedError,
    RemoteResultError,
    StructuralError,
    UnsettledError,
    UnwrapError,
)

# Guards
from remote_result.guards import (
    is_err,
    is_loading,
    is_not_asked,
    is_ok,
    is_remote_failure,
    is_remote_result,
    is_remote_success,
    is_result,
)

# Combinators
from remote_result.ops import (
    bimap,
    bind_err,
    bind_ok,
    equals,
    fold,
    get_or_else,
    map_err,
    map_ok,
    map_remote,
    match,
    match_by_outcome,
    swap,
    unwrap,
    unwrap_or,
)

# Adapters
from remote_result.convert import (
    UNSET,
    capture_async,
    capture_sync,
    from_falsy,
    from_missing,
    from_nullable,
    from_nullish,
    to_awaitable,
)

# Decorators
from remote_result.decorators import safe, safe_async

__all__ = [
    'UNSET',
    'Err',
    'Failure',
    'InProgress',
    'InvalidTagError',
    'Loading',
    'NotAsked',
    'NotStarted',
    'Ok',
    'RejectedError',
    'RemoteResult',
    'RemoteResultError',
    'Result',
    'StructuralError',
    'Success',
    'UnsettledError',
    'UnwrapError',
    'bimap',
    'bind_err',
    'bind_ok',
    'capture_async',
    'capture_sync',
    'equals',
    'fold',
    'from_falsy',
    'from_missing',
    'from_nullable',
    'from_nullish',
    'get_or_else',
    'is_err',
    'is_loading',
    'is_not_asked',
    'is_ok',
    'is_remote_failure',
    'is_remote_result',
    'is_remote_success',
    'is_result',
    'map_err',
    'map_ok',
    'map_remote',
    'match',
    'match_by_outcome',
    'safe',
    'safe_async',
    'swap',
    'to_awaitable',
    'unwrap',
    'unwrap_or',
]
