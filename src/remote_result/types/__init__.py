"""Core types: Ok, Err, Loading, NotAsked, Result, RemoteResult."""

from remote_result.types.result import (
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
