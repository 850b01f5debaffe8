"""
Inspecting a Result.

Variant tests and payload extraction, written as exhaustive matches over
Ok / Error.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import UnwrapError


def is_ok[T, E](result: Result[T, E]) -> bool:
    """True for the success variant."""
    return isinstance(result, Ok)


def is_error[T, E](result: Result[T, E]) -> bool:
    """True for the failure variant."""
    return isinstance(result, Error)


def get[T, E](result: Result[T, E]) -> T | None:
    """
    Success value, or None for an Error.

    Example:
        L.down.get(combine([Ok(1), Ok(2)]))  # [1, 2]
        L.down.get(Error("boom"))            # None
    """
    match result:
        case Ok(value):
            return value
        case Error(_):
            return None
        case _ as unreachable:
            assert_never(unreachable)


def get_error[T, E](result: Result[T, E]) -> E | None:
    """Error payload, or None for an Ok."""
    match result:
        case Error(error):
            return error
        case Ok(_):
            return None
        case _ as unreachable:
            assert_never(unreachable)


def or_else[T, E](result: Result[T, E], default: T) -> T:
    """
    Success value or default.

    Example:
        total = L.down.or_else(fold(prices, add_price, initial=0), default=0)
    """
    match result:
        case Ok(value):
            return value
        case Error(_):
            return default
        case _ as unreachable:
            assert_never(unreachable)


def unsafe[T, E](result: Result[T, E]) -> T:
    """
    Unwrap, raising on Error.

    NOTE: Raises UnwrapError carrying the error payload. Use only when
          success is certain or the exception is the desired outcome.
    """
    match result:
        case Ok(value):
            return value
        case Error(error):
            raise UnwrapError(error)
        case _ as unreachable:
            assert_never(unreachable)


def equals(left: Result[object, object], right: Result[object, object]) -> bool:
    """
    Structural equality: same variant and equal payloads.

    Example:
        L.down.equals(Ok([1, 2]), combine([Ok(1), Ok(2)]))  # True
        L.down.equals(Ok(1), Error(1))                      # False
    """
    match (left, right):
        case (Ok(a), Ok(b)):
            return a == b
        case (Error(a), Error(b)):
            return a == b
        case _:
            return False


__all__ = (
    "is_ok",
    "is_error",
    "get",
    "get_error",
    "or_else",
    "unsafe",
    "equals",
)
