"""
Lifting values into Result.

Functions for turning plain values, Optionals and exception-based code
into Result, ready to be fed to the collection combinators.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, Ok, Result


def pure[T](value: T) -> Result[T, Never]:
    """
    Lift pure value into a successful Result.

    Classic FP name for "wrap value in the success variant".

    Example:
        from result_combinators import lift as L

        L.up.pure(42)  # Ok(42)
    """
    return Ok(value)


def fail[E](error: E) -> Result[Never, E]:
    """
    Lift error into a failed Result. Dual of pure().

    Example:
        from result_combinators import lift as L

        L.up.fail(ValidationError("bad input"))  # Error(ValidationError(...))
    """
    return Error(error)


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Convert Optional to Result. None becomes Error(error()).

    **When to use:** lookups that return ``None`` for "missing", when the
    missing case must show up as an error in a fold or combine.

    Example:
        users = [L.up.optional(db.find(uid), error=lambda: NotFound(uid)) for uid in ids]
        combine(users)

    NOTE: error is a thunk so nothing is built when the value is present.
    """
    if value is None:
        return Error(error())
    return Ok(value)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[T, E]:
    """
    Call thunk, converting a raised exception into Error.

    Bridge between exception-based code and the combinators, which never
    catch on their own.

    Example:
        import json

        parsed = [
            L.up.catching(lambda raw=raw: json.loads(raw), on_error=lambda e: ParseError(str(e)))
            for raw in payloads
        ]
        values, errors = partition(parsed)

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Error(on_error(exc))


__all__ = (
    "pure",
    "fail",
    "optional",
    "catching",
)
