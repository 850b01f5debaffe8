"""
WriterResult - Result with accumulated log
==========================================
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .log import Log


class WriterResult[T, E, W]:
    """
    Result paired with the log written while producing it.

    Combines:
    - Result[T, E]: outcome of the step (success or error)
    - W: accumulated log, normally Log[entry]

    Step functions passed to the *_w combinators return this type.
    Supports ``match wr: case WriterResult(result, log): ...``.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        """The underlying Result."""
        return self._result

    @property
    def log(self) -> W:
        """The accumulated log."""
        return self._log

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


# Convenience constructors
def writer_ok[T, W](value: T, *entries: W) -> WriterResult[T, typing.Never, Log[W]]:
    """Successful step carrying value and optional log entries."""
    return WriterResult(Ok(value), Log.of(*entries))


def writer_error[E, W](error: E, *entries: W) -> WriterResult[typing.Never, E, Log[W]]:
    """Failed step carrying error and optional log entries."""
    return WriterResult(Error(error), Log.of(*entries))


def tell[W](*entries: W) -> WriterResult[None, typing.Never, Log[W]]:
    """Write entries without producing a value."""
    return WriterResult(Ok(None), Log.of(*entries))


__all__ = (
    "WriterResult",
    "writer_ok",
    "writer_error",
    "tell",
)
