"""Partition combinators

Full traversal, never fails: split results into values and errors,
with extract pattern."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Error, Ok, Result

from .._helpers import extract_writer_result, merge_writer_logs
from .._types import NoError
from ..writer import Log, WriterResult

# Generic combinator (extract pattern)
def partitionM[T, E, RawIn, RawOut](
    raws: Iterable[RawIn],
    *,
    extract: Callable[[RawIn], Result[T, E]],
    combine: Callable[[list[T], list[E], list[RawIn]], RawOut],
) -> RawOut:
    """Generic partition combinator. One pass, keeps relative order on both sides."""
    seen: list[RawIn] = []
    successes: list[T] = []
    failures: list[E] = []

    for raw in raws:
        seen.append(raw)
        match extract(raw):
            case Ok(value):
                successes.append(value)
            case Error(err):
                failures.append(err)

    return combine(successes, failures, seen)

# Sugar for Result
def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """
    Separate into (values, errors) in a single pass. Never fails.

    Example:
        partition([Error(e2), Ok("x"), Error(e1)])  # (["x"], [e2, e1])
    """
    successes: list[T] = []
    failures: list[E] = []

    for r in results:
        match r:
            case Ok(value):
                successes.append(value)
            case Error(err):
                failures.append(err)

    return successes, failures

def get_all[T, E](results: Iterable[Result[T, E]]) -> list[T]:
    """Every Ok value in order, errors dropped."""
    values: list[T] = []
    for r in results:
        match r:
            case Ok(value):
                values.append(value)
    return values

def get_all_errors[T, E](results: Iterable[Result[T, E]]) -> list[E]:
    """Every Error payload in order, values dropped."""
    errors: list[E] = []
    for r in results:
        match r:
            case Error(err):
                errors.append(err)
    return errors

# Sugar for WriterResult
def partition_w[T, E, W](
    results: Iterable[WriterResult[T, E, Log[W]]],
) -> WriterResult[tuple[list[T], list[E]], NoError, Log[W]]:
    """Separate into (values, errors). Merge every log."""

    def combine(
        successes: list[T],
        failures: list[E],
        seen: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[tuple[list[T], list[E]], NoError, Log[W]]:
        return WriterResult(Ok((successes, failures)), merge_writer_logs(seen))

    return partitionM(results, extract=extract_writer_result, combine=combine)

def get_all_w[T, E, W](
    results: Iterable[WriterResult[T, E, Log[W]]],
) -> WriterResult[list[T], NoError, Log[W]]:
    """Every Ok value in order. Merge every log, failed steps included."""

    def combine(
        successes: list[T],
        failures: list[E],
        seen: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[list[T], NoError, Log[W]]:
        _ = failures
        return WriterResult(Ok(successes), merge_writer_logs(seen))

    return partitionM(results, extract=extract_writer_result, combine=combine)

def get_all_errors_w[T, E, W](
    results: Iterable[WriterResult[T, E, Log[W]]],
) -> WriterResult[list[E], NoError, Log[W]]:
    """Every Error payload in order. Merge every log."""

    def combine(
        successes: list[T],
        failures: list[E],
        seen: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[list[E], NoError, Log[W]]:
        _ = successes
        return WriterResult(Ok(failures), merge_writer_logs(seen))

    return partitionM(results, extract=extract_writer_result, combine=combine)

__all__ = (
    "partition",
    "get_all",
    "get_all_errors",
    "partition_w",
    "get_all_w",
    "get_all_errors_w",
    "partitionM",
)
