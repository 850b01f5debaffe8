"""Traverse combinators

Map items through a Result-producing handler, fail-fast, with extract pattern."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Error, Ok, Result

from .._helpers import extract_writer_result, merge_logs
from ..writer import Log, WriterResult

# Generic combinator (extract pattern)
def traverseM[A, T, E, RawIn, RawOut](
    items: Iterable[A],
    handler: Callable[[A], RawIn],
    *,
    extract: Callable[[RawIn], Result[T, E]],
    combine_ok: Callable[[list[tuple[T, RawIn]]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
) -> RawOut:
    """Generic traverse combinator. Left to right, stops at the first error."""
    pairs: list[tuple[T, RawIn]] = []
    raws: list[RawIn] = []

    for item in items:
        raw = handler(item)
        raws.append(raw)
        match extract(raw):
            case Ok(v):
                pairs.append((v, raw))
            case Error(e):
                return combine_err(e, raws)

    return combine_ok(pairs)

# Sugar for Result
def traverse[A, T, E](
    items: Iterable[A],
    handler: Callable[[A], Result[T, E]],
) -> Result[list[T], E]:
    """
    Monadic map: A -> Result[T, E] over every item, then flip to Result[list[T], E].

    handler is not called for items after the first Error, which is
    returned as the very Result the handler produced.
    """
    values: list[T] = []
    for item in items:
        r = handler(item)
        match r:
            case Ok(v):
                values.append(v)
            case Error(_):
                # an Error carries no value, so it fits any success type
                return typing.cast("Result[list[T], E]", r)
    return Ok(values)

# Sugar for WriterResult
def traverse_w[A, T, E, W](
    items: Iterable[A],
    handler: Callable[[A], WriterResult[T, E, Log[W]]],
) -> WriterResult[list[T], E, Log[W]]:
    """Monadic map with log merging."""
    def combine_ok(
        pairs: list[tuple[T, WriterResult[T, E, Log[W]]]]
    ) -> WriterResult[list[T], E, Log[W]]:
        values = [v for v, _ in pairs]
        merged = merge_logs(wr.log for _, wr in pairs)
        return WriterResult(Ok(values), merged)

    def combine_err(
        e: E,
        raws: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[list[T], E, Log[W]]:
        merged = merge_logs(wr.log for wr in raws)
        return WriterResult(Error(e), merged)

    return traverseM(
        items,
        handler,
        extract=extract_writer_result,
        combine_ok=combine_ok,
        combine_err=combine_err,
    )

__all__ = ("traverse", "traverse_w", "traverseM")
