"""Combine combinators

Structure flipping: [Result[T, E]] -> Result[[T], E]."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Result

from .._helpers import identity
from ..writer import Log, WriterResult
from .traverse import traverse, traverse_w

def combine[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    All values if every result is Ok, else the first Error.

    Scanning stops at the first Error, so later items of a generator
    are never pulled. Implemented as traverse(id).

    Example:
        combine([Ok(10), Ok(20), Ok(30)])    # Ok([10, 20, 30])
        combine([Ok(1), Error(a), Error(b)])  # Error(a)
    """
    return traverse(results, identity)

def combine_w[T, E, W](
    results: Iterable[WriterResult[T, E, Log[W]]],
) -> WriterResult[list[T], E, Log[W]]:
    """Flip structure with log merging. Logs after the first error are dropped."""
    return traverse_w(results, identity)

# Haskell name for the same operation
sequence = combine
sequence_w = combine_w

__all__ = ("combine", "combine_w", "sequence", "sequence_w")
