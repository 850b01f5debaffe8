"""Internal helpers for combinators.

Glue shared by the collection modules: the identity handler behind
combine, and the writer-side extract and log merging the *_w twins feed
into the generic *M traversals."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Result

from .writer import Log, WriterResult

def identity[T](x: T) -> T:
    """Handler for traversals over values that already are Results."""
    return x

# Extract function (Raw -> Result[T, E])
def extract_writer_result[T, E, W](wr: WriterResult[T, E, Log[W]]) -> Result[T, E]:
    """Result half of a WriterResult."""
    return wr.result

# Log merging
def merge_logs[W](logs: Iterable[Log[W]]) -> Log[W]:
    """
    Concatenate logs in iteration order into one new Log.

    Entries are appended to a single accumulator, so merging k logs costs
    their total length, not k copies of a growing prefix.
    """
    merged = Log[W]()
    for log in logs:
        merged.extend(log)
    return merged

def merge_writer_logs[T, E, W](wrs: Iterable[WriterResult[T, E, Log[W]]]) -> Log[W]:
    """Logs of the given steps, merged in the order the steps appear."""
    return merge_logs(wr.log for wr in wrs)

__all__ = (
    "identity",
    "extract_writer_result",
    "merge_logs",
    "merge_writer_logs",
)
