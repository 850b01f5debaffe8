"""
Fold combinators
================

Result-producing fold in both directions, with extract pattern.

Argument order of the step differs by direction:
- fold:       operation(acc, item), left to right
- fold_right: operation(item, acc), right to left
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from kungfu import Error, Ok, Result

from .._helpers import extract_writer_result, merge_writer_logs
from .._types import RightStep, Step
from ..writer import Log, WriterResult


# ============================================================================
# Generic combinators (extract pattern)
# ============================================================================


def foldM[A, T, E, RawIn, RawOut](
    items: Iterable[T],
    handler: Callable[[A, T], RawIn],
    *,
    initial: A,
    extract: Callable[[RawIn], Result[A, E]],
    combine_ok: Callable[[A, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
) -> RawOut:
    """
    Generic left fold. Stops at the first error.

    Args:
        items: Values to fold, consumed once, left to right
        handler: Step called as handler(acc, item), returns a raw carrier
        initial: Starting accumulator
        extract: Function to extract Result[A, E] from each RawIn
        combine_ok: Builds RawOut from the final accumulator and every raw seen
        combine_err: Builds RawOut from the first error and every raw seen,
                     the failing one last
    """
    acc = initial
    raws: list[RawIn] = []

    for item in items:
        raw = handler(acc, item)
        raws.append(raw)
        match extract(raw):
            case Ok(new_acc):
                acc = new_acc
            case Error(e):
                return combine_err(e, raws)

    return combine_ok(acc, raws)


def fold_rightM[A, T, E, RawIn, RawOut](
    items: Sequence[T],
    handler: Callable[[T, A], RawIn],
    *,
    initial: A,
    extract: Callable[[RawIn], Result[A, E]],
    combine_ok: Callable[[A, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
) -> RawOut:
    """Generic right fold: foldM over the reversed sequence, handler(item, acc)."""
    return foldM(
        reversed(items),
        lambda acc, item: handler(item, acc),
        initial=initial,
        extract=extract,
        combine_ok=combine_ok,
        combine_err=combine_err,
    )


# ============================================================================
# Sugar for Result
# ============================================================================


def fold[A, T, E](
    items: Iterable[T],
    operation: Step[A, T, E],
    *,
    initial: A,
) -> Result[A, E]:
    """
    Accumulate left to right through a Result-producing step.

    The first Error produced by operation is returned as is and no later
    item is visited. Empty input gives Ok(initial).

    Example:
        fold([20, 30, 40, 50], lambda acc, x: Ok(acc + x), initial=10)  # Ok(150)
    """
    acc = initial
    for item in items:
        r = operation(acc, item)
        match r:
            case Ok(new_acc):
                acc = new_acc
            case Error(_):
                return r
    return Ok(acc)


def fold_right[A, T, E](
    items: Sequence[T],
    operation: RightStep[T, A, E],
    *,
    initial: A,
) -> Result[A, E]:
    """
    Accumulate right to left, operation(item, acc).

    Starts from the last item, so when several items would fail the one
    nearest the end wins.

    Example:
        fold_right([2, 5, 10, 20], lambda x, acc: Ok(acc - x), initial=100)  # Ok(63)
    """
    return fold(
        reversed(items),
        lambda acc, item: operation(item, acc),
        initial=initial,
    )


# ============================================================================
# Sugar for WriterResult
# ============================================================================


def _fold_ok_w[A, E, W](acc: A, wrs: list[WriterResult[A, E, Log[W]]]) -> WriterResult[A, E, Log[W]]:
    return WriterResult(Ok(acc), merge_writer_logs(wrs))


def _fold_err_w[A, E, W](e: E, wrs: list[WriterResult[A, E, Log[W]]]) -> WriterResult[A, E, Log[W]]:
    return WriterResult(Error(e), merge_writer_logs(wrs))


def fold_w[A, T, E, W](
    items: Iterable[T],
    handler: Callable[[A, T], WriterResult[A, E, Log[W]]],
    *,
    initial: A,
) -> WriterResult[A, E, Log[W]]:
    """Left fold with log merging. On error the log ends with the failing step."""
    return foldM(
        items,
        handler,
        initial=initial,
        extract=extract_writer_result,
        combine_ok=_fold_ok_w,
        combine_err=_fold_err_w,
    )


def fold_right_w[A, T, E, W](
    items: Sequence[T],
    handler: Callable[[T, A], WriterResult[A, E, Log[W]]],
    *,
    initial: A,
) -> WriterResult[A, E, Log[W]]:
    """Right fold with log merging, logs in the order the steps ran."""
    return fold_rightM(
        items,
        handler,
        initial=initial,
        extract=extract_writer_result,
        combine_ok=_fold_ok_w,
        combine_err=_fold_err_w,
    )


__all__ = ("fold", "fold_right", "fold_w", "fold_right_w", "foldM", "fold_rightM")
