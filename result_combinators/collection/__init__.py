from .fold import fold, fold_right, fold_right_w, fold_rightM, fold_w, foldM
from .partition import (
    get_all,
    get_all_errors,
    get_all_errors_w,
    get_all_w,
    partition,
    partition_w,
    partitionM,
)
from .sequence import combine, combine_w, sequence, sequence_w
from .traverse import traverse, traverse_w, traverseM

__all__ = (
    # Result
    "combine",
    "fold",
    "fold_right",
    "get_all",
    "get_all_errors",
    "partition",
    "sequence",
    "traverse",
    # WriterResult
    "combine_w",
    "fold_w",
    "fold_right_w",
    "get_all_w",
    "get_all_errors_w",
    "partition_w",
    "sequence_w",
    "traverse_w",
    # Generic
    "foldM",
    "fold_rightM",
    "partitionM",
    "traverseM",
)
