"""
Result combinators over iterables.

Aggregation operators for collections of kungfu Results: folds in both
directions, fail-fast combine/traverse, and never-failing partition and
projections.

Architecture:
- Generic combinators (*M functions) work with any carrier via the extract pattern
- Sugar functions for Result (no suffix)
- Sugar functions for WriterResult (*_w suffix), merging step logs
"""

# Result type (kungfu primitives)
from kungfu import Error, Ok, Result

# Core types
from ._types import NoError, RightStep, Step

# Errors
from ._errors import UnwrapError

# Internal helpers (for custom carriers)
from . import _helpers

# Lift helpers
from . import lift
from .lift import (
    catching,
    equals,
    fail,
    get,
    get_error,
    is_error,
    is_ok,
    optional,
    or_else,
    pure,
    unsafe,
)

# Writer
from . import writer
from .writer import Log, WriterResult, tell, writer_error, writer_ok

# Collection operations
from .collection import (
    # Result
    combine,
    fold,
    fold_right,
    get_all,
    get_all_errors,
    partition,
    sequence,
    traverse,
    # WriterResult
    combine_w,
    fold_w,
    fold_right_w,
    get_all_w,
    get_all_errors_w,
    partition_w,
    sequence_w,
    traverse_w,
    # Generic
    foldM,
    fold_rightM,
    partitionM,
    traverseM,
)

__all__ = (
    # Result type
    "Ok",
    "Error",
    "Result",
    # Types
    "NoError",
    "RightStep",
    "Step",
    # Errors
    "UnwrapError",
    # Internal helpers (for custom carriers)
    "_helpers",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "catching",
    "equals",
    "fail",
    "get",
    "get_error",
    "is_error",
    "is_ok",
    "optional",
    "or_else",
    "pure",
    "unsafe",
    # Writer
    "writer",
    "Log",
    "WriterResult",
    "tell",
    "writer_error",
    "writer_ok",
    # Collection - Result
    "combine",
    "fold",
    "fold_right",
    "get_all",
    "get_all_errors",
    "partition",
    "sequence",
    "traverse",
    # Collection - WriterResult
    "combine_w",
    "fold_w",
    "fold_right_w",
    "get_all_w",
    "get_all_errors_w",
    "partition_w",
    "sequence_w",
    "traverse_w",
    # Collection - Generic
    "foldM",
    "fold_rightM",
    "partitionM",
    "traverseM",
)
