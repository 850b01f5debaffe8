"""
Core type definitions for result combinators.

Aliases used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Step = left fold step: (accumulator, item) -> new accumulator or error
type Step[A, T, E] = Callable[[A, T], Result[A, E]]

# RightStep = right fold step: (item, accumulator) -> new accumulator or error
# NOTE: argument order is flipped on purpose, mirroring foldr's convention.
type RightStep[T, A, E] = Callable[[T, A], Result[A, E]]

# NoError = type representing "never fails" semantic
# NOTE: Never (bottom type) rather than None: an error of this type
#       cannot be constructed at all.
type NoError = typing.Never

__all__ = (
    "Step",
    "RightStep",
    "NoError",
)
