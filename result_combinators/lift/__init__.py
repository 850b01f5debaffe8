"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from result_combinators import lift as L   # Recommended (balance)
    from result_combinators import lift as _   # Minimal
    from result_combinators import lift        # Explicit

Architecture:
- L.up.*    - lift values into Result
- L.down.*  - inspect a Result, pull its payload out

Examples:
    from result_combinators import lift as L

    # Lifting
    user = L.up.pure(User(id=42))
    error = L.up.fail(NotFoundError())
    maybe = L.up.optional(db_result, error=NotFound)
    parsed = L.up.catching(lambda: int(raw), on_error=ParseError)

    # Inspecting
    L.down.is_ok(user)            # True
    value = L.down.get(user)      # User(id=42)
    value = L.down.unsafe(error)  # raises
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

# Most common functions in root for easy access
from .up import catching, fail, optional, pure
from .down import equals, get, get_error, is_error, is_ok, or_else, unsafe

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "optional",
    "catching",
    # Down
    "is_ok",
    "is_error",
    "get",
    "get_error",
    "or_else",
    "unsafe",
    "equals",
)
