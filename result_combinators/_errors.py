from __future__ import annotations

class UnwrapError(Exception):
    """unsafe() was called on an Error."""

    error: object

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"Called unsafe() on Error({error!r})")

__all__ = ("UnwrapError",)
