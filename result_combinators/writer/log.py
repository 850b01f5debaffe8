"""
Log - monoidal accumulator for the writer twins
===============================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Append-only trace of a traversal.

    A plain list with monoid operations, so logs of individual steps
    can be merged in the order the steps ran:
    - empty: Log()
    - combine: concatenation, returns a new Log

    Laws:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))

    Neither combine nor tell mutates the receiver.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        merged: Log[A] = Log(self)
        merged.extend(other)
        return merged

    def tell(self, item: A, /) -> Log[A]:
        """Return a copy with one more entry at the end."""
        return self.combine(Log.of(item))


__all__ = ("Log",)
