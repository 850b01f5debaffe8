"""
Shared test fixtures and helpers for the result-combinators test suite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

import pytest


class CallRecorder:
    """Wraps a step function and records the arguments of every call."""

    def __init__(self, fn: Callable[..., object]) -> None:
        self._fn = fn
        self.calls: list[tuple[object, ...]] = []

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self._fn(*args)


class PullCounter:
    """One-shot iterable that counts how many items were pulled from it."""

    def __init__(self, items: Iterable[object]) -> None:
        self._items = list(items)
        self.pulled = 0

    def __iter__(self) -> Iterator[object]:
        for item in self._items:
            self.pulled += 1
            yield item


@pytest.fixture()
def recorder() -> Callable[[Callable[..., object]], CallRecorder]:
    """Factory wrapping a step function in a CallRecorder."""
    return CallRecorder


@pytest.fixture()
def pull_counter() -> Callable[[Iterable[object]], PullCounter]:
    """Factory wrapping items in a PullCounter."""
    return PullCounter
