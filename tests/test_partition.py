"""
Tests for the never-failing traversals: get_all, get_all_errors, partition.
"""

from __future__ import annotations

from enum import Enum

import pytest
from kungfu import Error, Ok

from result_combinators import (
    get_all,
    get_all_errors,
    partition,
)


class IterableError(Enum):
    ONE = "one"
    TWO = "two"


E1 = IterableError.ONE
E2 = IterableError.TWO


def languages():
    return [
        Error(E2),
        Ok("haskell"),
        Error(E2),
        Ok("f#"),
        Error(E1),
        Ok("elm"),
        Error(E1),
        Ok("clojure"),
        Error(E2),
    ]


class TestGetAll:
    def test_returns_values_in_order(self):
        values = get_all(
            [Ok("hello"), Ok("big"), Error(E2), Ok("wide"), Error(E1), Ok("world")]
        )
        assert values == ["hello", "big", "wide", "world"]

    def test_all_errors_gives_empty_list(self):
        assert get_all([Error(E1), Error(E2)]) == []

    def test_empty(self):
        assert get_all([]) == []

    def test_consumes_generator_fully(self, pull_counter):
        results = pull_counter([Error(E1), Ok(1), Error(E2), Ok(2)])
        assert get_all(results) == [1, 2]
        assert results.pulled == 4


class TestGetAllErrors:
    def test_returns_errors_in_order(self):
        errors = get_all_errors(languages())
        assert errors == [E2, E2, E1, E1, E2]

    def test_short_scenario(self):
        errors = get_all_errors([Error(E2), Ok("a"), Error(E2), Ok("b"), Error(E1)])
        assert errors == [E2, E2, E1]

    def test_all_ok_gives_empty_list(self):
        assert get_all_errors([Ok(1), Ok(2)]) == []

    def test_consumes_generator_fully(self, pull_counter):
        results = pull_counter([Ok(1), Error(E1), Ok(2), Error(E2)])
        assert get_all_errors(results) == [E1, E2]
        assert results.pulled == 4

    def test_keeps_error_identity(self):
        payload = ValueError("boom")
        assert get_all_errors([Ok(1), Error(payload)])[0] is payload


class TestPartition:
    def test_splits_values_and_errors(self):
        values, errors = partition(languages())
        assert values == ["haskell", "f#", "elm", "clojure"]
        assert errors == [E2, E2, E1, E1, E2]

    def test_short_scenario(self):
        assert partition([Error(E2), Ok("x"), Error(E1)]) == (["x"], [E2, E1])

    def test_matches_get_all_and_get_all_errors(self):
        results = languages()
        assert partition(results) == (get_all(results), get_all_errors(results))

    def test_lengths_sum_to_input(self):
        results = languages()
        values, errors = partition(results)
        assert len(values) + len(errors) == len(results)

    def test_consumes_generator_once(self, pull_counter):
        results = pull_counter(languages())
        values, errors = partition(results)
        assert results.pulled == 9
        assert (len(values), len(errors)) == (4, 5)

    def test_empty(self):
        assert partition([]) == ([], [])

    @pytest.mark.parametrize("operation", [get_all, get_all_errors, partition])
    def test_deterministic(self, operation):
        results = languages()
        assert operation(results) == operation(results)

