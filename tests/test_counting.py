"""
Tests for CountingDomainRegistry and trimming.
"""

import logging

import numpy as np
import pytest

from catdomain.core.counting import CountingDomainRegistry
from catdomain.core.errors import EmptyDomain


@pytest.fixture
def letters():
    reg = CountingDomainRegistry("letter")
    for v in ["a", "b", "a", "c", "b", "a"]:
        reg.index(v)
    return reg


class TestCounting:
    def test_scenario_counts(self, letters):
        assert letters.counts().tolist() == [3, 2, 1]
        assert letters.counts().dtype == np.int64

    def test_count_matches_calls(self):
        reg = CountingDomainRegistry()
        calls = {"x": 4, "y": 1, "z": 7}
        for v, n in calls.items():
            for _ in range(n):
                reg.index(v)
        for v, n in calls.items():
            assert reg.count(v) == n
        assert reg.count("missing") == 0

    def test_lookup_and_get_do_not_count(self, letters):
        letters.lookup("a")
        letters.get(0)
        assert letters.count("a") == 3

    def test_index_all_counts(self):
        reg = CountingDomainRegistry()
        reg.index_all(["a", "a", "b"])
        assert reg.counts().tolist() == [2, 1]

    def test_counts_is_a_copy(self, letters):
        c = letters.counts()
        c[0] = 100
        assert letters.count("a") == 3


class TestTrimBelowSize:
    def test_scenario(self, letters):
        letters.trim_below_size(2)
        assert letters.values() == ("a", "b")
        assert letters.index("a") == 0
        assert letters.index("b") == 1
        assert letters.index("c") == 2
        assert letters.alloc_size() == 3

    def test_keeps_top_k_by_count(self):
        reg = CountingDomainRegistry()
        for v, n in [("p", 1), ("q", 5), ("r", 3), ("s", 4), ("t", 2)]:
            for _ in range(n):
                reg.index(v)
        reg.trim_below_size(3)
        assert reg.alloc_size() == 3
        assert reg.values() == ("q", "s", "r")

    def test_ties_by_original_index(self):
        reg = CountingDomainRegistry()
        for v in ["d", "c", "b", "a", "a"]:
            reg.index(v)
        reg.trim_below_size(3)
        assert reg.values() == ("a", "d", "c")

    def test_larger_than_size_reorders_all(self, letters):
        letters.index("c")
        letters.index("c")
        letters.index("c")
        letters.trim_below_size(10)
        assert letters.values() == ("c", "a", "b")

    def test_counts_reset(self, letters):
        letters.trim_below_size(2)
        assert letters.counts().tolist() == [0, 0]
        letters.index("a")
        assert letters.count("a") == 1

    def test_generation_bumped(self, letters):
        letters.trim_below_size(2)
        assert letters.generation == 1

    def test_zero_size_raises(self, letters):
        with pytest.raises(EmptyDomain):
            letters.trim_below_size(0)
        assert letters.values() == ("a", "b", "c")
        assert letters.generation == 0

    def test_empty_registry_raises(self):
        with pytest.raises(EmptyDomain):
            CountingDomainRegistry().trim_below_size(5)


class TestTrimBelowCount:
    def test_threshold(self, letters):
        letters.trim_below_count(2)
        assert letters.values() == ("a", "b")
        assert letters.lookup("c") is None

    def test_threshold_is_inclusive(self, letters):
        letters.trim_below_count(3)
        assert letters.values() == ("a",)

    def test_reorders_by_count(self):
        reg = CountingDomainRegistry()
        for v in ["rare", "common", "common", "mid", "mid", "common"]:
            reg.index(v)
        reg.trim_below_count(1)
        assert reg.values() == ("common", "mid", "rare")

    def test_nothing_survives_raises(self, letters):
        with pytest.raises(EmptyDomain):
            letters.trim_below_count(4)
        assert letters.values() == ("a", "b", "c")
        assert letters.counts().tolist() == [3, 2, 1]

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            CountingDomainRegistry().trim_below_count(1)

    def test_logs_trim(self, letters, caplog):
        with caplog.at_level(logging.INFO, logger="catdomain.core.counting"):
            letters.trim_below_count(2)
        assert "kept 2 of 3" in caplog.text


class TestIdentityCounting:
    def test_identity_trim(self):
        reg = CountingDomainRegistry(identity=True)
        a, b = [0], [0]
        reg.index(a)
        reg.index(b)
        reg.index(b)
        reg.trim_below_size(1)
        assert reg.get(0) is b
        assert reg.lookup(a) is None
