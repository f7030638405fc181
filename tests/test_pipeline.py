"""
Tests for the count -> trim -> reload vocabulary pipeline.
"""

import pytest

from catdomain.core.errors import EmptyDomain
from catdomain.core.scope import DomainScope
from catdomain.pipeline.vocabulary import build_vocabulary


CORPUS = "the cat sat on the mat the cat ran".split()


def corpus_source():
    return iter(CORPUS)


class TestBuildVocabulary:
    def test_min_count(self):
        result = build_vocabulary(corpus_source, min_count=2)
        assert result.registry.values() == ("the", "cat")
        assert result.indices.tolist() == [0, 1, 0, 0, 1]
        assert result.dropped == 4

    def test_max_size(self):
        result = build_vocabulary(corpus_source, max_size=3)
        assert result.registry.values() == ("the", "cat", "sat")
        assert len(result.observations) == 6
        assert result.dropped == 3

    def test_min_count_then_max_size(self):
        result = build_vocabulary(corpus_source, min_count=2, max_size=1)
        assert result.registry.values() == ("the",)
        assert [o.value() for o in result.observations] == ["the"] * 3

    def test_dropped_values_not_reinterned(self):
        result = build_vocabulary(corpus_source, min_count=2)
        assert result.registry.alloc_size() == 2
        assert "mat" not in result.registry

    def test_counts_reflect_reload(self):
        result = build_vocabulary(corpus_source, min_count=2)
        assert result.registry.counts().tolist() == [3, 2]

    def test_uses_given_scope(self):
        scope = DomainScope()
        result = build_vocabulary(corpus_source, scope=scope, kind="word", max_size=2)
        assert scope.domain("word", counting=True) is result.registry

    def test_requires_a_trim(self):
        with pytest.raises(ValueError):
            build_vocabulary(corpus_source)

    def test_empty_result_raises(self):
        with pytest.raises(EmptyDomain):
            build_vocabulary(corpus_source, min_count=10)
