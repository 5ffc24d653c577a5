"""
Tests for Word Mutation
=======================
Tests for pick_seed(), mutate() and mutate_batch() in
namekit/generators/mutator.py.
"""

import random

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.chain import ChainModel
from namekit.corpus import get_corpus
from namekit.generators import (
    GenerationConfig,
    GenerationExhausted,
    mutate,
    mutate_batch,
    pick_seed,
)


@pytest.fixture(scope="module")
def model():
    """Order-2 model trained on the built-in corpora plus 'dragon'."""
    return ChainModel.train(get_corpus() + ["dragon"], order=2)


class TestPickSeed:
    """Tests for prefix selection."""

    def test_prefix_length_range(self):
        rng = random.Random(8)
        lengths = {len(pick_seed("dragon", 2, rng)) for _ in range(500)}
        assert lengths == {2, 3, 4, 5}

    def test_seed_is_prefix(self):
        rng = random.Random(8)
        for _ in range(50):
            assert "dragon".startswith(pick_seed("Dragon", 1, rng))

    def test_min_random_chars_clamped(self):
        """Past the word length the prefix falls back to one character short."""
        assert pick_seed("ab", 5, random.Random(0)) == "a"
        assert pick_seed("dragon", 7, random.Random(0)) == "drago"

    def test_min_random_chars_at_word_length_keeps_whole_word(self):
        rng = random.Random(0)
        for _ in range(20):
            assert pick_seed("ab", 2, rng) == "ab"
            assert pick_seed("Dragon", 6, rng) == "dragon"

    def test_single_letter_source_keeps_letter(self):
        assert pick_seed("a", 1, random.Random(0)) == "a"

    @pytest.mark.parametrize("word", ["", "   "])
    def test_empty_source_rejected(self, word):
        with pytest.raises(ValueError):
            pick_seed(word)

    def test_min_random_chars_must_be_positive(self):
        with pytest.raises(ValueError):
            pick_seed("dragon", 0)


class TestMutate:
    """Tests for mutate()."""

    def test_result_keeps_seed_prefix(self, model):
        rng = random.Random(13)
        produced = 0
        for _ in range(200):
            try:
                word = mutate(model, "dragon", 3, 10, 2, rng=rng, max_restarts=500)
            except GenerationExhausted:
                continue
            if not word:
                continue
            produced += 1
            assert word.startswith("dr")
            assert 3 <= len(word) <= 10
            assert not model.contains_training_word(word)
        assert produced > 0

    def test_seed_survives_restarts(self, model):
        """With min_random_chars at its maximum the seed is fixed."""
        rng = random.Random(4)
        for _ in range(50):
            try:
                word = mutate(model, "seraphine", 9, 12, 8, rng=rng, max_restarts=500)
            except GenerationExhausted:
                continue
            assert word == "" or word.startswith("seraphin")

    def test_dead_end_returns_empty(self):
        """Nothing is known about 'xy' or 'y'."""
        model = ChainModel.train(["ab"], order=2)
        assert mutate(model, "xyz", 1, 10, 2, rng=random.Random(0)) == ""

    def test_whole_word_seed_too_short_returns_empty(self):
        """The seed "ab" can only terminate, and restarting would recreate it."""
        model = ChainModel.train(["ab"], order=2)
        assert mutate(model, "ab", 3, 10, 2, rng=random.Random(0), max_restarts=200) == ""

    def test_whole_word_seed_at_max_length_returns_empty(self):
        model = ChainModel.train(["ab"], order=2)
        assert mutate(model, "ab", 1, 2, 2, rng=random.Random(0), max_restarts=200) == ""

    def test_unknown_single_letter_source_returns_empty(self):
        model = ChainModel.train(["ab"], order=2)
        assert mutate(model, "z", 1, 5, rng=random.Random(0)) == ""

    def test_corpus_only_completions_exhaust(self):
        """Every completion of 'a'/'an' is a training word, so restarts run out."""
        model = ChainModel.train(["ann", "amy"], order=2)
        with pytest.raises(GenerationExhausted):
            mutate(model, "ann", 1, 5, 1, rng=random.Random(0), max_restarts=30)

    def test_arguments_validated(self, model):
        with pytest.raises(ValueError):
            mutate(model, "dragon", 0, 5)
        with pytest.raises(ValueError):
            mutate(model, "dragon", 6, 5)
        with pytest.raises(ValueError):
            mutate(model, "", 3, 5)


class TestMutateBatch:
    """Tests for mutate_batch()."""

    def test_distinct_nonempty(self, model):
        config = GenerationConfig(min_length=4, max_length=10, min_random_chars=2,
                                  max_restarts=500)
        words = mutate_batch(model, "dragon", 8, config, rng=random.Random(17))
        assert len(words) <= 8
        assert len(set(words)) == len(words)
        assert all(w and w.startswith("dr") for w in words)

    def test_dead_end_gives_empty_list(self):
        model = ChainModel.train(["ab"], order=2)
        config = GenerationConfig(min_length=1, max_length=10, min_random_chars=2,
                                  batch_attempt_factor=3)
        assert mutate_batch(model, "xyz", 4, config, rng=random.Random(0)) == []
