"""
Tests for the Model Handle
==========================
Tests for build_model(), from_seed() and the Model methods in
pseudoword/model.py.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pseudoword import (
    BOUNDARY,
    InvalidSeedError,
    Model,
    TransitionMatrix,
    build_model,
    from_seed,
    get_rng,
)


LOREM = ("lorem ipsum dolor sit amet consectetur adipiscing elit sed do "
         "eiusmod tempor incididunt ut labore et dolore magna aliqua")


class TestBuildModel:
    """Tests for build_model()."""

    def test_empty_corpus_raises(self):
        with pytest.raises(InvalidSeedError):
            build_model([], 2, 'abc')

    def test_no_eligible_words_raises(self):
        with pytest.raises(InvalidSeedError):
            build_model(['a', 'x1', 'zz'], 2, 'abc')

    def test_invalid_seed_is_value_error(self):
        assert issubclass(InvalidSeedError, ValueError)

    def test_counts_eligible_words(self):
        model = build_model(['ab', 'a', 'a1c', 'cab'], 1, {'a', 'b', 'c'})
        assert model.word_count == 2
        assert model.order == 1
        assert model.charset == ('a', 'b', 'c')

    def test_accepts_generator(self):
        model = build_model((w for w in ['ab', 'ba']), 1, 'ab')
        assert model.word_count == 2


class TestDegenerateModel:
    """A model over an empty matrix never fails."""

    @pytest.fixture
    def model(self):
        return Model(TransitionMatrix.empty(2, 'abc'), 2, 'abc', rng=get_rng(0))

    def test_generates_empty_string(self, model):
        assert model.generate_word() == ''
        assert model.generate_word(min_length=3, max_length=8) == ''

    def test_density_zero(self, model):
        assert model.density() == 0

    def test_batch_empty(self, model):
        assert model.generate_batch(5) == []


class TestModelGenerate:
    """Tests for Model.generate_word() and generate_batch()."""

    @pytest.fixture
    def model(self):
        return from_seed(LOREM, order=2, rng=get_rng(42))

    def test_default_max_length(self, model):
        for _ in range(100):
            word = model.generate_word()
            assert len(word) <= 20
            assert BOUNDARY not in word

    @pytest.mark.parametrize('bad', [0, -3, 'ten', 2.5, True])
    def test_malformed_max_length_uses_default(self, model, bad):
        for _ in range(20):
            assert len(model.generate_word(max_length=bad)) <= 20

    def test_malformed_min_length_ignored(self, model):
        assert isinstance(model.generate_word(min_length='x'), str)

    def test_min_and_max_equal(self):
        model = build_model(['aa'], 1, {'a'}, rng=get_rng(0))
        word = model.generate_word(min_length=5, max_length=5)
        assert word in {'a' * n for n in range(1, 6)}

    def test_reproducible_with_seeded_rng(self):
        first = from_seed(LOREM, rng=get_rng(7)).generate_batch(10)
        second = from_seed(LOREM, rng=get_rng(7)).generate_batch(10)
        assert first == second

    def test_call_rng_overrides_model_rng(self, model):
        assert (model.generate_word(rng=get_rng(3)) ==
                model.generate_word(rng=get_rng(3)))

    def test_batch_count(self, model):
        words = model.generate_batch(5, min_length=3, max_length=10)
        assert len(words) <= 5
        assert len(set(words)) == len(words)
        assert all(len(w) <= 10 for w in words)


class TestModelDensity:
    """Tests for Model.density()."""

    def test_fraction_in_range(self):
        model = build_model(['ab', 'ac'], 1, {'a', 'b', 'c'})
        assert 0 < model.density() <= 1

    def test_higher_order_is_sparser(self):
        low = from_seed(LOREM, order=1).density()
        high = from_seed(LOREM, order=3).density()
        assert high < low


class TestFromSeed:
    """Tests for from_seed() input normalization."""

    def test_string_seed_lowercased(self):
        model = from_seed("Lorem IPSUM")
        assert 'lo' in model.matrix
        assert 'ip' in model.matrix

    def test_malformed_order_defaults_to_two(self):
        assert from_seed("lorem ipsum", order='x').order == 2
        assert from_seed("lorem ipsum", order=0).order == 2

    def test_missing_charset_uses_default(self):
        model = from_seed("ação ñame", charset=None)
        # 'ñ' is not in the default charset
        assert model.word_count == 1

    def test_boundary_stripped_from_charset(self):
        model = from_seed(["ab$", "ab"], charset="ab$")
        assert model.charset == ('a', 'b')
        assert model.word_count == 1

    def test_missing_seed(self):
        with pytest.raises(InvalidSeedError):
            from_seed(None)

    def test_seed_without_eligible_words(self):
        with pytest.raises(InvalidSeedError):
            from_seed("a b c")
