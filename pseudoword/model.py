#!/usr/bin/env python3
"""
Pseudoword Model
================
The handle returned by training. A Model owns its transition matrix and
its random source; nothing is shared between models.
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence

from .entropy import RandomSource, get_rng
from .errors import InvalidSeedError
from .generator import generate_batch, generate_word
from .matrix import TransitionMatrix, build_matrix, charset_symbols, density, is_eligible
from .seed import (
    default_max_attempts,
    default_max_length,
    normalize_length,
    normalize_order,
    parse_seed,
    sanitize_charset,
)

logger = logging.getLogger(__name__)


class Model:
    """Character-level Markov model trained on a seed vocabulary."""

    def __init__(self,
                 matrix: TransitionMatrix,
                 order: int,
                 charset: Iterable[str],
                 rng: Optional[RandomSource] = None,
                 word_count: int = 0):
        """
        Wrap an already built matrix.

        Use build_model() or from_seed() to train one. Constructing a Model
        directly from an empty matrix gives the degenerate model, which
        generates '' and has density 0.
        """
        self.matrix = matrix
        self.order = order
        self.charset = charset_symbols(charset)
        self.word_count = word_count
        self._rng = rng if rng is not None else get_rng()

    def __repr__(self) -> str:
        return (f"Model(order={self.order}, charset_size={len(self.charset)}, "
                f"contexts={len(self.matrix)}, words={self.word_count})")

    def generate_word(self,
                      min_length: Optional[int] = None,
                      max_length: Optional[int] = None,
                      max_attempts: Optional[int] = None,
                      rng: Optional[RandomSource] = None) -> str:
        """
        Generate one pseudoword. Never raises.

        Args:
            min_length: Retry shorter words (ignored unless a positive int)
            max_length: Maximum length (configured default if not a positive int)
            max_attempts: Attempts before giving up on min_length
            rng: Random source for this call (the model's own if None)
        """
        if min_length is not None and not normalize_length(min_length, 0):
            min_length = None
        return generate_word(
            self.matrix,
            self.order,
            min_length=min_length,
            max_length=normalize_length(max_length, default_max_length()),
            max_attempts=normalize_length(max_attempts, default_max_attempts()),
            rng=rng if rng is not None else self._rng,
        )

    def generate_batch(self,
                       count: int,
                       unique: bool = True,
                       min_length: Optional[int] = None,
                       max_length: Optional[int] = None,
                       max_attempts: Optional[int] = None,
                       rng: Optional[RandomSource] = None) -> List[str]:
        """Generate up to ``count`` non-empty pseudowords."""
        if min_length is not None and not normalize_length(min_length, 0):
            min_length = None
        return generate_batch(
            self.matrix,
            self.order,
            count,
            unique=unique,
            min_length=min_length,
            max_length=normalize_length(max_length, default_max_length()),
            max_attempts=normalize_length(max_attempts, default_max_attempts()),
            rng=rng if rng is not None else self._rng,
        )

    def density(self) -> float:
        """Fraction (0..1) of possible contexts seen in training."""
        return density(self.matrix, self.order, len(self.charset))


def build_model(corpus: Sequence[str],
                order: int,
                charset: Iterable[str],
                rng: Optional[RandomSource] = None) -> Model:
    """
    Train a model on validated inputs.

    Args:
        corpus: Training words
        order: Markov order (positive int)
        charset: Allowed symbols
        rng: Random source owned by the model (fresh TrueRandom if None)

    Raises:
        InvalidSeedError: If the corpus is empty or no word is eligible.
    """
    corpus = list(corpus or [])
    if not corpus:
        raise InvalidSeedError("seed is empty")

    symbols = charset_symbols(charset)
    allowed = frozenset(symbols)
    word_count = sum(1 for word in corpus if is_eligible(word, allowed))
    if word_count == 0:
        raise InvalidSeedError(
            "seed has no eligible words (need 2+ characters, all in the charset)"
        )

    matrix = build_matrix(corpus, order, symbols)
    logger.info("Built order-%d model from %d/%d words (%d contexts)",
                order, word_count, len(corpus), len(matrix))
    return Model(matrix, order, symbols, rng=rng, word_count=word_count)


def from_seed(seed: Any,
              order: Any = None,
              charset: Any = None,
              rng: Optional[RandomSource] = None) -> Model:
    """
    Build a model from raw user input.

    The seed is split and lowercased, the order falls back to the default
    when not a positive integer, and the charset is sanitized (default
    charset when missing, boundary token removed).
    """
    words = parse_seed(seed)
    return build_model(words, normalize_order(order), sanitize_charset(charset), rng=rng)
