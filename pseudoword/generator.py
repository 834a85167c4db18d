#!/usr/bin/env python3
"""
Word Generator
==============
Drives the sampler to assemble whole pseudowords.

Generation always terminates: an attempt stops at the boundary token or at
``max_length`` symbols, and at most ``max_attempts`` attempts are made.
When no attempt reaches ``min_length`` the last attempt is returned as is.
"""

import logging
from typing import List, Mapping, Optional

from .entropy import RandomSource, get_rng
from .matrix import BOUNDARY, Transition
from .sampler import next_symbol
from .seed import DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_LENGTH

logger = logging.getLogger(__name__)


def _attempt(matrix: Mapping[str, Transition], order: int, max_length: int,
             rng: RandomSource) -> str:
    """One walk through the chain, from word start to boundary or max_length."""
    pseudo = ''
    while len(pseudo) < max_length:
        context = pseudo[-order:] if pseudo else BOUNDARY
        symbol = next_symbol(context, matrix, rng)
        if symbol == BOUNDARY:
            break
        pseudo += symbol
    return pseudo


def generate_word(matrix: Mapping[str, Transition],
                  order: int,
                  min_length: Optional[int] = None,
                  max_length: int = DEFAULT_MAX_LENGTH,
                  max_attempts: int = DEFAULT_MAX_ATTEMPTS,
                  rng: Optional[RandomSource] = None) -> str:
    """
    Generate a single pseudoword.

    Args:
        matrix: Trained transition matrix
        order: Maximum context length used for lookups
        min_length: Retry attempts shorter than this (optional)
        max_length: Hard upper bound on the word length
        max_attempts: Total attempts before giving up on min_length
        rng: Random source (fresh TrueRandom if None)

    Returns:
        The first attempt satisfying min_length, otherwise the last attempt.
        An empty matrix always yields ''.
    """
    if rng is None:
        rng = get_rng()

    pseudo = ''
    for attempt in range(1, max(1, max_attempts) + 1):
        pseudo = _attempt(matrix, order, max_length, rng)
        if min_length is None or len(pseudo) >= min_length:
            return pseudo
        logger.debug("Attempt %d/%d too short (%d < %d): %r",
                     attempt, max_attempts, len(pseudo), min_length, pseudo)

    logger.debug("No attempt reached min_length=%d, returning %r", min_length, pseudo)
    return pseudo


def generate_batch(matrix: Mapping[str, Transition],
                   order: int,
                   count: int,
                   unique: bool = True,
                   min_length: Optional[int] = None,
                   max_length: int = DEFAULT_MAX_LENGTH,
                   max_attempts: int = DEFAULT_MAX_ATTEMPTS,
                   rng: Optional[RandomSource] = None) -> List[str]:
    """
    Generate up to ``count`` non-empty pseudowords.

    Stops after ``count * max_attempts`` words were drawn, so a sparse
    model may return fewer words than requested.
    """
    if rng is None:
        rng = get_rng()

    results = []
    seen = set()
    draws = 0
    max_draws = count * max(1, max_attempts)

    while len(results) < count and draws < max_draws:
        draws += 1
        word = generate_word(matrix, order, min_length=min_length,
                             max_length=max_length, max_attempts=max_attempts,
                             rng=rng)
        if not word:
            continue
        if unique and word in seen:
            continue
        seen.add(word)
        results.append(word)

    if len(results) < count:
        logger.debug("Generated %d/%d words after %d draws", len(results), count, draws)
    return results
