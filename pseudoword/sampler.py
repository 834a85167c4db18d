#!/usr/bin/env python3
"""
Weighted Sampler
================
Picks the next symbol for a context with frequency-proportional random
choice, backing off to shorter contexts when the full one was never seen.
"""

import logging
from bisect import bisect_right
from itertools import accumulate
from typing import List, Mapping, Optional, Tuple

from .entropy import RandomSource
from .matrix import BOUNDARY, Transition

logger = logging.getLogger(__name__)


def resolve_context(context: str, matrix: Mapping[str, Transition],
                    order: Optional[int] = None) -> Optional[str]:
    """
    Find the longest matching context after backoff.

    The context is trimmed to its last ``order`` symbols, then shortened
    from the left until it is found in the matrix. Once nothing is left
    the boundary context is tried.

    Returns:
        The matched context, or None if even the boundary context is
        missing (model trained on nothing).
    """
    if context == BOUNDARY:
        context = ''
    if order is not None and len(context) > order:
        context = context[len(context) - order:]

    while context:
        if context in matrix:
            return context
        logger.debug("No transition for %r, backing off", context)
        context = context[1:]

    if BOUNDARY in matrix:
        return BOUNDARY
    return None


def cumulative_ranges(transition: Transition) -> List[Tuple[str, int]]:
    """
    Order a transition's pairs by ascending count and accumulate.

    The sort is stable, so ties keep the stored order: charset definition
    order with the boundary last. The layout only affects where each
    symbol's range sits, not its width.
    """
    ordered = sorted(transition.counts, key=lambda pair: pair[1])
    bounds = accumulate(count for _, count in ordered)
    return [(symbol, bound) for (symbol, _), bound in zip(ordered, bounds)]


def pick(transition: Transition, draw: float) -> str:
    """
    Map a draw in [0, total) to a symbol.

    Returns the first symbol whose cumulative bound is greater than the
    draw, so each symbol covers a range of width equal to its count and
    zero-count symbols are never chosen.
    """
    ranges = cumulative_ranges(transition)
    index = bisect_right([bound for _, bound in ranges], draw)
    if index >= len(ranges):
        # draw >= total only for a misbehaving random source
        index = len(ranges) - 1
    return ranges[index][0]


def next_symbol(context: str, matrix: Mapping[str, Transition], rng: RandomSource) -> str:
    """
    Sample the symbol following ``context``.

    Args:
        context: Preceding symbols, or BOUNDARY at the start of a word.
        matrix: Transition matrix to sample from.
        rng: Source with a ``random()`` method returning [0.0, 1.0).

    Returns:
        A charset symbol, or BOUNDARY meaning the word ends.
    """
    order = getattr(matrix, 'order', None)
    matched = resolve_context(context, matrix, order)
    if matched is None:
        return BOUNDARY

    transition = matrix[matched]
    if transition.total <= 0:
        return BOUNDARY

    draw = rng.random() * transition.total
    return pick(transition, draw)
