#!/usr/bin/env python3
"""
Transition Matrix
=================
Builds the character-level transition matrix from a training corpus and
estimates how densely it covers the space of possible contexts.

Theory:
-------
A context is the string of up to ``order`` characters preceding a position
in a word, or the boundary token ``$`` at the start of a word. For every
context observed in training the matrix stores how often each symbol (or
the boundary token, meaning "the word ends here") followed it.

Each word is scanned once per sub-order, from ``order`` down to 1, so
contexts of every length 1..order are recorded. Shorter contexts are what
the sampler backs off to when a longer one was never seen.
"""

import logging
from collections import Counter, defaultdict
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Tuple

logger = logging.getLogger(__name__)

# Marks word start (as a context) and word end (as a next symbol)
BOUNDARY = '$'


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class Transition:
    """Observed continuations of one context."""
    counts: Tuple[Tuple[str, int], ...]  # charset order, boundary last
    total: int

    def count(self, symbol: str) -> int:
        for candidate, value in self.counts:
            if candidate == symbol:
                return value
        return 0

    def as_dict(self) -> Dict[str, int]:
        return dict(self.counts)

    def observed(self) -> List[Tuple[str, int]]:
        """(symbol, count) pairs with a non-zero count."""
        return [(symbol, value) for symbol, value in self.counts if value > 0]


class TransitionMatrix(Mapping):
    """
    Read-only mapping from context to Transition.

    Carries the order and charset it was built with. There is no mutation
    API; the underlying mapping is a MappingProxyType.
    """

    def __init__(self,
                 transitions: Dict[str, Transition],
                 order: int,
                 charset: Tuple[str, ...]):
        self._transitions = MappingProxyType(dict(transitions))
        self._order = order
        self._charset = tuple(charset)

    @classmethod
    def empty(cls, order: int, charset: Iterable[str]) -> 'TransitionMatrix':
        """Matrix of a model trained on nothing."""
        return cls({}, order, charset_symbols(charset))

    @property
    def order(self) -> int:
        return self._order

    @property
    def charset(self) -> Tuple[str, ...]:
        return self._charset

    def __getitem__(self, context: str) -> Transition:
        return self._transitions[context]

    def __iter__(self) -> Iterator[str]:
        return iter(self._transitions)

    def __len__(self) -> int:
        return len(self._transitions)

    def __repr__(self) -> str:
        return (f"TransitionMatrix(order={self._order}, "
                f"charset_size={len(self._charset)}, contexts={len(self)})")

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Plain dict of context -> {symbol: count}, observed counts only."""
        return {
            context: dict(transition.observed())
            for context, transition in self._transitions.items()
        }


# =============================================================================
# Builder
# =============================================================================

def charset_symbols(charset: Iterable[str]) -> Tuple[str, ...]:
    """
    Ordered, de-duplicated symbols of a charset, boundary token removed.

    Sets have no definition order, so their members are sorted to keep the
    sampler's tie-break order reproducible.
    """
    if isinstance(charset, (set, frozenset)):
        charset = sorted(charset)
    return tuple(dict.fromkeys(c for c in charset if c != BOUNDARY))


def is_eligible(word: str, charset) -> bool:
    """A word trains the model iff it has 2+ chars, all in the charset."""
    if not isinstance(word, str) or len(word) < 2:
        return False
    return all(char in charset for char in word)


def _observations(word: str, order: int) -> Iterator[Tuple[str, str]]:
    """Yield (context, next_symbol) pairs for one scan of a word."""
    for pointer in range(len(word) + 1):
        if pointer == 0:
            context = BOUNDARY
        else:
            context = word[max(0, pointer - order):pointer]

        if pointer < len(word):
            next_symbol = word[pointer]
        else:
            next_symbol = BOUNDARY

        yield context, next_symbol


def _freeze(counter: Counter, symbols: Tuple[str, ...]) -> Transition:
    counts = tuple((symbol, counter[symbol]) for symbol in symbols + (BOUNDARY,))
    return Transition(counts=counts, total=sum(value for _, value in counts))


def build_matrix(corpus: Iterable[str], order: int, charset: Iterable[str]) -> TransitionMatrix:
    """
    Train a transition matrix.

    Args:
        corpus: Training words. Words shorter than 2 chars or containing a
            char outside the charset are dropped entirely.
        order: Maximum context length (positive).
        charset: Allowed symbols.

    Returns:
        TransitionMatrix with one entry per observed context. Empty when no
        word was eligible.
    """
    symbols = charset_symbols(charset)
    allowed = frozenset(symbols)
    counters = defaultdict(Counter)

    used = dropped = 0
    for word in corpus:
        if not is_eligible(word, allowed):
            dropped += 1
            continue
        used += 1

        for sub_order in range(order, 0, -1):
            for context, next_symbol in _observations(word, sub_order):
                counters[context][next_symbol] += 1

    transitions = {
        context: _freeze(counter, symbols)
        for context, counter in counters.items()
    }
    logger.debug("Trained order-%d matrix on %d words (%d dropped): %d contexts",
                 order, used, dropped, len(transitions))
    return TransitionMatrix(transitions, order, symbols)


# =============================================================================
# Density
# =============================================================================

def max_contexts(order: int, charset_size: int) -> int:
    """
    Theoretical number of distinct contexts.

    f(n) = n^order + ... + n^1 + n^0, where n^0 = 1 is the boundary context.
    """
    return sum(charset_size ** i for i in range(order + 1))


def density(matrix: Mapping, order: int, charset_size: int) -> float:
    """Fraction (0..1) of possible contexts actually observed."""
    observed = len(matrix)
    maximum = max_contexts(order, charset_size)
    if observed == 0 or maximum <= 0:
        return 0.0
    return observed / maximum
