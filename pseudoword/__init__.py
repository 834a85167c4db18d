#!/usr/bin/env python3
"""
Pseudoword - Markov Chain Pseudoword Generator
==============================================

Trains a character-level Markov model on a small vocabulary (the seed)
and synthesizes new strings that statistically resemble it.

Quick Start
-----------
    from pseudoword import from_seed

    model = from_seed("lorem ipsum dolor sit amet consectetur", order=2)

    # Generate words
    word = model.generate_word(min_length=4, max_length=10)
    words = model.generate_batch(10)

    # How much of the context space the seed covers (0..1)
    model.density()

Reproducible output
-------------------
    from pseudoword import from_seed, get_rng

    model = from_seed(["alpha", "beta", "gamma"], rng=get_rng(42))

Modules
-------
    pseudoword.matrix    - Transition matrix builder and density estimator
    pseudoword.sampler   - Weighted sampling with context backoff
    pseudoword.generator - Word generation with bounded retries
    pseudoword.model     - Model handle, build_model(), from_seed()
    pseudoword.seed      - Seed parsing, charset sanitation, defaults
    pseudoword.settings  - YAML settings (configs/app.yaml)

CLI Usage
---------
    python -m pseudoword generate lorem ipsum dolor sit amet -n 10
    python -m pseudoword density --seed-file words.txt
"""

__version__ = "0.1.0"

from .entropy import TrueRandom, get_rng
from .errors import InvalidSeedError
from .generator import generate_batch, generate_word
from .matrix import (
    BOUNDARY,
    Transition,
    TransitionMatrix,
    build_matrix,
    density,
    is_eligible,
)
from .model import Model, build_model, from_seed
from .sampler import next_symbol, resolve_context
from .seed import DEFAULT_CHARSET, parse_seed, sanitize_charset

__all__ = [
    "__version__",
    # Model
    "Model",
    "build_model",
    "from_seed",
    "InvalidSeedError",
    # Core
    "BOUNDARY",
    "Transition",
    "TransitionMatrix",
    "build_matrix",
    "density",
    "is_eligible",
    "next_symbol",
    "resolve_context",
    "generate_word",
    "generate_batch",
    # Input normalization
    "DEFAULT_CHARSET",
    "parse_seed",
    "sanitize_charset",
    # Random sources
    "TrueRandom",
    "get_rng",
]
