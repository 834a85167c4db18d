#!/usr/bin/env python3
"""
Seed & Charset Normalization
============================
Turns raw user input into the validated inputs the model builder expects,
substituting configured defaults for missing or malformed values.

Defaults come from ``configs/app.yaml``:
- generation.order        (2)
- generation.max_length   (20)
- generation.max_attempts (10)
- charset.default         (latin letters with common diacritics)
"""

from typing import Any, List

from .errors import InvalidSeedError
from .matrix import BOUNDARY
from .settings import get_setting

DEFAULT_ORDER = 2
DEFAULT_MAX_LENGTH = 20
DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_CHARSET = 'abcdefghijklmnopqrstuvwxyzáàãâäéèêëíìîïóòõôöúùûüçß'


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def default_order() -> int:
    value = get_setting('generation.order', DEFAULT_ORDER)
    return value if _is_positive_int(value) else DEFAULT_ORDER


def default_max_length() -> int:
    value = get_setting('generation.max_length', DEFAULT_MAX_LENGTH)
    return value if _is_positive_int(value) else DEFAULT_MAX_LENGTH


def default_max_attempts() -> int:
    value = get_setting('generation.max_attempts', DEFAULT_MAX_ATTEMPTS)
    return value if _is_positive_int(value) else DEFAULT_MAX_ATTEMPTS


def default_charset() -> str:
    value = get_setting('charset.default', DEFAULT_CHARSET)
    if not isinstance(value, str) or not value.replace(BOUNDARY, ''):
        return DEFAULT_CHARSET
    return value


def normalize_order(value: Any) -> int:
    """Keep a positive integer order, otherwise use the configured default."""
    return value if _is_positive_int(value) else default_order()


def normalize_length(value: Any, default: int) -> int:
    """Keep a positive integer length, otherwise use ``default``."""
    return value if _is_positive_int(value) else default


def sanitize_charset(charset: Any = None) -> str:
    """
    Validate a user-supplied charset.

    A missing, empty or non-string charset is replaced by the default one.
    The boundary token is stripped and duplicates are removed, keeping the
    first occurrence of each symbol.
    """
    if not isinstance(charset, str) or not charset.replace(BOUNDARY, ''):
        charset = default_charset()
    return ''.join(dict.fromkeys(c for c in charset if c != BOUNDARY))


def parse_seed(raw_seed: Any) -> List[str]:
    """
    Parse a raw seed into training words.

    Args:
        raw_seed: A string (split on whitespace) or a list/tuple of strings.
            Non-string list members are ignored. Words are lowercased.

    Raises:
        InvalidSeedError: If the seed is missing or yields no words.
    """
    if raw_seed is None or (isinstance(raw_seed, (str, list, tuple)) and not raw_seed):
        raise InvalidSeedError('"seed" parameter is missing')

    if isinstance(raw_seed, str):
        words = raw_seed.lower().split()
    elif isinstance(raw_seed, (list, tuple)):
        words = [w.strip().lower() for w in raw_seed if isinstance(w, str)]
        words = [w for w in words if w]
    else:
        words = []

    if not words:
        raise InvalidSeedError('"seed" parameter is invalid')
    return words
