#!/usr/bin/env python3
"""Exceptions raised by pseudoword."""


class InvalidSeedError(ValueError):
    """No eligible training words could be derived from the seed."""
