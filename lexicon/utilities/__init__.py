"""Utilities - logging."""

from lexicon.utilities.logging import setup_logging

__all__ = [
    "setup_logging",
]
