"""Core types for Lexicon.

All per-lookup data structures are dataclasses with attribute access.
"""

from core.types import (
    DataPayload,
    Dictionary,
    ResolutionPath,
    TranslateFunction,
    TranslationContext,
)

__all__ = [
    "DataPayload",
    "Dictionary",
    "ResolutionPath",
    "TranslateFunction",
    "TranslationContext",
]
