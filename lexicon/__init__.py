"""Lexicon - locale-aware translation on top of the resolver engine."""

from lexicon.provider import (
    LexiconError,
    MissingTranslationError,
    ProviderProps,
    TranslationFactory,
    TranslationOptions,
    TranslationProvider,
    TranslationScopeError,
    translation_factory,
)

__version__ = "1.0.0"

__all__ = [
    "LexiconError",
    "MissingTranslationError",
    "ProviderProps",
    "TranslationFactory",
    "TranslationOptions",
    "TranslationProvider",
    "TranslationScopeError",
    "translation_factory",
]
