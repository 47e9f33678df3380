"""Locale state around the resolver engine.

A factory holds app-wide options (a fallback dictionary and startup locale).
Providers created from it own the active locale, build one translator per
locale on demand, and notify subscribers when the locale changes.

Usage:
    translation = translation_factory(default_locale="en")
    provider = translation.provider(translations={"en": EN, "es": ES})

    with provider.activate():
        ctx = translation.use_translation()
        ctx.translate("greeting", {"name": "Ada"})
        ctx.set_locale("es")

Each factory has its own context slot, so providers from different
factories never see each other.
"""

import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from functools import wraps
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from core import Dictionary, TranslateFunction, TranslationContext
from lexicon.config import get_default_locale
from template_resolver import translate_function_factory

logger = logging.getLogger(__name__)

Subscriber = Callable[[TranslationContext], None]


class LexiconError(Exception):
    """Base class for locale/provider errors."""


class MissingTranslationError(LexiconError, LookupError):
    """No dictionary for the requested locale and no default translation."""

    def __init__(self, locale: str | None):
        self.locale = locale
        super().__init__(f'Translation dictionary for locale "{locale}" not provided.')


class TranslationScopeError(LexiconError, RuntimeError):
    """Translation context requested outside an active provider."""


def _check_dictionary(dictionary: Mapping[str, Any], prefix: str = "") -> None:
    """Ensure a dictionary only holds string leaves and nested mappings."""
    for key, value in dictionary.items():
        path = f"{prefix}{key}"
        if isinstance(value, Mapping):
            _check_dictionary(value, f"{path}.")
        elif not isinstance(value, str):
            raise ValueError(
                f"Value at '{path}' must be a string or mapping, got {type(value).__name__}"
            )


class TranslationOptions(BaseModel):
    """Factory-wide options."""

    model_config = ConfigDict(frozen=True)

    # Used when the active locale has no dictionary of its own
    default_translation: Mapping[str, Any] | None = None
    # Startup locale when a provider doesn't name one
    default_locale: str | None = None

    @field_validator("default_translation")
    @classmethod
    def _valid_dictionary(cls, value: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
        if value is not None:
            _check_dictionary(value)
        return value


class ProviderProps(BaseModel):
    """Per-provider inputs: dictionaries keyed by locale code."""

    model_config = ConfigDict(frozen=True)

    translations: Mapping[str, Mapping[str, Any]] = {}
    default_locale: str | None = None

    @field_validator("translations")
    @classmethod
    def _valid_dictionaries(
        cls, value: Mapping[str, Mapping[str, Any]]
    ) -> Mapping[str, Mapping[str, Any]]:
        for locale, dictionary in value.items():
            _check_dictionary(dictionary, f"{locale}:")
        return value


class TranslationProvider:
    """Owns the active locale and the translators built for it.

    Translators are cached per locale; a dictionary is looked up as
    translations[locale], falling back to the factory's default_translation.
    """

    def __init__(
        self,
        factory: "TranslationFactory",
        translations: Mapping[str, Dictionary] | None = None,
        default_locale: str | None = None,
    ):
        props = ProviderProps(translations=translations or {}, default_locale=default_locale)
        self._factory = factory
        self._translations = props.translations
        self._lock = threading.Lock()
        self._translators: dict[str, TranslateFunction] = {}
        self._subscribers: list[Subscriber] = []

        locale = (
            props.default_locale
            or factory.options.default_locale
            or get_default_locale()
        )
        self._translate = self.translator_for(locale)
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def locales(self) -> list[str]:
        """Locale codes with a dictionary of their own."""
        return list(self._translations)

    @property
    def translate(self) -> TranslateFunction:
        return self._translate

    @property
    def context(self) -> TranslationContext:
        with self._lock:
            return TranslationContext(
                locale=self._locale,
                translate=self._translate,
                set_locale=self.set_locale,
            )

    def translator_for(self, locale: str) -> TranslateFunction:
        """Get (building once) the translator for any locale.

        Raises:
            MissingTranslationError: locale has no dictionary and the
                factory has no default_translation
        """
        with self._lock:
            translator = self._translators.get(locale)
            if translator is not None:
                return translator

            dictionary = self._translations.get(locale)
            if dictionary is None:
                dictionary = self._factory.options.default_translation
            if dictionary is None:
                raise MissingTranslationError(locale)

            translator = translate_function_factory(dictionary)
            self._translators[locale] = translator
            logger.debug("[TRANSLATOR] Built translator for locale=%s", locale)
            return translator

    def set_locale(self, locale: str) -> None:
        """Switch the active locale and notify subscribers.

        The locale is validated before any state changes, so a failed
        switch leaves the previous locale active.
        """
        translate = self.translator_for(locale)
        with self._lock:
            previous = self._locale
            if previous == locale:
                return
            self._locale = locale
            self._translate = translate
            subscribers = list(self._subscribers)

        logger.info("[LOCALE] Switched %s -> %s", previous, locale)
        context = self.context
        for callback in subscribers:
            callback(context)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call callback(context) after every locale change.

        Returns:
            Function that removes the subscription
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    @contextmanager
    def activate(self) -> Iterator[TranslationContext]:
        """Make this provider current for its factory within the block."""
        with self._factory.scope(self):
            yield self.context


class TranslationFactory:
    """Creates providers and gives consumers access to the current one."""

    def __init__(self, options: TranslationOptions):
        self.options = options
        self._current: ContextVar[TranslationProvider | None] = ContextVar(
            f"lexicon_provider_{id(self)}", default=None
        )

    def provider(
        self,
        translations: Mapping[str, Dictionary] | None = None,
        default_locale: str | None = None,
    ) -> TranslationProvider:
        """Create a provider bound to this factory."""
        return TranslationProvider(self, translations, default_locale)

    def current_provider(self) -> TranslationProvider | None:
        """Provider activated in the current context, if any."""
        return self._current.get()

    @contextmanager
    def scope(self, provider: TranslationProvider) -> Iterator[TranslationProvider]:
        """Make provider current for this factory within the block."""
        token = self._current.set(provider)
        try:
            yield provider
        finally:
            self._current.reset(token)

    def use_translation(self) -> TranslationContext:
        """Get the current provider's context.

        Raises:
            TranslationScopeError: called outside provider.activate()
        """
        provider = self.current_provider()
        if provider is None:
            raise TranslationScopeError(
                "use_translation must be used within a TranslationProvider."
            )
        return provider.context

    def consumer(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Decorator passing the current TranslationContext as first argument.

        Usage:
            @translation.consumer
            def render_title(ctx, count):
                return ctx.translate("items", {"n": count})
        """

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            provider = self.current_provider()
            if provider is None:
                raise TranslationScopeError(
                    "TranslationConsumer must be used within a TranslationProvider."
                )
            return func(provider.context, *args, **kwargs)

        return wrapper


def translation_factory(
    default_translation: Dictionary | None = None,
    default_locale: str | None = None,
) -> TranslationFactory:
    """Create a TranslationFactory from factory-wide options."""
    options = TranslationOptions(
        default_translation=default_translation,
        default_locale=default_locale,
    )
    return TranslationFactory(options)
