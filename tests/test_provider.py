"""Tests for locale state: factory, provider, hook and consumer."""

import threading
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from lexicon import (
    MissingTranslationError,
    TranslationScopeError,
    translation_factory,
)

EN = {"greeting": "Hello {name}", "items": "{n} item", "items_plural": "{n} items"}
ES = {"greeting": "Hola {name}", "items": "{n} artículo", "items_plural": "{n} artículos"}
FALLBACK = {"greeting": "Hi {name}"}


@pytest.fixture
def factory():
    return translation_factory(default_locale="en")


@pytest.fixture
def provider(factory):
    return factory.provider(translations={"en": EN, "es": ES})


class TestProviderLocale:
    def test_uses_factory_default_locale(self, provider):
        assert provider.locale == "en"
        assert provider.translate("greeting", {"name": "Ada"}) == "Hello Ada"

    def test_provider_locale_overrides_factory(self, factory):
        provider = factory.provider(translations={"en": EN, "es": ES}, default_locale="es")
        assert provider.locale == "es"
        assert provider.translate("items", {"n": 2}) == "2 artículos"

    @patch("lexicon.provider.get_default_locale", return_value="es")
    def test_configured_locale_when_none_named(self, mock_locale):
        provider = translation_factory().provider(translations={"es": ES})
        assert provider.locale == "es"

    def test_locales_lists_dictionaries(self, provider):
        assert sorted(provider.locales) == ["en", "es"]


class TestMissingLocale:
    def test_missing_locale_without_default_raises(self, factory):
        with pytest.raises(MissingTranslationError, match='locale "en" not provided'):
            factory.provider(translations={"es": ES})

    def test_missing_locale_uses_default_translation(self):
        factory = translation_factory(default_translation=FALLBACK, default_locale="fr")
        provider = factory.provider(translations={"en": EN})
        assert provider.translate("greeting", {"name": "Ada"}) == "Hi Ada"

    def test_set_unknown_locale_keeps_previous(self, provider):
        with pytest.raises(MissingTranslationError):
            provider.set_locale("de")
        assert provider.locale == "en"
        assert provider.translate("greeting", {"name": "Ada"}) == "Hello Ada"

    def test_error_is_a_lookup_error(self, provider):
        with pytest.raises(LookupError):
            provider.translator_for("xx")


class TestSetLocale:
    def test_switches_translator(self, provider):
        provider.set_locale("es")
        assert provider.locale == "es"
        assert provider.translate("greeting", {"name": "Ada"}) == "Hola Ada"

    def test_translators_are_cached(self, provider):
        assert provider.translator_for("es") is provider.translator_for("es")

    def test_translator_for_does_not_switch(self, provider):
        assert provider.translator_for("es")("items", {"n": 1}) == "1 artículo"
        assert provider.locale == "en"

    def test_subscribers_notified(self, provider):
        callback = MagicMock()
        provider.subscribe(callback)
        provider.set_locale("es")
        callback.assert_called_once()
        ctx = callback.call_args.args[0]
        assert ctx.locale == "es"
        assert ctx.translate("greeting", {"name": "Bo"}) == "Hola Bo"

    def test_same_locale_does_not_notify(self, provider):
        callback = MagicMock()
        provider.subscribe(callback)
        provider.set_locale("en")
        callback.assert_not_called()

    def test_unsubscribe(self, provider):
        callback = MagicMock()
        unsubscribe = provider.subscribe(callback)
        unsubscribe()
        unsubscribe()
        provider.set_locale("es")
        callback.assert_not_called()


class TestUseTranslation:
    def test_outside_provider_raises(self, factory):
        with pytest.raises(TranslationScopeError, match="use_translation must be used"):
            factory.use_translation()

    def test_inside_provider(self, factory, provider):
        with provider.activate() as ctx:
            assert ctx.locale == "en"
            assert factory.use_translation().translate("items", {"n": 3}) == "3 items"

    def test_set_locale_through_context(self, factory, provider):
        with provider.activate():
            factory.use_translation().set_locale("es")
            assert factory.use_translation().locale == "es"
        assert provider.locale == "es"

    def test_scope_ends_with_block(self, factory, provider):
        with provider.activate():
            pass
        with pytest.raises(TranslationScopeError):
            factory.use_translation()

    def test_nested_providers(self, factory, provider):
        inner = factory.provider(translations={"en": EN, "es": ES}, default_locale="es")
        with provider.activate():
            with inner.activate():
                assert factory.use_translation().locale == "es"
            assert factory.use_translation().locale == "en"

    def test_factories_are_isolated(self, provider):
        other = translation_factory(default_locale="en")
        with provider.activate():
            with pytest.raises(TranslationScopeError):
                other.use_translation()


class TestConsumer:
    def test_receives_context(self, factory, provider):
        @factory.consumer
        def title(ctx, count):
            return ctx.translate("items", {"n": count})

        with provider.activate():
            assert title(5) == "5 items"

    def test_outside_provider_raises(self, factory):
        @factory.consumer
        def title(ctx):
            return ctx.locale

        with pytest.raises(TranslationScopeError, match="TranslationConsumer must be used"):
            title()


class TestOptionsValidation:
    def test_rejects_non_string_leaf(self):
        with pytest.raises(ValidationError):
            translation_factory(default_translation={"count": 3})

    def test_rejects_bad_nested_leaf_in_translations(self, factory):
        with pytest.raises(ValidationError, match="en:nested.bad"):
            factory.provider(translations={"en": {"nested": {"bad": ["x"]}}})

    def test_options_are_frozen(self, factory):
        with pytest.raises(ValidationError):
            factory.options.default_locale = "es"


class TestFactoryScope:
    def test_current_provider_outside_scope(self, factory):
        assert factory.current_provider() is None

    def test_activate_sets_current_provider(self, factory, provider):
        with provider.activate():
            assert factory.current_provider() is provider
        assert factory.current_provider() is None

    def test_scope_resets_after_error(self, factory, provider):
        with pytest.raises(ValueError):
            with factory.scope(provider):
                raise ValueError("boom")
        assert factory.current_provider() is None


class TestConcurrentAccess:
    def test_parallel_set_locale_and_translator_for(self, provider):
        locales = ["en", "es"] * 20
        barrier = threading.Barrier(len(locales))
        built = []

        def worker(locale):
            barrier.wait()
            built.append((locale, provider.translator_for(locale)))
            provider.set_locale(locale)

        threads = [threading.Thread(target=worker, args=(locale,)) for locale in locales]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # one translator per locale, shared by every thread
        for locale in ("en", "es"):
            translators = {id(t) for loc, t in built if loc == locale}
            assert translators == {id(provider.translator_for(locale))}

        # active locale and translator agree
        ctx = provider.context
        assert ctx.locale in ("en", "es")
        assert ctx.translate is provider.translator_for(ctx.locale)
