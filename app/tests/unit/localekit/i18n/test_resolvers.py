"""Tests for localekit.i18n.resolvers module."""

import pytest

from localekit.i18n import I18nContext, LocaleResolver, RuntimeConfig
from localekit.i18n.resolvers import default_locales


@pytest.fixture
def context():
    """Context with locale "en" and fallbacks disabled."""
    return I18nContext(config=RuntimeConfig())


@pytest.fixture
def resolver(context):
    return LocaleResolver(context)


@pytest.mark.unit
class TestDefaultLocales:
    """Tests for the built-in candidate list."""

    def test_current_locale_only(self, context):
        """Without fallbacks only the current locale is probed."""
        assert default_locales(context) == ["en"]

    def test_inline_locale_replaces_current(self, context):
        """An inline locale is used instead of the current locale."""
        assert default_locales(context, "pt-BR") == ["pt-BR"]

    def test_region_expansion_with_fallbacks(self, context):
        """de-DE expands to de, then the default locale."""
        context.config.fallbacks = True
        assert default_locales(context, "de-DE") == ["de-DE", "de", "en"]

    def test_no_region_expansion_without_fallbacks(self, context):
        """Base languages are only added when fallbacks are enabled."""
        context.config.locale = "de-DE"
        assert default_locales(context) == ["de-DE"]

    def test_no_duplicates(self, context):
        """A default locale equal to the requested one appears once."""
        context.config.fallbacks = True
        context.config.locale = "en"
        assert default_locales(context) == ["en"]

    def test_default_locale_region_expanded(self, context):
        """The default locale is expanded like any other seed."""
        context.config.fallbacks = True
        context.config.default_locale = "en-US"
        assert default_locales(context, "fr-CA") == ["fr-CA", "fr", "en-US", "en"]

    def test_shared_base_language_listed_once(self, context):
        """de-AT with default de-DE lists de once, after de-AT."""
        context.config.fallbacks = True
        context.config.default_locale = "de-DE"
        assert default_locales(context, "de-AT") == ["de-AT", "de", "de-DE"]

    def test_empty_configuration_defaults_to_en(self, context):
        """No inline, current or default locale yields ["en"]."""
        context.config.locale = None
        context.config.default_locale = ""
        context.config.fallbacks = True
        assert default_locales(context) == ["en"]

    def test_current_locale_unset_uses_default_with_fallbacks(self, context):
        """With no current locale the default locale is still probed."""
        context.config.locale = None
        context.config.default_locale = "fr"
        context.config.fallbacks = True
        assert default_locales(context) == ["fr"]


@pytest.mark.unit
class TestLocaleResolver:
    """Tests for LocaleResolver rule registration and selection."""

    def test_resolve_uses_default_rule(self, resolver):
        """resolve() falls back to the built-in list."""
        assert resolver.resolve() == ["en"]

    def test_get_alias(self, resolver):
        """get() is an alias of resolve()."""
        assert resolver.get("de") == resolver.resolve("de")

    def test_static_rule(self, resolver):
        """A list registered for a locale is returned as is."""
        resolver.register("wk", ["en"])
        assert resolver.resolve("wk") == ["en"]

    def test_callable_rule_receives_inline_locale(self, resolver):
        """Callable rules get the inline locale argument."""
        seen = []

        def rule(locale):
            seen.append(locale)
            return [locale, "en"]

        resolver.register("wk", rule)
        assert resolver.resolve("wk") == ["wk", "en"]
        assert seen == ["wk"]

    def test_callable_rule_single_string(self, resolver):
        """A rule returning one locale is wrapped in a list."""
        resolver.register("wk", lambda locale: "en")
        assert resolver.resolve("wk") == ["en"]

    def test_callable_rule_output_deduplicated(self, resolver):
        """Duplicates in a custom rule's output are dropped, order kept."""
        resolver.register("wk", lambda locale: ["wk", "en", "wk", "en"])
        assert resolver.resolve("wk") == ["wk", "en"]

    def test_current_locale_rule_used_without_inline_rule(self, resolver, context):
        """The current locale's rule applies when the inline one has none."""
        context.config.locale = "wk"
        resolver.register("wk", ["en"])
        assert resolver.resolve() == ["en"]
        assert resolver.resolve("fr") == ["en"]

    def test_inline_rule_beats_current_rule(self, resolver, context):
        """The inline locale's rule takes precedence."""
        context.config.locale = "wk"
        resolver.register("wk", ["en"])
        resolver.register("fr", ["fr", "de"])
        assert resolver.resolve("fr") == ["fr", "de"]

    def test_unregister(self, resolver):
        """unregister() restores the built-in rule."""
        resolver.register("wk", ["en"])
        resolver.unregister("wk")
        assert resolver.resolve("wk") == ["wk"]

    def test_register_non_callable_raises(self, resolver):
        """Registering something that is not a rule fails immediately."""
        with pytest.raises(TypeError):
            resolver.register("wk", 42)

    def test_register_plain_string_raises(self, resolver):
        """A bare string is not a list of locales."""
        with pytest.raises(TypeError):
            resolver.register("wk", "en")

    def test_register_list_with_non_strings_raises(self, resolver):
        """Static rules must contain only locale strings."""
        with pytest.raises(TypeError):
            resolver.register("wk", ["en", 1])

    def test_rules_stored_on_context(self, resolver, context):
        """Rules live on the context, not on the resolver instance."""
        resolver.register("wk", ["en"])
        assert LocaleResolver(context).resolve("wk") == ["en"]
