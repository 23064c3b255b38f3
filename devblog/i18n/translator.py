"""Translation Resolver: (language, key) to a display string."""

import logging
from collections.abc import Callable

from devblog.registry.locale_registry import LocaleRegistry

logger = logging.getLogger(__name__)

Resolver = Callable[[str], str | None]


class Translator:
    """Resolve UI strings against a Locale Registry.

    Lookups never raise. The requested language wins when it defines a
    non-empty value for the key; otherwise the default language is
    consulted, and a key missing there too resolves to None.
    """

    def __init__(self, registry: LocaleRegistry):
        self.registry = registry

    @property
    def default_language(self) -> str:
        return self.registry.default_language

    def translate(self, language: str, key: str) -> str | None:
        """Translate a key into the given language.

        Args:
            language: Language code; unknown codes behave like the default.
            key: String key to look up.

        Returns:
            Localized string, or None if no dictionary defines the key.
        """
        strings = self.registry.get(language)
        if strings is not None:
            value = strings.get(key)
            if value:
                return value

        value = self.registry.default_dictionary.get(key)
        if value is None:
            logger.debug("No translation for key=%s, lang=%s", key, language)
        elif language != self.default_language:
            logger.debug("Falling back to %s for key=%s, lang=%s", self.default_language, key, language)
        return value

    def use_translations(self, language: str) -> Resolver:
        """Bind a language once and return a single-argument lookup."""

        def t(key: str) -> str | None:
            return self.translate(language, key)

        return t


def make_resolver(registry: LocaleRegistry, language: str | None = None) -> Resolver:
    """Build a key lookup bound to one language.

    Args:
        registry: The Locale Registry to resolve against.
        language: Runtime language; defaults to the registry's default language.

    Returns:
        A function mapping a key to its localized string (or None).
    """
    return Translator(registry).use_translations(language or registry.default_language)
