"""Internationalization support module."""

from pathlib import Path

from devblog.registry.locale_registry import LocaleRegistry, load_locales_from_directory

from .cs import STRINGS as CS_STRINGS
from .en import STRINGS as EN_STRINGS
from .translator import Resolver, Translator, make_resolver
from .zh_cn import STRINGS as ZH_CN_STRINGS

__all__ = [
    "BUNDLED_LOCALES",
    "CS_STRINGS",
    "EN_STRINGS",
    "ZH_CN_STRINGS",
    "Resolver",
    "Translator",
    "build_default_registry",
    "make_resolver",
]

BUNDLED_LOCALES = {
    "en": EN_STRINGS,
    "zh-cn": ZH_CN_STRINGS,
    "cs": CS_STRINGS,
}


def build_default_registry(
    default_language: str = "en",
    locale_dir: str | Path | None = None,
) -> LocaleRegistry:
    """Build the registry of bundled UI strings.

    Args:
        default_language: Fallback language code (default: en).
        locale_dir: Optional directory of extra YAML locales.

    Returns:
        Registry over the bundled en, zh-cn and cs dictionaries plus any
        languages found in ``locale_dir``.

    Raises:
        ValueError: If the default language is unknown, or a YAML file
            redefines a bundled language.
    """
    locales = dict(BUNDLED_LOCALES)
    if locale_dir is not None:
        for language, strings in load_locales_from_directory(locale_dir).items():
            if language in locales:
                raise ValueError(f"Language '{language}' is already bundled")
            locales[language] = strings
    return LocaleRegistry(locales, default_language)
