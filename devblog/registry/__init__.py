"""Registry for the per-language UI string tables."""

from devblog.registry.locale_registry import (
    LocaleDictionary,
    LocaleRegistry,
    load_locales_from_directory,
)

__all__ = [
    "LocaleDictionary",
    "LocaleRegistry",
    "load_locales_from_directory",
]
