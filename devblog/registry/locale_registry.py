"""Locale Registry holding the per-language UI string tables."""

from collections.abc import ItemsView, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

LocaleDictionary = Mapping[str, str]


class LocaleRegistry:
    """Registry of Locale Dictionaries keyed by language code.

    The registry is fixed at construction: every dictionary is copied
    into a read-only mapping, so a built registry can be shared freely
    between call sites and threads. The default language must be one of
    the registered languages.
    """

    def __init__(
        self,
        locales: Mapping[str, Mapping[str, str]],
        default_language: str,
    ):
        if default_language not in locales:
            raise ValueError(
                f"Default language '{default_language}' is not registered "
                f"(available: {', '.join(sorted(locales)) or 'none'})"
            )
        self._locales: Mapping[str, LocaleDictionary] = MappingProxyType(
            {lang: MappingProxyType(dict(strings)) for lang, strings in locales.items()}
        )
        self._default_language = default_language

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def default_dictionary(self) -> LocaleDictionary:
        return self._locales[self._default_language]

    def __contains__(self, language: object) -> bool:
        return language in self._locales

    def __len__(self) -> int:
        return len(self._locales)

    def get(self, language: str) -> LocaleDictionary | None:
        """Get the dictionary for a language.

        Args:
            language: The language code.

        Returns:
            The Locale Dictionary, or None if the language is not registered.
        """
        return self._locales.get(language)

    def get_or_raise(self, language: str) -> LocaleDictionary:
        """Get the dictionary for a language, raising if not found.

        Args:
            language: The language code.

        Returns:
            The Locale Dictionary.

        Raises:
            KeyError: If the language is not registered.
        """
        if language not in self._locales:
            raise KeyError(f"Language '{language}' not found")
        return self._locales[language]

    def list_languages(self) -> list[str]:
        """List all registered language codes."""
        return list(self._locales.keys())

    def items(self) -> ItemsView[str, LocaleDictionary]:
        """List (language, dictionary) pairs in registration order."""
        return self._locales.items()


def load_locales_from_directory(directory: str | Path) -> dict[str, dict[str, str]]:
    """Load YAML locale files from a directory.

    Each ``*.yaml``/``*.yml`` file holds one flat key/value mapping;
    the file stem is the language code.

    Args:
        directory: Directory containing YAML files.

    Returns:
        Mapping of language code to its string table.

    Raises:
        FileNotFoundError: If the directory does not exist.
        ValueError: If two files define the same language or a file is malformed.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Locale directory not found: {directory}")

    locales: dict[str, dict[str, str]] = {}
    paths = sorted([*directory.glob("*.yaml"), *directory.glob("*.yml")])
    for path in paths:
        language = path.stem
        if language in locales:
            raise ValueError(f"Language '{language}' defined twice ({path.name})")
        locales[language] = _load_locale_file(path)
    return locales


def _load_locale_file(path: Path) -> dict[str, str]:
    """Load one flat string table from a YAML file."""
    with open(path, encoding="utf-8") as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Locale file {path.name} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Locale file {path.name} must contain a mapping")

    strings: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(
                f"Locale file {path.name}: entry {key!r} must map a string key to a string"
            )
        strings[key] = value
    return strings
