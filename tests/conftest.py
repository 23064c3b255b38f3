"""Shared fixtures for site-core tests."""

import pytest

SETTINGS_ENV_VARS = [
    "DEFAULT_LANG",
    "LOCALE_DIR",
    "STRICT_LOCALES",
    "TRACING_ENABLED",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and .env file."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def partial_locale_dir(tmp_path):
    """Directory holding a French locale that only covers two keys."""
    locale_dir = tmp_path / "locales"
    locale_dir.mkdir()
    (locale_dir / "fr.yaml").write_text(
        'nav.blog: "Blog"\nnav.about: "À propos"\n',
        encoding="utf-8",
    )
    return locale_dir
